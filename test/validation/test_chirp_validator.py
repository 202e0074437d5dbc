"""Tests for chirp parsing, length checking and censoring."""

import json

import pytest

from chirpy.exceptions import (
    ChirpTooLongError,
    MalformedChirpError,
    ValidationError,
    CHIRP_TOO_LONG_MESSAGE,
    MALFORMED_CHIRP_MESSAGE,
)
from chirpy.validation import (
    CENSOR_MASK,
    MAX_CHIRP_LENGTH,
    PROFANE_WORDS,
    censor_chirp,
    parse_chirp,
    validate_chirp,
)


def _payload(body) -> bytes:
    return json.dumps({"body": body}).encode("utf-8")


class TestCensorChirp:
    """Tests for word replacement."""

    def test_clean_text_unchanged(self):
        text = "I had something interesting for breakfast"
        assert censor_chirp(text) == text

    def test_replaces_forbidden_word(self):
        result = censor_chirp("This is a kerfuffle opinion I need to share with the world")
        assert result == "This is a **** opinion I need to share with the world"

    @pytest.mark.parametrize("word", ["kerfuffle", "Kerfuffle", "KERFUFFLE", "kErFuFfLe"])
    def test_case_insensitive(self, word):
        assert censor_chirp(word) == CENSOR_MASK

    def test_replaces_every_forbidden_word(self):
        result = censor_chirp("Sharbert and fornax walk into a Kerfuffle")
        assert result == "**** and **** walk into a ****"

    def test_no_substring_matches(self):
        text = "kerfuffles sharbertly unfornax"
        assert censor_chirp(text) == text

    def test_punctuation_prevents_match(self):
        text = "what a kerfuffle! Sharbert."
        assert censor_chirp(text) == text

    def test_consecutive_spaces_preserved(self):
        assert censor_chirp("a  fornax   b") == "a  ****   b"

    def test_leading_and_trailing_spaces_preserved(self):
        assert censor_chirp(" sharbert ") == " **** "

    def test_tabs_are_not_separators(self):
        text = "fornax\tsharbert"
        assert censor_chirp(text) == text

    def test_empty_string(self):
        assert censor_chirp("") == ""

    def test_mask_is_not_forbidden(self):
        assert CENSOR_MASK.lower() not in PROFANE_WORDS

    def test_idempotent(self):
        once = censor_chirp("Fornax is a total KERFUFFLE of a sharbert")
        assert censor_chirp(once) == once


class TestParseChirp:
    """Tests for payload decoding."""

    def test_parses_body(self):
        assert parse_chirp(_payload("hello")).body == "hello"

    def test_accepts_str_input(self):
        assert parse_chirp('{"body": "hello"}').body == "hello"

    def test_ignores_extra_fields(self):
        assert parse_chirp(b'{"body": "hi", "extra": 1}').body == "hi"

    @pytest.mark.parametrize(
        "raw",
        [
            b"not json",
            b'{"body": "unterminated',
            b"",
            b"[]",
            b'"just a string"',
            b"{}",
            b'{"text": "wrong field"}',
            b'{"body": 42}',
            b'{"body": null}',
            b'{"body": ["a"]}',
            b'{"body": true}',
        ],
    )
    def test_malformed_input(self, raw):
        with pytest.raises(MalformedChirpError) as exc_info:
            parse_chirp(raw)
        assert exc_info.value.message == MALFORMED_CHIRP_MESSAGE
        assert exc_info.value.details["errors"]


class TestValidateChirp:
    """Tests for the full validation pipeline."""

    def test_returns_cleaned_body(self):
        result = validate_chirp(_payload("I love fornax"))
        assert result.cleaned_body == "I love ****"

    def test_empty_body_accepted(self):
        assert validate_chirp(_payload("")).cleaned_body == ""

    def test_exactly_max_length_accepted(self):
        body = "a" * MAX_CHIRP_LENGTH
        assert validate_chirp(_payload(body)).cleaned_body == body

    def test_one_over_max_length_rejected(self):
        with pytest.raises(ChirpTooLongError) as exc_info:
            validate_chirp(_payload("a" * (MAX_CHIRP_LENGTH + 1)))
        assert exc_info.value.message == CHIRP_TOO_LONG_MESSAGE
        assert exc_info.value.details == {"length": 141, "limit": MAX_CHIRP_LENGTH}

    def test_too_long_checked_before_censoring(self):
        body = ("kerfuffle " * 20).strip()
        assert len(body) > MAX_CHIRP_LENGTH
        with pytest.raises(ChirpTooLongError):
            validate_chirp(_payload(body))

    def test_length_counts_characters_not_bytes(self):
        # 140 two-byte characters: 280 bytes in UTF-8, 140 characters
        body = "é" * MAX_CHIRP_LENGTH
        assert validate_chirp(_payload(body)).cleaned_body == body

    def test_multibyte_over_limit_rejected(self):
        with pytest.raises(ChirpTooLongError):
            validate_chirp(_payload("é" * (MAX_CHIRP_LENGTH + 1)))

    def test_malformed_raises_validation_error(self):
        with pytest.raises(ValidationError):
            validate_chirp(b"{broken")

    def test_validating_output_is_noop(self):
        first = validate_chirp(_payload("Sharbert is fine but fornax is not"))
        second = validate_chirp(_payload(first.cleaned_body))
        assert second.cleaned_body == first.cleaned_body
