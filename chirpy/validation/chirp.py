"""Chirp validation and censoring.

A chirp is accepted when its body decodes as ``{"body": "<text>"}`` and is
at most MAX_CHIRP_LENGTH characters long. Accepted chirps have forbidden
words replaced with CENSOR_MASK before being echoed back.
"""

from __future__ import annotations

from pydantic import BaseModel, StrictStr
from pydantic import ValidationError as SchemaError

from chirpy.exceptions import ChirpTooLongError, MalformedChirpError
from chirpy.logger import session_logger as logger

MAX_CHIRP_LENGTH = 140
PROFANE_WORDS = frozenset({"kerfuffle", "sharbert", "fornax"})
CENSOR_MASK = "****"


class ChirpInput(BaseModel):
    """Request payload for the validate endpoint."""

    body: StrictStr


class ChirpResult(BaseModel):
    """Successful validation payload."""

    cleaned_body: str


def censor_chirp(text: str) -> str:
    """Replace forbidden words with CENSOR_MASK.

    Words are separated by single spaces only, so empty words between
    consecutive spaces are kept and punctuation attached to a word stops it
    from matching.
    """
    words = text.split(" ")
    cleaned = [CENSOR_MASK if word.lower() in PROFANE_WORDS else word for word in words]
    return " ".join(cleaned)


def parse_chirp(raw_body: bytes | str) -> ChirpInput:
    """Decode a raw request body into a ChirpInput.

    Raises:
        MalformedChirpError: body is not a JSON object with a string ``body``
    """
    try:
        return ChirpInput.model_validate_json(raw_body)
    except SchemaError as e:
        raise MalformedChirpError(
            details={"errors": [err["type"] for err in e.errors()]}
        ) from e


def validate_chirp(raw_body: bytes | str) -> ChirpResult:
    """Parse, length-check and censor a chirp.

    Length is counted in characters (code points), not encoded bytes.

    Raises:
        MalformedChirpError: body does not decode into a chirp
        ChirpTooLongError: chirp is longer than MAX_CHIRP_LENGTH
    """
    chirp = parse_chirp(raw_body)

    length = len(chirp.body)
    if length > MAX_CHIRP_LENGTH:
        raise ChirpTooLongError(length=length, limit=MAX_CHIRP_LENGTH)

    cleaned = censor_chirp(chirp.body)
    if cleaned != chirp.body:
        logger.debug("Chirp censored", length=length)
    return ChirpResult(cleaned_body=cleaned)
