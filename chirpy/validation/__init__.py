"""Chirp validation."""

from chirpy.validation.chirp import (
    CENSOR_MASK,
    MAX_CHIRP_LENGTH,
    PROFANE_WORDS,
    ChirpInput,
    ChirpResult,
    censor_chirp,
    parse_chirp,
    validate_chirp,
)

__all__ = [
    "CENSOR_MASK",
    "MAX_CHIRP_LENGTH",
    "PROFANE_WORDS",
    "ChirpInput",
    "ChirpResult",
    "censor_chirp",
    "parse_chirp",
    "validate_chirp",
]
