"""Chirp-specific exceptions.

The messages are part of the public HTTP contract and are returned to
clients verbatim.
"""

from chirpy.exceptions.base import ValidationError

MALFORMED_CHIRP_MESSAGE = "Something went wrong"
CHIRP_TOO_LONG_MESSAGE = "Chirp is too long"


class ChirpError(ValidationError):
    """Base exception for chirp validation failures."""

    pass


class MalformedChirpError(ChirpError):
    """Raised when the request body does not decode into a chirp."""

    def __init__(self, details=None):
        super().__init__("MALFORMED_CHIRP", MALFORMED_CHIRP_MESSAGE, details)


class ChirpTooLongError(ChirpError):
    """Raised when the chirp body exceeds the length limit."""

    def __init__(self, length: int, limit: int):
        super().__init__(
            "CHIRP_TOO_LONG",
            CHIRP_TOO_LONG_MESSAGE,
            {"length": length, "limit": limit},
        )
