"""Custom exceptions for chirpy.

All exceptions share the ``code`` / ``message`` / ``details`` structure so
the error mapper can turn any of them into an HTTP response.
"""

from chirpy.exceptions.base import (
    ChirpyError,
    ValidationError,
    ConfigurationError,
    SerializationError,
)
from chirpy.exceptions.chirp import (
    ChirpError,
    MalformedChirpError,
    ChirpTooLongError,
    MALFORMED_CHIRP_MESSAGE,
    CHIRP_TOO_LONG_MESSAGE,
)

__all__ = [
    # Base exceptions
    "ChirpyError",
    "ValidationError",
    "ConfigurationError",
    "SerializationError",
    # Chirp exceptions
    "ChirpError",
    "MalformedChirpError",
    "ChirpTooLongError",
    "MALFORMED_CHIRP_MESSAGE",
    "CHIRP_TOO_LONG_MESSAGE",
]
