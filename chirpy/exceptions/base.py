"""Base exception classes for chirpy.

Every exception carries a machine-readable ``code``, a human-readable
``message`` and an optional ``details`` dict.
"""

from typing import Any, Dict, Optional


class ChirpyError(Exception):
    """Root of the chirpy exception hierarchy."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details: Dict[str, Any] = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"


class ValidationError(ChirpyError):
    """Raised when client input fails validation."""

    pass


class ConfigurationError(ChirpyError):
    """Raised when the service configuration is invalid."""

    pass


class SerializationError(ChirpyError):
    """Raised when a response payload cannot be encoded."""

    pass
