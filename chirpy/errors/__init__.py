"""Error handling utilities for chirpy."""

from chirpy.errors.mapper import (
    error_to_web_response,
    get_error_code,
    get_status_code,
)

__all__ = [
    "error_to_web_response",
    "get_error_code",
    "get_status_code",
]
