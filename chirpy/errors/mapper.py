"""Error response mapping for the web interface.

Converts structured ChirpyError exceptions into an HTTP status code and the
single JSON error envelope ``{"error": "<message>"}`` used by every endpoint.
"""

from typing import Dict

from chirpy.exceptions import ChirpyError, ValidationError
from chirpy.logger import session_logger as logger


def get_error_code(error: ChirpyError) -> str:
    """Extract error code from exception class name.

    Converts class names like ChirpTooLongError to CHIRP_TOO_LONG.
    """
    name = error.__class__.__name__
    # Remove 'Error' suffix
    if name.endswith("Error"):
        name = name[:-5]
    # Convert CamelCase to UPPER_SNAKE_CASE
    result = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            result.append("_")
        result.append(char.upper())
    return "".join(result)


def get_status_code(error: ChirpyError) -> int:
    """Map an exception onto an HTTP status code.

    Client input problems are 400; everything else is a server fault.
    """
    if isinstance(error, ValidationError):
        return 400
    return 500


def error_to_web_response(error: ChirpyError) -> Dict[str, str]:
    """Convert error to the web API error envelope.

    Args:
        error: The exception to convert

    Returns:
        Dictionary suitable for a JSON response body
    """
    status = get_status_code(error)
    log = logger.warning if status < 500 else logger.error
    log(
        "Request failed",
        error_code=get_error_code(error),
        code=error.code,
        status=status,
        details=error.details,
    )
    return {"error": error.message}
