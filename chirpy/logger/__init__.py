"""Logger module for chirpy

Usage:
    from chirpy.logger import session_logger as logger

    logger.info("Server started", port=8080)

    # Or build a JSON logger
    from chirpy.logger import StructuredLogger
    logger = StructuredLogger(name="chirpy", json_format=True)
"""

import logging

from .structured_logger import Logger, StructuredLogger, ConsoleLogger

# Shared logger instance for modules that just need basic console logging
session_logger: StructuredLogger = ConsoleLogger(level=logging.DEBUG)


def configure_session_logger(level: str = "INFO", json_format: bool = False) -> StructuredLogger:
    """Reconfigure the shared session logger in place."""
    session_logger.configure(level=level, json_format=json_format)
    return session_logger


__all__ = [
    "Logger",
    "StructuredLogger",
    "ConsoleLogger",
    "session_logger",
    "configure_session_logger",
]
