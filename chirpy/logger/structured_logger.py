"""Structured key/value logging on top of the standard logging module.

Every call takes a message plus arbitrary keyword fields:

    logger.info("Chirp validated", length=42, censored=1)

Text mode renders ``message key=value ...``; JSON mode renders one JSON
object per line. Secret-looking fields are redacted and oversized strings
are truncated in both modes.
"""

from __future__ import annotations

import json
import logging
import sys
from abc import ABC, abstractmethod
from typing import Any

REDACTED = "[REDACTED]"
TRUNCATED_SUFFIX = "...[truncated]"
MAX_FIELD_CHARS = 1024

_SECRET_MARKERS = ("password", "token", "api_key", "secret", "authorization", "db_url")


class Logger(ABC):
    """Interface every chirpy logger implements."""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None: ...

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None: ...

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None: ...

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None: ...

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None: ...


class _StdoutHandler(logging.StreamHandler):
    """Stream handler bound to whatever sys.stdout is at emit time."""

    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stdout
        super().emit(record)


def _sanitize(key: str, value: Any) -> Any:
    lowered = key.lower()
    if any(marker in lowered for marker in _SECRET_MARKERS):
        return REDACTED
    if isinstance(value, str) and len(value) > MAX_FIELD_CHARS:
        return value[:MAX_FIELD_CHARS] + TRUNCATED_SUFFIX
    return value


class StructuredLogger(Logger):
    """Logger that attaches sanitized keyword fields to every line."""

    _TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

    def __init__(
        self,
        name: str = "chirpy",
        level: int | str = logging.INFO,
        json_format: bool = False,
    ) -> None:
        self.name = name
        self._logger = logging.getLogger(name)
        self._logger.propagate = False
        self._handler = next(
            (h for h in self._logger.handlers if isinstance(h, _StdoutHandler)),
            None,
        )
        if self._handler is None:
            self._handler = _StdoutHandler()
            self._logger.addHandler(self._handler)
        self.configure(level=level, json_format=json_format)

    def configure(self, level: int | str = logging.INFO, json_format: bool = False) -> None:
        """Change level and output format."""
        if isinstance(level, str):
            level = level.upper()
        self._logger.setLevel(level)
        self.json_format = json_format
        fmt = "%(message)s" if json_format else self._TEXT_FORMAT
        self._handler.setFormatter(logging.Formatter(fmt))

    def _render(self, level: int, message: str, fields: dict[str, Any]) -> str:
        clean = {key: _sanitize(key, value) for key, value in fields.items()}
        if self.json_format:
            payload = {
                "level": logging.getLevelName(level),
                "logger": self.name,
                "message": message,
            }
            payload.update(clean)
            return json.dumps(payload, default=str, ensure_ascii=False)
        if not clean:
            return message
        rendered = " ".join(f"{key}={value}" for key, value in clean.items())
        return f"{message} {rendered}"

    def _log(self, level: int, message: str, fields: dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        self._logger.log(level, self._render(level, message, fields))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, kwargs)


class ConsoleLogger(StructuredLogger):
    """Human-readable console logger used as the default session logger."""

    def __init__(self, name: str = "chirpy", level: int | str = logging.INFO) -> None:
        super().__init__(name=name, level=level, json_format=False)
