"""Runtime configuration for chirpy.

Values come from the process environment, optionally seeded from a ``.env``
file. Variables already present in the environment take precedence over the
file.

Environment variables:
    CHIRPY_HOST           - bind address (default 0.0.0.0)
    CHIRPY_PORT / PORT    - listen port (default 8080)
    CHIRPY_FILEPATH_ROOT  - static file root directory (default "app")
    DB_URL                - database connection string (not used by handlers)
    CHIRPY_LOG_LEVEL      - DEBUG, INFO, WARNING, ERROR, CRITICAL (default INFO)
    CHIRPY_JSON_LOGS      - emit JSON log lines when truthy (default false)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from chirpy.exceptions import ConfigurationError

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_FILEPATH_ROOT = "app"
DEFAULT_LOG_LEVEL = "INFO"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ChirpyConfig:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    filepath_root: str = DEFAULT_FILEPATH_ROOT
    db_url: str = ""
    log_level: str = DEFAULT_LOG_LEVEL
    json_logs: bool = False

    @property
    def db_configured(self) -> bool:
        return bool(self.db_url)


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError as e:
        raise ConfigurationError(
            "INVALID_PORT", f"Port must be an integer, got {raw!r}", {"value": raw}
        ) from e
    if not 1 <= port <= 65535:
        raise ConfigurationError(
            "INVALID_PORT", f"Port must be between 1 and 65535, got {port}", {"value": raw}
        )
    return port


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in _LOG_LEVELS:
        raise ConfigurationError(
            "INVALID_LOG_LEVEL",
            f"Log level must be one of {', '.join(_LOG_LEVELS)}, got {raw!r}",
            {"value": raw},
        )
    return level


def load_config(env_file: str | Path | None = None) -> ChirpyConfig:
    """Build a ChirpyConfig from the environment.

    Args:
        env_file: Optional path to a .env file. When omitted, python-dotenv
            searches for one starting from the working directory.

    Raises:
        ConfigurationError: If a value cannot be parsed
    """
    if env_file is not None:
        load_dotenv(env_file, override=False)
    else:
        load_dotenv(override=False)

    raw_port = os.environ.get("CHIRPY_PORT") or os.environ.get("PORT") or str(DEFAULT_PORT)

    return ChirpyConfig(
        host=os.environ.get("CHIRPY_HOST") or DEFAULT_HOST,
        port=_parse_port(raw_port),
        filepath_root=os.environ.get("CHIRPY_FILEPATH_ROOT") or DEFAULT_FILEPATH_ROOT,
        db_url=os.environ.get("DB_URL", ""),
        log_level=_parse_log_level(os.environ.get("CHIRPY_LOG_LEVEL") or DEFAULT_LOG_LEVEL),
        json_logs=os.environ.get("CHIRPY_JSON_LOGS", "").strip().lower() in _TRUTHY,
    )
