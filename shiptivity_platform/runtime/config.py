"""
Configuration constants for the shiptivity service.
"""

import os
from pathlib import Path

DB_FILE = "clients.db"

# Environment variable names
DB_PATH_ENV = "SHIPTIVITY_DB_PATH"
CORS_ORIGINS_ENV = "SHIPTIVITY_CORS_ORIGINS"
LOG_LEVEL_ENV = "SHIPTIVITY_LOG_LEVEL"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3001
DEFAULT_LOG_LEVEL = "INFO"

API_PREFIX = "/api/v1"
WELCOME_MESSAGE = "SHIPTIVITY API. Read documentation to see API docs"


def get_db_path() -> Path:
    """Return the SQLite database path.

    ``SHIPTIVITY_DB_PATH`` overrides the default ``./clients.db``.
    """
    override = os.environ.get(DB_PATH_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return Path.cwd() / DB_FILE


def get_cors_origins() -> list[str]:
    """Return allowed CORS origins (comma separated env var, default ``*``)."""
    raw = os.environ.get(CORS_ORIGINS_ENV, "").strip()
    if not raw:
        return ["*"]
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def get_log_level() -> str:
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    return raw or DEFAULT_LOG_LEVEL
