"""Configuration helpers for environment variables."""

import os
import logging
from typing import Optional

from dotenv import load_dotenv


logger = logging.getLogger(__name__)


DEFAULT_CORS_ORIGINS = ["http://localhost:3000"]
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

_FALSE_VALUES = {"0", "false", "no", "off"}


def load_env_file() -> None:
    """Load variables from a local .env file without overriding the environment."""
    load_dotenv(override=False)


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """Return a raw environment value or default."""
    return os.getenv(name, default)


def database_url() -> Optional[str]:
    """Return the database URL, or None when the in-memory store should be used."""
    value = (get_env("DATABASE_URL", "") or "").strip()
    return value or None


def cors_origins() -> list[str]:
    """Return allowed CORS origins from CORS_ORIGINS (comma separated)."""
    raw_origins = get_env("CORS_ORIGINS", "") or ""
    parsed_origins = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]
    return parsed_origins or list(DEFAULT_CORS_ORIGINS)


def server_host() -> str:
    """Return the bind host for the HTTP server."""
    return (get_env("KAKEIBO_HOST", "") or "").strip() or DEFAULT_HOST


def server_port() -> int:
    """Return the bind port for the HTTP server."""
    raw_value = (get_env("KAKEIBO_PORT", "") or "").strip()
    if not raw_value:
        return DEFAULT_PORT
    try:
        return int(raw_value)
    except ValueError:
        logger.warning("invalid KAKEIBO_PORT=%r; using %d", raw_value, DEFAULT_PORT)
        return DEFAULT_PORT


def seed_sample_data() -> bool:
    """Return whether the in-memory store gets a sample transaction at startup."""
    raw_value = (get_env("KAKEIBO_SEED_SAMPLE", "") or "").strip().lower()
    return raw_value not in _FALSE_VALUES
