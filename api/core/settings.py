"""
Environment-driven settings.

Everything is read lazily so tests can monkeypatch the environment.
"""

from __future__ import annotations

import logging
import os

DEFAULT_PAGE_SIZE = 20
DEFAULT_MAX_PAGE_SIZE = 100
API_VERSION_PREFIX = "/v1"


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    return raw.lower() not in {"0", "false", "no", "off"}


def self_url() -> str:
    return os.environ.get("SELF_URL", "").strip().rstrip("/")


def api_base_url() -> str:
    return f"{self_url()}{API_VERSION_PREFIX}"


def tolerate_storage_errors() -> bool:
    return _env_bool("RELATIONS_TOLERATE_STORAGE_ERRORS", False)


def page_size() -> int:
    size = _env_int("RECORDS_PAGE_SIZE", DEFAULT_PAGE_SIZE)
    return size if size > 0 else DEFAULT_PAGE_SIZE


def max_page_size() -> int:
    size = _env_int("RECORDS_MAX_PAGE_SIZE", DEFAULT_MAX_PAGE_SIZE)
    return size if size > 0 else DEFAULT_MAX_PAGE_SIZE


def log_level() -> int:
    name = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def cors_allow_origins() -> list[str]:
    raw = os.environ.get("CORS_ALLOW_ORIGINS", "").strip()
    if not raw:
        return ["http://localhost:5173", "http://127.0.0.1:5173"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
