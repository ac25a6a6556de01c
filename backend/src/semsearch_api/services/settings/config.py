"""Runtime settings read from environment variables.

Env vars:
- RETRIEVAL_API_URL (default http://localhost:5001; NEXT_PUBLIC_API_URL accepted as fallback)
- RETRIEVAL_TIMEOUT_SECONDS (default 30)
- SEARCH_LIMIT (default 5)
- SEARCH_SIMILARITY_THRESHOLD (default 0.7)
- SEARCH_SYNTHESIZE=0|1 (default 1)
- CORS_ALLOW_ORIGINS (comma separated)

Settings are rebuilt on every call so tests can monkeypatch the environment.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Final


logger = logging.getLogger(__name__)

_DEFAULT_API_URL: Final[str] = "http://localhost:5001"
_DEFAULT_TIMEOUT_SECONDS: Final[float] = 30.0
_DEFAULT_SEARCH_LIMIT: Final[int] = 5
_DEFAULT_SIMILARITY_THRESHOLD: Final[float] = 0.7

_DEFAULT_CORS_ORIGINS: Final[tuple[str, ...]] = (
    "http://127.0.0.1:3000",
    "http://localhost:3000",
    "http://127.0.0.1:5173",
    "http://localhost:5173",
)


def _env(name: str, default: str | None = None) -> str | None:
    v = os.getenv(name)
    if v is None or v == "":
        return default
    return v


def _env_float(name: str, default: float) -> float:
    raw = _env(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("settings.invalid name=%s value=%r using_default=%s", name, raw, default)
        return default


def _env_int(name: str, default: int) -> int:
    raw = _env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("settings.invalid name=%s value=%r using_default=%s", name, raw, default)
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class RetrievalSettings:
    api_url: str
    timeout_seconds: float
    search_limit: int
    similarity_threshold: float
    synthesize: bool


def load_retrieval_settings() -> RetrievalSettings:
    api_url = _env("RETRIEVAL_API_URL") or _env("NEXT_PUBLIC_API_URL", _DEFAULT_API_URL) or _DEFAULT_API_URL

    timeout = _env_float("RETRIEVAL_TIMEOUT_SECONDS", _DEFAULT_TIMEOUT_SECONDS)
    if timeout <= 0:
        timeout = _DEFAULT_TIMEOUT_SECONDS

    limit = _env_int("SEARCH_LIMIT", _DEFAULT_SEARCH_LIMIT)
    if limit < 1:
        limit = _DEFAULT_SEARCH_LIMIT

    threshold = _env_float("SEARCH_SIMILARITY_THRESHOLD", _DEFAULT_SIMILARITY_THRESHOLD)
    if not 0.0 <= threshold <= 1.0:
        threshold = _DEFAULT_SIMILARITY_THRESHOLD

    return RetrievalSettings(
        api_url=api_url.rstrip("/"),
        timeout_seconds=timeout,
        search_limit=limit,
        similarity_threshold=threshold,
        synthesize=_env_bool("SEARCH_SYNTHESIZE", True),
    )


def cors_allow_origins() -> list[str]:
    raw = _env("CORS_ALLOW_ORIGINS")
    if raw is None:
        return list(_DEFAULT_CORS_ORIGINS)
    return [o.strip() for o in raw.split(",") if o.strip()]
