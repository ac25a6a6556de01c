from __future__ import annotations

import logging
import os


def configure_logging() -> None:
    """Configure simple, low-noise console logging.

    Goals:
    - show each routed turn and backend call with its timing
    - keep output safe (no full message bodies, no backend payloads)

    Controlled by env vars:
    - LOG_LEVEL=DEBUG|INFO|WARNING|ERROR (default INFO)

    Note: uvicorn also has its own logging config; this sets up our app logger
    and a reasonable default root handler.
    """

    level_name = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    level = getattr(logging, level_name, logging.INFO)

    # Avoid double-config when imported multiple times.
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    if level >= logging.INFO:
        for noisy in ["httpx", "httpcore"]:
            logging.getLogger(noisy).setLevel(logging.WARNING)
