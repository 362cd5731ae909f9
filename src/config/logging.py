"""Logging configuration for the HTTP service."""

from __future__ import annotations

import logging
import os


def configure_logging(level: str | None = None) -> None:
    """Configure Python logging for the process.

    Logs are for internal diagnostics only; error details are never echoed back to API clients.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # Per-request access lines duplicate the handler logs.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
