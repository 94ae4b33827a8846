"""Logging configuration helpers."""

from __future__ import annotations

import logging

from .config import DEFAULT_LOG_LEVEL


_LOGGING_CONFIGURED = False


def setup_logging(level: str | None = None) -> None:
    """Configure root logging once; later calls only adjust the level."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        if level:
            logging.getLogger().setLevel(level.upper())
        return

    logging.basicConfig(
        level=(level or DEFAULT_LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # asyncio logs every subprocess transport at DEBUG
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    _LOGGING_CONFIGURED = True
