"""Root logger bootstrap for the API process and CLI entry points."""

from __future__ import annotations

import logging

_LOGGER_INITIALISED = False


def configure_logging(level: str) -> None:
    """Configure the root logger once; ``level`` comes from DateAPIConfig.log_level."""
    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        return
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _LOGGER_INITIALISED = True
