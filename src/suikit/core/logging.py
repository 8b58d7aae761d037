"""Logging setup for suikit entry points."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV_VAR = "SUIKIT_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging for the CLI.

    Args:
        level: Level name; defaults to $SUIKIT_LOG_LEVEL, then WARNING.
    """
    level_name = (level or os.getenv(LOG_LEVEL_ENV_VAR, "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format=LOG_FORMAT,
    )
