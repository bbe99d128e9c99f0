"""Logging configuration for the postindex CLI."""

from __future__ import annotations

import logging
import os
from typing import Final

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["configure_logging", "console"]

LOG_LEVEL_ENV: Final[str] = "POSTINDEX_LOG_LEVEL"

console = Console()


def _env_level() -> int:
    level = logging.getLevelName(os.getenv(LOG_LEVEL_ENV, "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(*, verbose: bool = False) -> None:
    """Route root logging through a single Rich handler.

    ``verbose`` forces DEBUG; otherwise ``POSTINDEX_LOG_LEVEL`` decides.
    """
    root_logger = logging.getLogger()
    if not any(isinstance(handler, RichHandler) for handler in root_logger.handlers):
        handler = RichHandler(console=console, show_path=False, markup=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(handler)

    root_logger.setLevel(logging.DEBUG if verbose else _env_level())
