"""Helpers for configuring package-wide logging."""

from __future__ import annotations

import logging
from typing import Mapping

from rich.console import Console
from rich.logging import RichHandler

_LEVELS: Mapping[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def configure_logging(level: str = "warning") -> None:
    """Configure root logging with a Rich handler on stderr.

    Args:
        level: Logging level (debug, info, warning, error, critical)
    """
    numeric_level = _LEVELS.get(level.lower(), logging.WARNING)
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        keywords=["control", "treatment", "p-value"],
    )
    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    logging.getLogger(__name__).debug("Logging configured at %s", level)
