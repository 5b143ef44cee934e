"""Logging helpers shared by the library and the command line tool."""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger. Handlers are left to the application."""
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """Install a root handler for command line use."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
