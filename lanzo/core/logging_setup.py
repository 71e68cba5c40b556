"""Logging configuration for long-running processes."""

import logging
import sys

from .constants import LOG_FORMAT


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stdout with the standard Lanzo format."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
