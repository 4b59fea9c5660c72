"""Broadcast desktop notifications to every logged-in graphical session."""

from __future__ import annotations

import logging

from rich.console import Console

__all__ = [
    "console",
    "logger",
    "configure_logging",
    "NotifySendAllError",
]

__version__ = "0.1.0"

# stdout belongs to the relayed notify-send output
console = Console(stderr=True)
logger = logging.getLogger("notifysendall")


class NotifySendAllError(Exception):
    """Base class for fatal errors raised before any delivery starts."""


def configure_logging(level: str = "WARNING") -> None:
    """Configure package-wide logging (idempotent)."""
    root_logger = logging.getLogger()
    if root_logger.handlers:
        root_logger.setLevel(level.upper())
        return
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
