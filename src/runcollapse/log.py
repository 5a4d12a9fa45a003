"""Logging setup for the CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING") -> None:
    """Route ``runcollapse`` loggers to stderr through rich."""
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger("runcollapse")
    root.handlers[:] = [handler]
    root.setLevel(level.upper())
    root.propagate = False
