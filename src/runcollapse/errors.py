"""Error types for runcollapse."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a caller passes input the collapser cannot accept."""
