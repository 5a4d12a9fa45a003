"""Parse integer sequences from text (CLI args, files, stdin)."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from pathlib import Path

from runcollapse.errors import InvalidArgumentError

_SPLIT_RE = re.compile(r"[\s,]+")

# Passed as a path to read from stdin instead of a file.
STDIN_PATH = "-"


def parse_sequence(tokens: Iterable[str]) -> list[int]:
    """Turn tokens like ``["1,1", "2 3"]`` into ``[1, 1, 2, 3]``."""
    values: list[int] = []
    for token in tokens:
        for part in _SPLIT_RE.split(token.strip()):
            if not part:
                continue
            try:
                values.append(int(part))
            except ValueError:
                raise InvalidArgumentError(f"not an integer: {part!r}") from None
    return values


def read_sequence(path: str | Path) -> list[int]:
    """Read and parse a whole file; ``-`` reads stdin."""
    try:
        if str(path) == STDIN_PATH:
            if sys.stdin.isatty():
                raise InvalidArgumentError("no values given; pass integers, --file, or pipe them on stdin")
            text = sys.stdin.read()
        else:
            text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InvalidArgumentError(f"cannot decode {path}: {e.reason}") from None
    return parse_sequence(text.splitlines())
