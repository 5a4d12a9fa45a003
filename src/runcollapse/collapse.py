"""Run collapsing — merge each run of equal adjacent values into one."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from runcollapse.errors import InvalidArgumentError
from runcollapse.models import CollapseReport, Run

logger = logging.getLogger(__name__)


def collapse(sequence: Iterable[int]) -> list[int]:
    """Return a new list with consecutive duplicates removed.

    Non-adjacent repeats are kept: ``[1, 2, 1]`` stays ``[1, 2, 1]``.
    Raises InvalidArgumentError if ``sequence`` is empty.
    """
    it = iter(sequence)
    try:
        last = next(it)
    except StopIteration:
        raise InvalidArgumentError("cannot collapse an empty sequence") from None

    result = [last]
    for value in it:
        if value != last:
            result.append(value)
            last = value
    logger.debug("collapsed to %d value(s)", len(result))
    return result


def iter_runs(sequence: Iterable[int]) -> Iterator[Run]:
    """Yield one Run per maximal run of equal adjacent values."""
    it = iter(sequence)
    try:
        current = next(it)
    except StopIteration:
        raise InvalidArgumentError("cannot find runs in an empty sequence") from None

    start, length = 0, 1
    for index, value in enumerate(it, 1):
        if value == current:
            length += 1
            continue
        yield Run(value=current, start=start, length=length)
        current, start, length = value, index, 1
    yield Run(value=current, start=start, length=length)


def summarize(sequence: Iterable[int]) -> CollapseReport:
    """Collapse ``sequence`` and keep the runs alongside the output."""
    values = list(sequence)
    runs = list(iter_runs(values))
    return CollapseReport(input=values, output=collapse(values), runs=runs)
