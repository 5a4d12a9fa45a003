"""runcollapse — collapse runs of equal adjacent integers."""

from runcollapse.collapse import collapse, iter_runs, summarize  # noqa: F401
from runcollapse.errors import InvalidArgumentError  # noqa: F401
from runcollapse.models import CollapseReport, Run  # noqa: F401
from runcollapse.parse import parse_sequence, read_sequence  # noqa: F401

__version__ = "0.1.0"
