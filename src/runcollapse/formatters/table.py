"""Table formatter — one row per run."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from runcollapse.config import Settings
from runcollapse.formatters.base import BaseFormatter, register_formatter
from runcollapse.models import CollapseReport


@register_formatter
class TableFormatter(BaseFormatter):
    name = "table"
    description = "Rich table of runs (value, start, length)"

    def render(self, report: CollapseReport, console: Console, settings: Settings) -> None:
        table = Table(title=f"{len(report.runs)} runs, {report.removed} removed")
        table.add_column("Value", style="cyan", justify="right")
        table.add_column("Start", justify="right")
        table.add_column("Length", justify="right")
        for run in report.runs:
            table.add_row(str(run.value), str(run.start), str(run.length))
        console.print(table)
