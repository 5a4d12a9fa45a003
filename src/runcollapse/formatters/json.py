"""JSON formatter — the full report, machine readable."""

from __future__ import annotations

from rich.console import Console

from runcollapse.config import Settings
from runcollapse.formatters.base import BaseFormatter, register_formatter
from runcollapse.models import CollapseReport


@register_formatter
class JsonFormatter(BaseFormatter):
    name = "json"
    description = "Input, output and runs as a JSON document"

    def render(self, report: CollapseReport, console: Console, settings: Settings) -> None:
        console.print_json(report.model_dump_json())
