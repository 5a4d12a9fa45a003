"""Text formatter — collapsed values on one line."""

from __future__ import annotations

from rich.console import Console

from runcollapse.config import Settings
from runcollapse.formatters.base import BaseFormatter, register_formatter
from runcollapse.models import CollapseReport


@register_formatter
class TextFormatter(BaseFormatter):
    name = "text"
    description = "Collapsed values joined by the configured separator"

    def render(self, report: CollapseReport, console: Console, settings: Settings) -> None:
        line = settings.separator.join(str(v) for v in report.output)
        console.print(line, markup=False, highlight=False, soft_wrap=True)
