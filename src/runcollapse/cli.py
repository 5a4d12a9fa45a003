"""runcollapse CLI — typer entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

from dotenv import load_dotenv
import typer

# Load .env from cwd before settings read env vars
load_dotenv(Path.cwd() / ".env")
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from runcollapse.collapse import summarize
from runcollapse.config import Settings, load_settings
from runcollapse.errors import InvalidArgumentError
from runcollapse.formatters import get_formatter, list_formatters
from runcollapse.log import setup_logging
from runcollapse.parse import STDIN_PATH, parse_sequence, read_sequence

app = typer.Typer(
    name="runcollapse",
    help="Collapse runs of equal adjacent integers into a single value.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

# Exit code for bad input, matching click's usage errors.
EXIT_INVALID = 2


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj or load_settings()


def _load_values(values: Optional[list[str]], file: Optional[Path]) -> list[int]:
    if values:
        return parse_sequence(values)
    return read_sequence(file or STDIN_PATH)


def _render(ctx: typer.Context, values: Optional[list[str]], file: Optional[Path], fmt: str) -> None:
    settings = _settings(ctx)
    try:
        formatter = get_formatter(fmt)
        report = summarize(_load_values(values, file))
    except (InvalidArgumentError, KeyError, OSError) as e:
        message = e.args[0] if isinstance(e, KeyError) else str(e)
        err_console.print(f"[bold red]Error:[/] {escape(message)}", highlight=False)
        raise typer.Exit(EXIT_INVALID)
    formatter.render(report, console, settings)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level (DEBUG, INFO, ...)")] = None,
) -> None:
    """Collapse runs of equal adjacent integers."""
    try:
        settings = load_settings()
        if log_level:
            settings.log_level = log_level
        setup_logging(settings.log_level)
    except ValueError as e:
        err_console.print(f"[bold red]Error:[/] {escape(str(e))}", highlight=False)
        raise typer.Exit(EXIT_INVALID)
    ctx.obj = settings


# ── collapse ──────────────────────────────────────────────

@app.command(context_settings={"ignore_unknown_options": True})
def collapse(
    ctx: typer.Context,
    values: Annotated[Optional[list[str]], typer.Argument(help="Integers to collapse (reads --file or stdin if omitted)")] = None,
    file: Annotated[Optional[Path], typer.Option("-f", "--file", help="File of integers, '-' for stdin")] = None,
    fmt: Annotated[Optional[str], typer.Option("-o", "--format", help="Output formatter")] = None,
) -> None:
    """Print the sequence with consecutive duplicates removed."""
    _render(ctx, values, file, fmt or _settings(ctx).format)


# ── runs ──────────────────────────────────────────────────

@app.command(context_settings={"ignore_unknown_options": True})
def runs(
    ctx: typer.Context,
    values: Annotated[Optional[list[str]], typer.Argument(help="Integers to inspect (reads --file or stdin if omitted)")] = None,
    file: Annotated[Optional[Path], typer.Option("-f", "--file", help="File of integers, '-' for stdin")] = None,
) -> None:
    """Show each run with its start index and length."""
    _render(ctx, values, file, "table")


# ── list-formatters ───────────────────────────────────────

@app.command(name="list-formatters")
def list_formatters_cmd() -> None:
    """List available output formatters."""
    table = Table(title="Formatters")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for name, cls in sorted(list_formatters().items()):
        table.add_row(name, cls.description)
    console.print(table)
