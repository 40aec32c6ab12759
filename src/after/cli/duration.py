"""Duration commands - parse expressions and apply them to a moment."""

import logging
import sys
from datetime import datetime, timezone
from typing import NoReturn, Optional

import rich_click as click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from after.cli.main import Context, pass_context

logger = logging.getLogger(__name__)

console = Console()


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("expression")
@click.option("--seconds", "-S", "as_seconds", is_flag=True, help="Print total seconds")
@pass_context
def duration(ctx: Context, expression: str, as_seconds: bool) -> None:
    """Parse a duration expression.

    EXPRESSION is a signed amount and unit, e.g. 10s, "+1 minute" or -2w.
    """
    from after.core.exceptions import DurationError
    from after.core.parser import parse_duration

    try:
        delta = parse_duration(expression)
    except DurationError as e:
        _fail(e)

    if as_seconds:
        console.print(f"{delta.total_seconds():g}")
    else:
        console.print(str(delta))


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("expression")
@click.option("--from", "-f", "moment", help="Reference moment (ISO timestamp or 'now')")
@click.option("--format", "-F", "fmt", help="Output format: iso, timestamp or a strftime pattern")
@pass_context
def since(ctx: Context, expression: str, moment: Optional[str], fmt: Optional[str]) -> None:
    """Apply a duration expression to a moment.

    EXPRESSION is added to the reference moment (the current time by
    default). Negative expressions move backwards:

        after since -2w --from 2026-02-23T18:00:00
    """
    from after.core.config import load_config
    from after.core.exceptions import AfterError
    from after.core.parser import Parser, parse_moment

    try:
        config = load_config(ctx.config_path)
        use_utc = ctx.utc or config.utc
        fmt = fmt or config.output_format
        parser = Parser()

        if moment is None or moment.strip() == "now":
            logger.debug(f"Using current {'UTC' if use_utc else 'local'} time")
            result = parser.since_now(expression, timezone.utc if use_utc else None)
        else:
            result = parser.since(parse_moment(moment), expression)
    except AfterError as e:
        _fail(e)

    console.print(format_moment(result, fmt))


@click.command()
def units() -> None:
    """List the supported duration units."""
    from after.core.units import UNITS, spellings_for

    table = Table(title="Duration units")
    table.add_column("Unit", style="cyan")
    table.add_column("Spellings")
    table.add_column("Duration", justify="right")

    for unit, per_unit in UNITS.items():
        table.add_row(unit, ", ".join(spellings_for(unit)), str(per_unit))

    console.print(table)


def format_moment(moment: datetime, fmt: str) -> str:
    """Render *moment* as ``iso``, a POSIX ``timestamp`` or via strftime."""
    if fmt == "iso":
        return moment.isoformat()
    if fmt == "timestamp":
        return f"{moment.timestamp():.3f}"
    return moment.strftime(fmt)


def _fail(error: Exception) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    sys.exit(1)
