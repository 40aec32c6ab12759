"""Main CLI entry point using rich-click."""

import logging
from pathlib import Path
from typing import Optional

import rich_click as click
from rich.console import Console
from rich.logging import RichHandler

# Configure rich-click
click.rich_click.SHOW_ARGUMENTS = True


# Context object to pass state between commands
class Context:
    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.utc: bool = False

pass_context = click.make_pass_decorator(Context, ensure=True)


@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--utc", "-u",
    is_flag=True,
    help="Use the current UTC time instead of local time",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output",
)
@click.version_option(package_name="after-parser")
@pass_context
def cli(ctx: Context, config: Optional[Path], utc: bool, verbose: bool) -> None:
    """Relative duration calculator.

    Parse expressions such as 10s, "+1 minute" or -2w and apply them
    to the current time or to a given moment.
    """
    ctx.config_path = config
    ctx.utc = utc

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


# Import and register subcommands
from after.cli.duration import duration, since, units
from after.cli.config import config_cmd

cli.add_command(duration)
cli.add_command(since)
cli.add_command(units)
cli.add_command(config_cmd, name="config")


def main() -> None:
    """Entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
