"""Config command - manage configuration."""

from pathlib import Path

import rich_click as click
from rich.console import Console
from rich.syntax import Syntax

from after.cli.main import Context, pass_context

console = Console()

DEFAULT_CONFIG = '''# after configuration

[defaults]
# How "after since" prints timestamps: "iso", "timestamp" or a strftime pattern
format = "iso"

# Use the current UTC time instead of local time
utc = false
'''


@click.group()
def config_cmd() -> None:
    """Manage configuration."""
    pass


@config_cmd.command("show")
@pass_context
def show(ctx: Context) -> None:
    """Show current configuration."""
    from after.core.config import find_config_file

    config_path = ctx.config_path or find_config_file()

    if config_path is None:
        console.print("[yellow]No configuration file found[/yellow]")
        console.print("Using default settings")
        console.print("\nSearch locations:")
        console.print("  1. ./after.toml")
        console.print("  2. ./pyproject.toml \\[tool.after]")
        console.print("  3. <git root>/after.toml")
        console.print("  4. ~/.config/after/config.toml")
        return

    console.print(f"[bold]Config file:[/bold] {config_path}")
    console.print()

    content = config_path.read_text()
    syntax = Syntax(content, "toml", theme="monokai", line_numbers=True)
    console.print(syntax)


@config_cmd.command("init")
@click.option("--global", "-g", "global_config", is_flag=True, help="Create global config")
@pass_context
def init(ctx: Context, global_config: bool) -> None:
    """Create a new configuration file."""
    from after.core.config import CONFIG_NAME, user_config_path

    if global_config:
        config_path = user_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)
    else:
        config_path = Path.cwd() / CONFIG_NAME

    if config_path.exists():
        if not click.confirm(f"{config_path} already exists. Overwrite?"):
            console.print("[yellow]Cancelled[/yellow]")
            return

    config_path.write_text(DEFAULT_CONFIG)
    console.print(f"[green]Created {config_path}[/green]")


@config_cmd.command("path")
@pass_context
def path(ctx: Context) -> None:
    """Show path to active configuration file."""
    from after.core.config import find_config_file

    config_path = ctx.config_path or find_config_file()

    if config_path:
        console.print(str(config_path))
    else:
        console.print("[yellow]No configuration file found[/yellow]")
