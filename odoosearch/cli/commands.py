"""CLI commands for odoosearch.

The CLI is the single entry point: top-level ``status`` plus the command groups
(list/search/open/link, browse, config).
"""

from pathlib import Path

import typer
from rich.console import Console

from odoosearch import __version__, __logo__
from odoosearch.cli.command_groups.group_registry import register_command_groups
from odoosearch.cli.command_groups.status_command import status_command
from odoosearch.cli.shared.logging_utils import configure_logging
from odoosearch.config.access import get_config, set_active_config_path

app = typer.Typer(
    name="odoosearch",
    help=f"{__logo__} odoosearch - search Odoo projects and helpdesk teams",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} odoosearch v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
    config_file: Path = typer.Option(None, "--config", "-c", help="Config file (default: ~/.odoosearch/config.json)"),
    logs: bool = typer.Option(False, "--logs/--no-logs", help="Show odoosearch runtime logs"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Debug mode: print every RPC call and state change"),
):
    """odoosearch - search Odoo projects and helpdesk teams."""
    set_active_config_path(config_file)
    level, to_file = "INFO", False
    try:
        cfg = get_config()
        level, to_file = cfg.logging.level, cfg.logging.file
    except ValueError:
        # Commands report an unreadable config themselves.
        pass
    configure_logging(ctx.invoked_subcommand or "odoosearch", logs=logs, debug=debug, level=level, to_file=to_file)


@app.command()
def status():
    """Show configuration and check that login works."""
    status_command(console)


register_command_groups(app, console)


if __name__ == "__main__":
    app()
