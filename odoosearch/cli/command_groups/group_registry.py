"""Registry for grouped CLI command modules."""

from __future__ import annotations

import typer
from rich.console import Console

from .browse_command import register_browse_command
from .config_command import register_config_commands
from .records_command import register_records_commands


def register_command_groups(app: typer.Typer, console: Console) -> None:
    """Attach grouped command modules to the main app."""
    register_records_commands(app=app, console=console)
    register_browse_command(app=app, console=console)
    register_config_commands(app=app, console=console)
