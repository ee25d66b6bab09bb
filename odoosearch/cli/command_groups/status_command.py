"""Status command: config summary and a login check."""

from __future__ import annotations

import typer
from rich.console import Console

from odoosearch import __logo__
from odoosearch.cli.shared.client_utils import run_with_client
from odoosearch.config.access import active_config_path, get_config


def status_command(console: Console) -> None:
    """Show odoosearch status."""
    config_path = active_config_path()
    try:
        config = get_config()
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    console.print(f"{__logo__} odoosearch Status\n")
    console.print(f"Config: {config_path} {'[green]✓[/green]' if config_path.exists() else '[red]✗[/red]'}")
    console.print(f"URL: {config.base_url or '[dim]not set[/dim]'}")
    console.print(f"Database: {config.odoo.database or '[dim]not set[/dim]'}")
    console.print(f"Login: {config.odoo.user_login or '[dim]not set[/dim]'}")
    console.print(f"API key: {'[green]✓[/green]' if config.odoo.api_key else '[dim]not set[/dim]'}")

    missing = config.missing_fields()
    if missing:
        console.print(f"\n[yellow]Missing:[/yellow] {', '.join(missing)}")
        raise typer.Exit(1)

    uid, _ = run_with_client(console, config, lambda client: client.sessions.get_session())
    if uid is None:
        console.print("Session: [red]✗ login failed[/red]")
        raise typer.Exit(1)
    console.print(f"Session: [green]✓ uid {uid}[/green]")
