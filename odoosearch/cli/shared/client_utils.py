"""Helpers shared by commands that talk to the backend."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, TypeVar

import typer
from rich.console import Console

from odoosearch.client import OdooClient
from odoosearch.cli.shared.render import print_notification
from odoosearch.config.access import active_config_path, get_config
from odoosearch.config.schema import Config
from odoosearch.services.notify import NotificationCenter
from odoosearch.views.registry import RecordView, get_view, list_views

T = TypeVar("T")


def make_client(config: Config, notifier: NotificationCenter) -> OdooClient:
    """Build the backend client for one command run."""
    return OdooClient.from_config(config, notifier)


def require_config(console: Console) -> Config:
    """Load the active config and exit with a hint when credentials are incomplete."""
    try:
        config = get_config()
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    missing = config.missing_fields()
    if missing:
        console.print(f"[red]Odoo connection is not configured:[/red] missing {', '.join(missing)}")
        console.print(f"Set them with [cyan]odoosearch config set <key> <value>[/cyan] (file: {active_config_path()})")
        raise typer.Exit(1)
    return config


def resolve_view(console: Console, key: str) -> RecordView:
    try:
        return get_view(key)
    except KeyError:
        choices = ", ".join(v.key for v in list_views())
        console.print(f"[red]Unknown view:[/red] {key} (choose from {choices})")
        raise typer.Exit(2)


def run_with_client(
    console: Console,
    config: Config,
    action: Callable[[OdooClient], Awaitable[T]],
) -> tuple[T, NotificationCenter]:
    """Run ``action`` against a fresh client; notifications are printed as they arrive."""
    notifier = NotificationCenter()
    notifier.subscribe(lambda n: print_notification(console, n))

    async def _run() -> T:
        async with make_client(config, notifier) as client:
            return await action(client)

    return asyncio.run(_run()), notifier
