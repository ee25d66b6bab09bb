"""Config command group (show/path/get/set/unset)."""

from __future__ import annotations

import json

import typer
from rich.console import Console

from odoosearch.config.access import active_config_path, clear_config_cache
from odoosearch.config.loader import convert_to_camel, load_config
from odoosearch.cli.shared.config_utils import (
    SECRET_KEYS,
    deep_get,
    deep_set,
    deep_unset,
    load_config_json,
    mask_secrets,
    parse_value,
    save_config_json,
)


def register_config_commands(app: typer.Typer, console: Console) -> None:
    """Register config helpers."""
    config_app = typer.Typer(help="Config helpers (show/get/set/unset)")
    app.add_typer(config_app, name="config")

    @config_app.command("path")
    def config_path() -> None:
        """Print the config file path."""
        typer.echo(str(active_config_path()))

    @config_app.command("show")
    def config_show() -> None:
        """Print the effective configuration (secrets masked)."""
        try:
            cfg = load_config(active_config_path())
        except ValueError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)
        data = mask_secrets(convert_to_camel(cfg.model_dump()))
        console.print_json(json.dumps(data, ensure_ascii=False))

    @config_app.command("get")
    def config_get(
        key: str = typer.Argument(..., help="Dotted key path, e.g. odoo.url"),
    ) -> None:
        data = load_config_json()
        try:
            value = deep_get(data, key)
        except KeyError:
            console.print(f"[red]Key not found:[/red] {key}")
            raise typer.Exit(1)
        if key.split(".")[-1] in SECRET_KEYS and value:
            value = "***"
        console.print(json.dumps(value, indent=2, ensure_ascii=False))

    @config_app.command("set")
    def config_set(
        key: str = typer.Argument(..., help="Dotted key path, e.g. odoo.apiKey"),
        value: str = typer.Argument(..., help="JSON value or plain string"),
    ) -> None:
        data = load_config_json()
        deep_set(data, key, parse_value(value))
        path = save_config_json(data)
        clear_config_cache(config_path=path)
        try:
            load_config(path)
        except ValueError as e:
            console.print(f"[yellow]Saved, but the config no longer validates:[/yellow] {e}")
            raise typer.Exit(1)
        console.print(f"[green]✓[/green] Set {key}")

    @config_app.command("unset")
    def config_unset(
        key: str = typer.Argument(..., help="Dotted key path"),
    ) -> None:
        data = load_config_json()
        if not deep_unset(data, key):
            console.print(f"[yellow]Key not found:[/yellow] {key}")
            raise typer.Exit(1)
        path = save_config_json(data)
        clear_config_cache(config_path=path)
        console.print(f"[green]✓[/green] Unset {key}")
