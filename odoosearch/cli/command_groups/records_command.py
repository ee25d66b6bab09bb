"""One-shot record commands: list, search, open, link."""

from __future__ import annotations

import webbrowser

import typer
from rich.console import Console

from odoosearch.cli.shared.client_utils import require_config, resolve_view, run_with_client
from odoosearch.cli.shared.render import print_records


def register_records_commands(app: typer.Typer, console: Console) -> None:
    """Register list/search/open/link commands."""

    @app.command("list")
    def list_records(
        view: str = typer.Argument(..., help="View to list: projects | helpdesk"),
        limit: int = typer.Option(None, "--limit", "-l", help="Maximum records (default: search.listLimit)"),
    ) -> None:
        """List records of a view, up to the configured cap."""
        config = require_config(console)
        record_view = resolve_view(console, view)
        cap = limit or config.search.list_limit
        records, notifier = run_with_client(
            console,
            config,
            lambda client: client.queries.list_all(record_view.model, record_view.fields, limit=cap),
        )
        print_records(console, record_view, records, min_chars=config.search.min_chars)
        if notifier.failures:
            raise typer.Exit(1)

    @app.command("search")
    def search_records(
        view: str = typer.Argument(..., help="View to search: projects | helpdesk"),
        text: str = typer.Argument(..., help="Text matched against name and display name"),
    ) -> None:
        """Search records of a view by name."""
        config = require_config(console)
        record_view = resolve_view(console, view)
        query = text.strip()
        min_chars = config.search.min_chars
        if len(query) < min_chars:
            print_records(console, record_view, [], search_text=text, min_chars=min_chars)
            return
        records, notifier = run_with_client(
            console,
            config,
            lambda client: client.queries.search_by_name(record_view.model, query, record_view.fields),
        )
        print_records(console, record_view, records, search_text=query, min_chars=min_chars)
        if notifier.failures:
            raise typer.Exit(1)

    @app.command("open")
    def open_record(
        view: str = typer.Argument(..., help="projects | helpdesk"),
        record_id: int = typer.Argument(..., help="Record id"),
        print_only: bool = typer.Option(False, "--print", help="Print the URL instead of opening it"),
    ) -> None:
        """Open a record's tasks/tickets page in the browser."""
        config = require_config(console)
        record_view = resolve_view(console, view)
        url = record_view.open_url(config.base_url, record_id)
        if print_only:
            typer.echo(url)
            return
        opened = webbrowser.open(url)
        if not opened:
            console.print(f"[red]Could not open {record_view.open_action_title.lower()}.[/red] Please check the URL manually:")
            typer.echo(url)
            raise typer.Exit(1)
        console.print(f"[green]✓[/green] {record_view.open_action_title}: {url}")

    @app.command("link")
    def link_record(
        view: str = typer.Argument(..., help="projects | helpdesk"),
        record_id: int = typer.Argument(..., help="Record id"),
        form: bool = typer.Option(False, "--form", help="Backend form URL instead of the tasks/tickets page"),
    ) -> None:
        """Print a record URL for copying."""
        config = require_config(console)
        record_view = resolve_view(console, view)
        if form:
            typer.echo(record_view.form_url(config.base_url, record_id))
        else:
            typer.echo(record_view.open_url(config.base_url, record_id))
