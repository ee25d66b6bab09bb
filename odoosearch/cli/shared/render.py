"""Rich rendering of record lists and notifications."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from odoosearch.rpc.types import Record
from odoosearch.services.notify import Notification
from odoosearch.views.registry import RecordView


def records_table(view: RecordView, records: list[Record]) -> Table:
    table = Table(title=f"{view.title} ({view.section_subtitle(len(records))})")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name")
    table.add_column("Description", style="dim", overflow="fold")
    table.add_column("Details")
    for record in records:
        table.add_row(
            str(record.get("id")),
            escape(view.title_for(record)),
            escape(view.subtitle_for(record)),
            escape(" · ".join(view.accessories(record))),
        )
    return table


def print_records(
    console: Console,
    view: RecordView,
    records: list[Record],
    *,
    search_text: str = "",
    min_chars: int = 2,
) -> None:
    """Print the table, or the view's empty-state hint when there is nothing to show."""
    if records:
        console.print(records_table(view, records))
        return
    empty = view.empty_view(search_text, min_chars)
    if empty is not None:
        console.print(f"[yellow]{escape(empty.title)}[/yellow]")
        console.print(f"[dim]{escape(empty.description)}[/dim]")


def print_notification(console: Console, notification: Notification) -> None:
    if notification.level == "failure":
        console.print(f"[red]✗ {notification.title}:[/red] {escape(notification.message)}")
    elif notification.level == "success":
        console.print(f"[green]✓ {notification.title}[/green] {escape(notification.message)}".rstrip())
    else:
        console.print(f"[dim]{notification.title} {escape(notification.message)}[/dim]".rstrip())
