"""Interactive incremental search (``odoosearch browse``)."""

from __future__ import annotations

import asyncio
import re
import webbrowser

import typer
from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.patch_stdout import patch_stdout
from rich.console import Console

from odoosearch.cli.shared import client_utils
from odoosearch.cli.shared.render import print_notification, print_records
from odoosearch.config.schema import Config
from odoosearch.services.notify import NotificationCenter
from odoosearch.services.search.controller import SearchState
from odoosearch.views.registry import RecordView

EXIT_COMMANDS = {"exit", "quit", "/exit", "/quit", ":q"}
_OPEN_RE = re.compile(r"^:?open\s+#?(\d+)$", re.IGNORECASE)


async def browse_view(console: Console, config: Config, view: RecordView) -> None:
    """Live search loop: every keystroke feeds the controller, results re-render above the prompt."""
    notifier = NotificationCenter()
    notifier.subscribe(lambda n: print_notification(console, n))
    min_chars = config.search.min_chars

    async with client_utils.make_client(config, notifier) as client:
        controller = None

        def _render(records) -> None:
            console.print()
            print_records(console, view, records, search_text=controller.search_text, min_chars=min_chars)

        def _on_state(state: SearchState) -> None:
            if state is SearchState.IDLE and controller.needs_more_input:
                empty = view.empty_view(controller.search_text, min_chars)
                if empty is not None:
                    console.print(f"[dim]{empty.title}[/dim]")

        controller = client.controller_for(view, config, on_results=_render, on_state_change=_on_state)
        session: PromptSession = PromptSession(enable_open_in_editor=False, multiline=False)
        session.default_buffer.on_text_changed += lambda buffer: controller.on_text_changed(buffer.text)

        console.print(f"[cyan]{view.placeholder}[/cyan] [dim](type 'open <id>' to open, 'exit' to quit)[/dim]")
        controller.mount()
        try:
            with patch_stdout():
                while True:
                    text = (await session.prompt_async(HTML(f"<b fg='ansiblue'>{view.title}:</b> "))).strip()
                    if text.lower() in EXIT_COMMANDS:
                        break
                    match = _OPEN_RE.match(text)
                    if match:
                        url = view.open_url(config.base_url, int(match.group(1)))
                        if not webbrowser.open(url):
                            notifier.failure(
                                f"Error opening {view.noun}",
                                f"Could not open {url}. Please check the URL manually.",
                            )
        except (EOFError, KeyboardInterrupt):
            pass
        finally:
            await controller.aclose()
    console.print("Goodbye!")


def register_browse_command(app: typer.Typer, console: Console) -> None:
    """Register the interactive browse command."""

    @app.command("browse")
    def browse(
        view: str = typer.Argument("projects", help="View to browse: projects | helpdesk"),
    ) -> None:
        """Search a view interactively as you type."""
        config = client_utils.require_config(console)
        record_view = client_utils.resolve_view(console, view)
        asyncio.run(browse_view(console, config, record_view))
