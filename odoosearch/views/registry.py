"""Record types the launcher can browse, with their projections and deep links."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from odoosearch.rpc.types import Record


def _many2one_label(value: Any) -> str | None:
    """Odoo many2one values arrive as ``[id, "Label"]`` or ``False``."""
    if isinstance(value, (list, tuple)) and len(value) >= 2 and value[1]:
        return str(value[1])
    return None


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


def _project_accessories(record: Record) -> list[str]:
    out: list[str] = []
    if record.get("task_count"):
        out.append(f"{record['task_count']} tasks")
    manager = _many2one_label(record.get("user_id"))
    if manager:
        out.append(f"Manager: {manager}")
    client = _many2one_label(record.get("partner_id"))
    if client:
        out.append(f"Client: {client}")
    stage = _many2one_label(record.get("stage_id"))
    if stage:
        out.append(stage)
    return out


def _helpdesk_accessories(record: Record) -> list[str]:
    out: list[str] = []
    members = record.get("member_ids")
    if isinstance(members, list) and members:
        out.append(f"{len(members)} members")
    company = _many2one_label(record.get("company_id"))
    if company:
        out.append(company)
    if record.get("active") is False:
        out.append("Inactive")
    return out


@dataclass(frozen=True)
class EmptyView:
    title: str
    description: str


@dataclass(frozen=True)
class RecordView:
    key: str
    model: str
    title: str
    noun: str
    fields: tuple[str, ...]
    open_route: str  # formatted with {id}
    open_action_title: str
    missing_module: str
    accessories_builder: Callable[[Record], list[str]] = lambda _record: []

    @property
    def placeholder(self) -> str:
        return f"Search {self.title.lower()} by name..."

    def title_for(self, record: Record) -> str:
        return str(record.get("display_name") or record.get("name") or f"#{record.get('id')}")

    def subtitle_for(self, record: Record) -> str:
        description = record.get("description")
        return description if isinstance(description, str) else ""

    def accessories(self, record: Record) -> list[str]:
        return self.accessories_builder(record)

    def open_url(self, base_url: str, record_id: int) -> str:
        return f"{base_url.rstrip('/')}/{self.open_route.format(id=record_id)}"

    def form_url(self, base_url: str, record_id: int) -> str:
        return f"{base_url.rstrip('/')}/web#id={record_id}&model={self.model}&view_type=form"

    def section_subtitle(self, count: int) -> str:
        return _plural(count, self.noun)

    def empty_view(self, search_text: str, min_chars: int = 2) -> EmptyView | None:
        """Placeholder shown instead of an empty list, or None when nothing applies."""
        length = len(search_text.strip())
        if 0 < length < min_chars:
            return EmptyView(
                f"Type at least {min_chars} characters",
                f"Start typing to search for {self.title.lower()} by name",
            )
        if length >= min_chars:
            return EmptyView(
                f"No {self.title.lower()} found",
                f'No {self.noun}s match "{search_text.strip()}". Try a different search term '
                f"or check if the {self.missing_module} module is installed in Odoo.",
            )
        return EmptyView(
            f"No {self.title.lower()} available",
            f"No {self.title.lower()} found. Make sure the {self.missing_module} module is "
            "installed and you have the necessary permissions.",
        )


PROJECTS = RecordView(
    key="projects",
    model="project.project",
    title="Projects",
    noun="project",
    fields=(
        "id",
        "name",
        "display_name",
        "description",
        "user_id",
        "partner_id",
        "stage_id",
        "task_count",
        "active",
        "company_id",
        "date_start",
        "date",
    ),
    open_route="odoo/action-369/{id}/tasks",
    open_action_title="Open Project Tasks",
    missing_module="Project",
    accessories_builder=_project_accessories,
)

HELPDESK = RecordView(
    key="helpdesk",
    model="helpdesk.team",
    title="Helpdesk Teams",
    noun="team",
    fields=(
        "id",
        "name",
        "display_name",
        "description",
        "member_ids",
        "use_helpdesk_timesheet",
        "use_helpdesk_sale_timesheet",
        "stage_ids",
        "company_id",
        "active",
    ),
    open_route="odoo/helpdesk/{id}/tickets",
    open_action_title="Open Helpdesk Tickets",
    missing_module="Helpdesk",
    accessories_builder=_helpdesk_accessories,
)

_VIEWS: dict[str, RecordView] = {view.key: view for view in (PROJECTS, HELPDESK)}


def list_views() -> list[RecordView]:
    return list(_VIEWS.values())


def get_view(key: str) -> RecordView:
    """Look up a view by key (``projects``, ``helpdesk``) or by model name."""
    normalized = (key or "").strip().lower()
    if normalized in _VIEWS:
        return _VIEWS[normalized]
    for view in _VIEWS.values():
        if view.model == normalized:
            return view
    raise KeyError(f"unknown view: {key}")
