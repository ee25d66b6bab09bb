"""Odoo search domains (prefix-notation predicates) and query options."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DEFAULT_LIST_LIMIT = 100
NAME_FIELDS = ("name", "display_name")

Domain = list[Any]


def match_all() -> Domain:
    return []


def name_domain(text: str, fields: tuple[str, ...] = NAME_FIELDS) -> Domain:
    """Case-insensitive substring match on any of ``fields`` (``|`` is binary, so n-1 operators)."""
    leaves: Domain = [[name, "ilike", text] for name in fields]
    return ["|"] * (len(leaves) - 1) + leaves


@dataclass(frozen=True)
class SearchQuery:
    domain: Domain = field(default_factory=match_all)
    fields: tuple[str, ...] = ()
    limit: int | None = None

    def options(self) -> dict[str, Any]:
        opts: dict[str, Any] = {"fields": list(self.fields)}
        if self.limit is not None:
            opts["limit"] = self.limit
        return opts
