"""Name search and capped listing over ``search_read``."""

from __future__ import annotations

from typing import Any, Sequence

from loguru import logger

from odoosearch.rpc.invoker import Invoker
from odoosearch.rpc.types import Record
from odoosearch.services.notify import NotificationCenter
from odoosearch.services.query.domain import (
    DEFAULT_LIST_LIMIT,
    Domain,
    SearchQuery,
    match_all,
    name_domain,
)
from odoosearch.services.query.error_boundary import (
    odoosearch_error_result,
    unhandled_exception_result,
)
from odoosearch.utils.exceptions import OdooSearchError


def normalize_records(payload: Any) -> list[Record]:
    """Keep mapping records carrying an ``id``; the first record wins on duplicate ids."""
    if not isinstance(payload, list):
        return []
    seen: set[Any] = set()
    records: list[Record] = []
    for item in payload:
        if not isinstance(item, dict) or item.get("id") is None:
            logger.warning("Dropping record without id: {!r}", item)
            continue
        if item["id"] in seen:
            continue
        seen.add(item["id"])
        records.append(item)
    return records


class QueryService:
    """
    Error boundary for record queries.

    Every failure is published to the notifier and resolved as an empty list, so callers
    never have to handle exceptions from this layer.
    """

    def __init__(self, invoker: Invoker, notifier: NotificationCenter):
        self.invoker = invoker
        self.notifier = notifier

    async def run(self, model: str, query: SearchQuery) -> list[Record]:
        try:
            result = await self.invoker.execute(model, "search_read", [query.domain], query.options())
        except OdooSearchError as exc:
            return odoosearch_error_result(
                operation=model,
                exc=exc,
                log_warning=logger.warning,
                notify=self.notifier.failure,
            )
        except Exception as exc:
            return unhandled_exception_result(
                operation=model,
                exc=exc,
                log_exception=logger.exception,
                notify=self.notifier.failure,
            )
        return normalize_records(result)

    async def search_read(
        self,
        model: str,
        domain: Domain,
        fields: Sequence[str],
        limit: int | None = None,
    ) -> list[Record]:
        return await self.run(model, SearchQuery(domain=domain, fields=tuple(fields), limit=limit))

    async def search_by_name(self, model: str, text: str, fields: Sequence[str]) -> list[Record]:
        """Records whose ``name`` or ``display_name`` contains ``text`` (any case). ``text`` must not be blank."""
        return await self.search_read(model, name_domain(text), fields)

    async def list_all(
        self,
        model: str,
        fields: Sequence[str],
        limit: int = DEFAULT_LIST_LIMIT,
    ) -> list[Record]:
        """Unfiltered listing capped at ``limit`` records."""
        cap = limit if limit and limit > 0 else DEFAULT_LIST_LIMIT
        return await self.search_read(model, match_all(), fields, limit=cap)
