"""Debounced incremental search driving the query helpers from keystrokes."""

from __future__ import annotations

import asyncio
from enum import Enum
from typing import TYPE_CHECKING, Awaitable, Callable

from loguru import logger

from odoosearch.rpc.types import Record
from odoosearch.services.query.domain import DEFAULT_LIST_LIMIT

if TYPE_CHECKING:
    from odoosearch.services.query.query_service import QueryService
    from odoosearch.views.registry import RecordView

DEFAULT_DEBOUNCE_SECONDS = 0.3
DEFAULT_MIN_CHARS = 2

ListAll = Callable[[], Awaitable[list[Record]]]
Search = Callable[[str], Awaitable[list[Record]]]


class SearchState(str, Enum):
    IDLE = "idle"
    DEBOUNCING = "debouncing"
    FETCHING = "fetching"


class IncrementalSearchController:
    """
    Owns the search text and result set of one view.

    Each keystroke restarts the debounce timer, so only the text present when the input
    goes quiet is ever dispatched. Every dispatch gets a token; a completion is applied only
    if its token is still the latest one issued, so a slow stale response can never
    overwrite a newer one. Requests already sent are left to finish.
    """

    def __init__(
        self,
        *,
        list_all: ListAll,
        search: Search,
        on_results: Callable[[list[Record]], None] | None = None,
        on_state_change: Callable[[SearchState], None] | None = None,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        min_chars: int = DEFAULT_MIN_CHARS,
    ):
        self._list_all = list_all
        self._search = search
        self.on_results = on_results
        self.on_state_change = on_state_change
        self.debounce_seconds = max(0.0, debounce_seconds)
        self.min_chars = max(1, min_chars)

        self._search_text = ""
        self._results: list[Record] = []
        self._state = SearchState.IDLE
        self._timer: asyncio.TimerHandle | None = None
        self._inflight: set[asyncio.Task] = set()
        self._issued = 0
        self._pending: int | None = None
        self._needs_more_input = False
        self._idle = asyncio.Event()
        self._idle.set()

    @classmethod
    def for_view(
        cls,
        queries: QueryService,
        view: RecordView,
        *,
        list_limit: int = DEFAULT_LIST_LIMIT,
        **kwargs,
    ) -> IncrementalSearchController:
        """Controller searching ``view.model`` with the view's field projection."""
        return cls(
            list_all=lambda: queries.list_all(view.model, view.fields, limit=list_limit),
            search=lambda text: queries.search_by_name(view.model, text, view.fields),
            **kwargs,
        )

    @property
    def search_text(self) -> str:
        return self._search_text

    @property
    def results(self) -> list[Record]:
        return list(self._results)

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return self._state is SearchState.FETCHING

    @property
    def needs_more_input(self) -> bool:
        """True when the settled text is shorter than ``min_chars`` but not empty."""
        return self._needs_more_input

    @property
    def latest_token(self) -> int:
        return self._issued

    def mount(self) -> asyncio.Task:
        """Initial unfiltered listing, outside the debounce path."""
        return self._dispatch(None)

    def on_text_changed(self, text: str) -> None:
        loop = asyncio.get_running_loop()
        self._search_text = text
        self._cancel_timer()
        self._timer = loop.call_later(self.debounce_seconds, self._on_timer)
        self._update_state()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _on_timer(self) -> None:
        self._timer = None
        text = self._search_text.strip()
        if not text:
            self._needs_more_input = False
            self._dispatch(None)
        elif len(text) < self.min_chars:
            self._needs_more_input = True
            self._update_state()
        else:
            self._needs_more_input = False
            self._dispatch(text)

    def _dispatch(self, text: str | None) -> asyncio.Task:
        self._issued += 1
        token = self._issued
        self._pending = token
        logger.debug("Dispatch #{}: {}", token, "list all" if text is None else f"search {text!r}")
        task = asyncio.ensure_future(self._complete(token, text))
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)
        self._update_state()
        return task

    async def _complete(self, token: int, text: str | None) -> None:
        try:
            records = await (self._list_all() if text is None else self._search(text))
        except Exception as exc:
            logger.exception("Query #{} failed: {}", token, exc)
            records = []

        if token != self._issued:
            logger.debug("Dropping stale response #{} (latest #{})", token, self._issued)
            return
        self._pending = None
        self._results = list(records or [])
        try:
            if self.on_results is not None:
                self.on_results(self.results)
        finally:
            self._update_state()

    def _update_state(self) -> None:
        if self._timer is not None:
            state = SearchState.DEBOUNCING
        elif self._pending is not None:
            state = SearchState.FETCHING
        else:
            state = SearchState.IDLE
        if state is SearchState.IDLE:
            self._idle.set()
        else:
            self._idle.clear()
        if state is not self._state:
            self._state = state
            if self.on_state_change is not None:
                self.on_state_change(state)

    async def wait_idle(self) -> None:
        """Wait until no timer is pending and the latest dispatch has completed."""
        await self._idle.wait()

    async def aclose(self) -> None:
        """Cancel the pending timer and let in-flight requests run to completion."""
        self._cancel_timer()
        self._update_state()
        if self._inflight:
            await asyncio.gather(*list(self._inflight), return_exceptions=True)
