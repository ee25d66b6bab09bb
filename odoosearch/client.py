"""Wiring of transport, session cache, invoker and query service for one backend."""

from __future__ import annotations

from typing import Any

import httpx

from odoosearch.config.schema import Config
from odoosearch.rpc.invoker import Invoker
from odoosearch.rpc.session import Credentials, SessionManager
from odoosearch.rpc.transport import RpcTransport
from odoosearch.services.notify import NotificationCenter
from odoosearch.services.query.query_service import QueryService
from odoosearch.services.search.controller import IncrementalSearchController
from odoosearch.views.registry import RecordView


class OdooClient:
    """One client per credential set; views share its session cache."""

    def __init__(
        self,
        transport: RpcTransport,
        credentials: Credentials,
        notifier: NotificationCenter | None = None,
    ):
        self.notifier = notifier or NotificationCenter()
        self.transport = transport
        self.sessions = SessionManager(transport, credentials, notifier=self.notifier)
        self.invoker = Invoker(self.sessions)
        self.queries = QueryService(self.invoker, self.notifier)

    @classmethod
    def from_config(
        cls,
        config: Config,
        notifier: NotificationCenter | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> OdooClient:
        transport = RpcTransport(
            config.base_url,
            timeout=config.http.timeout_seconds,
            http_client=http_client,
        )
        credentials = Credentials(
            database=config.odoo.database,
            login=config.odoo.user_login,
            secret=config.odoo.api_key,
        )
        return cls(transport, credentials, notifier)

    def controller_for(self, view: RecordView, config: Config | None = None, **kwargs: Any) -> IncrementalSearchController:
        """Incremental search over ``view`` with the config's debounce and caps."""
        if config is not None:
            kwargs.setdefault("debounce_seconds", config.debounce_seconds)
            kwargs.setdefault("min_chars", config.search.min_chars)
            kwargs.setdefault("list_limit", config.search.list_limit)
        return IncrementalSearchController.for_view(self.queries, view, **kwargs)

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self) -> OdooClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
