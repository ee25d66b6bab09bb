"""Session id cache for one set of Odoo credentials."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Protocol

from loguru import logger

from odoosearch.rpc.transport import RpcTransport
from odoosearch.utils.exceptions import EmptyAuthError, OdooSearchError, user_message


@dataclass(frozen=True)
class Credentials:
    database: str
    login: str
    secret: str

    def __repr__(self) -> str:
        return f"Credentials(database={self.database!r}, login={self.login!r}, secret='***')"


class FailureSink(Protocol):
    def failure(self, title: str, message: str) -> object: ...


class SessionManager:
    """
    Lazily authenticates through ``common.login`` and caches the returned uid.

    The cache belongs to this instance only; build one manager per credential set.
    """

    def __init__(
        self,
        transport: RpcTransport,
        credentials: Credentials,
        *,
        notifier: FailureSink | None = None,
    ):
        self.transport = transport
        self.credentials = credentials
        self.notifier = notifier
        self._uid: int | None = None
        self._lock = asyncio.Lock()

    @property
    def session(self) -> int | None:
        return self._uid

    async def authenticate(self) -> int:
        """Return the cached uid or log in; raises on any login failure."""
        if self._uid:
            return self._uid
        async with self._lock:
            if self._uid:
                return self._uid
            creds = self.credentials
            result = await self.transport.call(
                "common", "login", [creds.database, creds.login, creds.secret]
            )
            if isinstance(result, bool) or not isinstance(result, int) or result < 1:
                raise EmptyAuthError(creds.database, creds.login)
            self._uid = result
            logger.debug("Authenticated {} on {} as uid={}", creds.login, creds.database, result)
            return result

    async def get_session(self) -> int | None:
        """Like :meth:`authenticate`, but a failed login yields ``None`` and a notification."""
        try:
            return await self.authenticate()
        except OdooSearchError as exc:
            logger.warning("Authentication error: {}", exc)
            if self.notifier is not None:
                self.notifier.failure(
                    "Authentication Error",
                    user_message(exc, "Failed to authenticate with Odoo"),
                )
            return None

    def invalidate(self) -> None:
        """Drop the cached uid; the next call logs in again."""
        if self._uid is not None:
            logger.debug("Invalidating session uid={}", self._uid)
        self._uid = None
