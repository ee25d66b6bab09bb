"""Generic ``execute_kw`` invocation against Odoo models."""

from __future__ import annotations

from typing import Any

from loguru import logger

from odoosearch.rpc.session import SessionManager
from odoosearch.rpc.transport import RpcTransport
from odoosearch.utils.exceptions import RemoteError, ValidationError


class Invoker:
    """Runs model methods with the session held by a SessionManager. Errors propagate."""

    def __init__(self, sessions: SessionManager):
        self.sessions = sessions

    @property
    def transport(self) -> RpcTransport:
        return self.sessions.transport

    async def execute(
        self,
        model: str,
        method: str,
        args: list[Any] | None = None,
        options: dict[str, Any] | None = None,
    ) -> Any | None:
        """
        Call ``model.method(*args, **options)`` on the backend.

        Returns None when no session could be obtained or the backend returned an empty result.
        """
        if not model or not model.strip():
            raise ValidationError("model must be a non-empty identifier", field="model")
        if not method or not method.strip():
            raise ValidationError("method must be a non-empty identifier", field="method")

        uid = await self.sessions.get_session()
        if not uid:
            return None

        creds = self.sessions.credentials
        try:
            result = await self.transport.call(
                "object",
                "execute_kw",
                [creds.database, uid, creds.secret, model, method, list(args or []), dict(options or {})],
            )
        except RemoteError as exc:
            if exc.is_access_denied:
                self.sessions.invalidate()
            logger.error("Error executing {}.{}: {}", model, method, exc)
            raise
        except Exception as exc:
            logger.error("Error executing {}.{}: {}", model, method, exc)
            raise
        return result or None
