"""HTTP transport for the Odoo ``/jsonrpc`` endpoint."""

from __future__ import annotations

import itertools
from typing import Any

import httpx
from loguru import logger

from odoosearch.rpc.types import (
    Failure,
    FailureKind,
    RemoteCallRequest,
    RpcResult,
    Success,
)


class RpcTransport:
    """Sends ``call`` envelopes to a single endpoint and decodes the reply into an RpcResult."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 20.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http_client = http_client
        self._owns_client = http_client is None
        self._ids = itertools.count(1)

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/jsonrpc"

    def build_request(self, service: str, method: str, args: list[Any] | tuple[Any, ...]) -> RemoteCallRequest:
        """Build an envelope with a fresh correlation id."""
        return RemoteCallRequest(service=service, method=method, args=tuple(args), request_id=next(self._ids))

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self.timeout)
        return self._http_client

    async def send(self, request: RemoteCallRequest) -> RpcResult:
        """POST the envelope; never raises for network or protocol problems."""
        client = self._get_http_client()
        try:
            resp = await client.post(
                self.endpoint,
                json=request.to_envelope(),
                headers={"Content-Type": "application/json"},
            )
        except httpx.TimeoutException:
            logger.warning("RPC timeout: {} -> {}", request.label, self.endpoint)
            return Failure(FailureKind.TRANSPORT, f"Request timed out: {request.label}")
        except httpx.RequestError as exc:
            logger.warning("RPC network error: {}: {}", request.label, exc)
            return Failure(FailureKind.TRANSPORT, f"Network error: {exc}")

        status_code = resp.status_code
        if not resp.is_success:
            logger.warning("RPC http error {} for {}", status_code, request.label)
            return Failure(
                FailureKind.TRANSPORT,
                f"HTTP error! status: {status_code}",
                status=status_code,
            )

        try:
            body = resp.json()
        except ValueError:
            return Failure(
                FailureKind.BAD_RESPONSE,
                f"Bad response: non-json body for {request.label}",
                status=status_code,
            )
        return self.decode(request, body)

    @classmethod
    def decode(cls, request: RemoteCallRequest, body: Any) -> RpcResult:
        if not isinstance(body, dict):
            return Failure(FailureKind.BAD_RESPONSE, f"Bad response: expected an object for {request.label}")
        response_id = body.get("id")
        if response_id is not None and response_id != request.request_id:
            return Failure(
                FailureKind.BAD_RESPONSE,
                f"Bad response: id {response_id!r} does not match request {request.request_id}",
            )
        if "error" in body and body["error"] is not None:
            message, subcode = cls._extract_error(body["error"])
            return Failure(FailureKind.REMOTE, message, subcode=subcode)
        return Success(body.get("result"))

    @staticmethod
    def _extract_error(err: Any) -> tuple[str, str | None]:
        if not isinstance(err, dict):
            text = str(err).strip()
            return (text or "Remote call failed"), None
        data = err.get("data")
        subcode = None
        if isinstance(data, dict):
            name = data.get("name")
            if isinstance(name, str) and name.strip():
                subcode = name.strip()
            msg = data.get("message")
            if isinstance(msg, str) and msg.strip():
                return msg.strip(), subcode
        msg = err.get("message")
        if isinstance(msg, str) and msg.strip():
            return msg.strip(), subcode
        return "Remote call failed", subcode

    async def call(self, service: str, method: str, args: list[Any] | tuple[Any, ...]) -> Any:
        """Send one call and return its ``result``; raises TransportError or RemoteError."""
        request = self.build_request(service, method, args)
        logger.debug("RPC {} id={}", request.label, request.request_id)
        result = await self.send(request)
        return result.unwrap()

    async def aclose(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._http_client is not None and self._owns_client:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> RpcTransport:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
