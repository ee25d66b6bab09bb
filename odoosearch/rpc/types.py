"""Wire-level types for the Odoo JSON-RPC endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from odoosearch.utils.exceptions import RemoteError, TransportError

JSONRPC_VERSION = "2.0"
DISPATCH_METHOD = "call"

Record = dict[str, Any]


@dataclass(frozen=True)
class RemoteCallRequest:
    """One ``call`` envelope; ``args`` are the service method's positional parameters."""

    service: str
    method: str
    args: tuple[Any, ...] = ()
    request_id: int = 0

    def to_envelope(self) -> dict[str, Any]:
        return {
            "jsonrpc": JSONRPC_VERSION,
            "method": DISPATCH_METHOD,
            "params": {
                "service": self.service,
                "method": self.method,
                "args": list(self.args),
            },
            "id": self.request_id,
        }

    @property
    def label(self) -> str:
        return f"{self.service}.{self.method}"


class FailureKind(str, Enum):
    TRANSPORT = "transport"
    BAD_RESPONSE = "bad_response"
    REMOTE = "remote"


@dataclass(frozen=True)
class Success:
    payload: Any = None

    ok = True

    def unwrap(self) -> Any:
        return self.payload


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str
    subcode: str | None = None
    status: int | None = None

    ok = False

    def unwrap(self) -> Any:
        """Raise the exception matching this failure."""
        if self.kind is FailureKind.REMOTE:
            raise RemoteError(self.message, subcode=self.subcode)
        raise TransportError(self.message, status=self.status)


RpcResult = Union[Success, Failure]
