"""Odoo JSON-RPC client: transport, session cache, generic invoker."""

from odoosearch.rpc.invoker import Invoker
from odoosearch.rpc.session import Credentials, SessionManager
from odoosearch.rpc.transport import RpcTransport
from odoosearch.rpc.types import Failure, FailureKind, Record, RemoteCallRequest, RpcResult, Success

__all__ = [
    "Credentials",
    "Failure",
    "FailureKind",
    "Invoker",
    "Record",
    "RemoteCallRequest",
    "RpcResult",
    "RpcTransport",
    "SessionManager",
    "Success",
]
