"""JSON-RPC 2.0 frames exchanged with Starknet nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

JSONRPC_VERSION = "2.0"

ADD_INVOKE_TRANSACTION = "starknet_addInvokeTransaction"
SPEC_VERSION = "starknet_specVersion"

# JSON-RPC 2.0 reserved codes
METHOD_NOT_FOUND = -32601
SERVER_ERROR_MIN = -32099
SERVER_ERROR_MAX = -32000


@dataclass(slots=True)
class RpcRequest:
    """JSON-RPC request frame."""

    id: str
    method: str
    params: dict[str, Any]


@dataclass(slots=True)
class RpcErrorObject:
    """The ``error`` member of a JSON-RPC response, ``data`` kept verbatim."""

    code: int
    message: str
    data: Any = None


@dataclass(slots=True)
class RpcResponse:
    """Decoded JSON-RPC response frame; exactly one of result/error is set."""

    id: str | int | None
    result: Any = None
    error: RpcErrorObject | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
