"""Contract between the invoke pipeline and a JSON-RPC transport."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from starkscript.core.types import TransportFailureKind
from starkscript.utils.exceptions import ErrorCategory, StarkscriptError

_CATEGORY_BY_KIND = {
    TransportFailureKind.CONNECTION_ERROR: ErrorCategory.RETRYABLE,
    TransportFailureKind.TIMEOUT: ErrorCategory.TIMEOUT,
    TransportFailureKind.MALFORMED_RESPONSE: ErrorCategory.PROTOCOL,
}


class TransportFailure(StarkscriptError):
    """One request/response exchange did not produce a usable answer."""

    def __init__(
        self,
        kind: TransportFailureKind,
        message: str,
        *,
        status_code: int | None = None,
    ) -> None:
        super().__init__(
            message,
            code=f"TRANSPORT_{kind.name}",
            category=_CATEGORY_BY_KIND[kind],
            details={"status_code": status_code} if status_code is not None else {},
        )
        self.kind = kind
        self.status_code = status_code

    @property
    def retryable(self) -> bool:
        # A timed-out request may still have reached the node.
        return self.kind is TransportFailureKind.CONNECTION_ERROR


@runtime_checkable
class Transport(Protocol):
    def send(self, payload: bytes) -> bytes: ...
