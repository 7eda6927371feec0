"""In-memory transport for tests and dry runs."""

from __future__ import annotations

import json
from collections import deque
from typing import Any

from starkscript.core.types import TransportFailureKind
from starkscript.transport.contracts import TransportFailure

Reply = bytes | dict[str, Any] | TransportFailure


class ScriptedTransport:
    """
    Replays queued replies in order and records every payload sent.

    A dict reply is a JSON-RPC envelope without ``id``/``jsonrpc``; the
    request id is echoed back so the decoder's id check passes. Use bytes
    to return something verbatim (including malformed answers), or a
    TransportFailure to have ``send`` raise it.
    """

    def __init__(self, *replies: Reply):
        self._replies: deque[Reply] = deque(replies)
        self.calls: list[bytes] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def queue(self, reply: Reply) -> None:
        self._replies.append(reply)

    def queue_result(self, result: Any) -> None:
        self.queue({"result": result})

    def queue_error(self, code: int, message: str, data: Any = None) -> None:
        error: dict[str, Any] = {"code": code, "message": message}
        if data is not None:
            error["data"] = data
        self.queue({"error": error})

    def queue_failure(self, kind: TransportFailureKind, message: str = "scripted failure") -> None:
        self.queue(TransportFailure(kind, message))

    def last_request(self) -> dict[str, Any]:
        if not self.calls:
            raise AssertionError("no request was sent")
        return json.loads(self.calls[-1])

    def send(self, payload: bytes) -> bytes:
        self.calls.append(payload)
        if not self._replies:
            raise TransportFailure(TransportFailureKind.CONNECTION_ERROR, "no scripted reply left")
        reply = self._replies.popleft()
        if isinstance(reply, TransportFailure):
            raise reply
        if isinstance(reply, bytes):
            return reply
        request = json.loads(payload)
        envelope = {"jsonrpc": "2.0", "id": request.get("id")}
        envelope.update(reply)
        return json.dumps(envelope).encode("utf-8")
