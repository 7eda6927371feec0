"""HTTP transport for Starknet JSON-RPC nodes."""

from __future__ import annotations

import json
from typing import Any

import httpx
from loguru import logger

from starkscript.core.types import TransportFailureKind
from starkscript.transport.contracts import TransportFailure
from starkscript.utils.exceptions import sanitize_error_message


class HttpTransport:
    """POST one JSON-RPC payload per call; a fresh client per exchange."""

    def __init__(self, url: str, *, timeout_s: float = 20.0, headers: dict[str, str] | None = None):
        self.url = url
        self.timeout_s = timeout_s
        self.headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if headers:
            self.headers.update(headers)

    @property
    def safe_url(self) -> str:
        return sanitize_error_message(self.url)

    def send(self, payload: bytes) -> bytes:
        try:
            with httpx.Client(timeout=self.timeout_s) as client:
                resp = client.post(self.url, content=payload, headers=self.headers)
        except httpx.TimeoutException as exc:
            raise TransportFailure(
                TransportFailureKind.TIMEOUT,
                f"rpc timeout after {self.timeout_s}s: {self.safe_url}",
            ) from exc
        except httpx.RequestError as exc:
            raise TransportFailure(
                TransportFailureKind.CONNECTION_ERROR,
                sanitize_error_message(f"rpc network error: {self.safe_url}: {exc}"),
            ) from exc

        status_code = int(getattr(resp, "status_code", 0) or 0)
        body = resp.content or b""
        logger.debug("rpc response status={} bytes={}", status_code, len(body))
        if status_code >= 400:
            # Some nodes answer JSON-RPC errors with a 4xx/5xx status.
            if self._is_rpc_error_envelope(body):
                return body
            raise TransportFailure(
                TransportFailureKind.MALFORMED_RESPONSE,
                f"rpc http error {status_code}: {self._extract_error_text(resp)}",
                status_code=status_code,
            )
        return body

    @staticmethod
    def _is_rpc_error_envelope(body: bytes) -> bool:
        try:
            parsed: Any = json.loads(body)
        except (ValueError, RecursionError):
            return False
        return isinstance(parsed, dict) and isinstance(parsed.get("error"), dict)

    @staticmethod
    def _extract_error_text(resp: Any) -> str:
        text = str(getattr(resp, "text", "") or "").strip()
        if text:
            return sanitize_error_message(text[:200])
        return "request failed"
