"""Encoding of invoke requests and decoding of node responses."""

from __future__ import annotations

import json
import uuid
from typing import Any

from starkscript.core.felt import to_hex
from starkscript.core.types import SignedInvoke, TransportFailureKind
from starkscript.rpc.protocol import (
    ADD_INVOKE_TRANSACTION,
    JSONRPC_VERSION,
    SPEC_VERSION,
    RpcErrorObject,
    RpcRequest,
    RpcResponse,
)
from starkscript.transport.contracts import TransportFailure


def new_request_id() -> str:
    return f"req_{uuid.uuid4().hex[:12]}"


def safe_dict(value: Any) -> dict[str, Any]:
    """Return the value when dict-like, otherwise an empty dict."""
    return value if isinstance(value, dict) else {}


def _malformed(message: str) -> TransportFailure:
    return TransportFailure(TransportFailureKind.MALFORMED_RESPONSE, message)


def build_invoke_transaction(signed: SignedInvoke) -> dict[str, Any]:
    """Wire shape of an INVOKE transaction (v1 pays in ETH, v3 in STRK)."""
    tx: dict[str, Any] = {
        "type": "INVOKE",
        "sender_address": to_hex(signed.sender_address),
        "calldata": [to_hex(v) for v in signed.calldata],
        "version": to_hex(signed.version),
        "signature": [to_hex(v) for v in signed.signature],
        "nonce": to_hex(signed.nonce),
    }
    if signed.version == 3:
        tx["resource_bounds"] = {
            "l1_gas": {
                "max_amount": to_hex(signed.max_gas),
                "max_price_per_unit": to_hex(signed.max_gas_unit_price),
            },
            "l2_gas": {"max_amount": "0x0", "max_price_per_unit": "0x0"},
        }
        tx["tip"] = "0x0"
        tx["paymaster_data"] = []
        tx["account_deployment_data"] = []
        tx["nonce_data_availability_mode"] = "L1"
        tx["fee_data_availability_mode"] = "L1"
    else:
        tx["max_fee"] = to_hex(signed.max_fee)
    return tx


def invoke_request(signed: SignedInvoke, *, request_id: str | None = None) -> RpcRequest:
    return RpcRequest(
        id=request_id or new_request_id(),
        method=ADD_INVOKE_TRANSACTION,
        params={"invoke_transaction": build_invoke_transaction(signed)},
    )


def spec_version_request(*, request_id: str | None = None) -> RpcRequest:
    return RpcRequest(id=request_id or new_request_id(), method=SPEC_VERSION, params={})


def encode_request(request: RpcRequest) -> bytes:
    """Encode a request frame as JSON bytes."""
    payload = {
        "jsonrpc": JSONRPC_VERSION,
        "id": request.id,
        "method": request.method,
        "params": request.params,
    }
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


def normalize_rpc_error(error: Any) -> RpcErrorObject:
    """
    Build RpcErrorObject from the raw ``error`` member.

    The code must be an integer: without it the error cannot be
    classified and the whole response is treated as malformed.
    """
    row = safe_dict(error)
    code = row.get("code")
    if isinstance(code, bool) or not isinstance(code, int):
        raise _malformed(f"rpc error without an integer code: {error!r}"[:200])
    message = row.get("message")
    return RpcErrorObject(
        code=code,
        message=message if isinstance(message, str) else "",
        data=row.get("data"),
    )


def decode_response(raw: bytes, *, expected_id: str | None = None) -> RpcResponse:
    """Decode raw response bytes into RpcResponse or raise MALFORMED_RESPONSE."""
    try:
        payload = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        raise _malformed(f"response is not valid JSON: {type(exc).__name__}: {exc}"[:200]) from exc
    if not isinstance(payload, dict):
        raise _malformed("response is not a JSON object")
    if payload.get("jsonrpc") != JSONRPC_VERSION:
        raise _malformed(f"unexpected jsonrpc version: {payload.get('jsonrpc')!r}")

    has_result = "result" in payload
    has_error = "error" in payload
    if has_result == has_error:
        raise _malformed("response must carry exactly one of result/error")

    response_id = payload.get("id")
    # Parse errors and invalid requests are answered with a null id.
    id_matches = expected_id is None or response_id == expected_id or (has_error and response_id is None)
    if not id_matches:
        raise _malformed(f"response id {response_id!r} does not match request id {expected_id!r}")

    if has_error:
        return RpcResponse(id=response_id, error=normalize_rpc_error(payload["error"]))
    return RpcResponse(id=response_id, result=payload["result"])


def extract_transaction_hash(result: Any) -> int:
    raw_hash = safe_dict(result).get("transaction_hash")
    if not isinstance(raw_hash, str) or not raw_hash.lower().startswith("0x"):
        raise _malformed(f"invoke result without a transaction hash: {result!r}"[:200])
    try:
        return int(raw_hash, 16)
    except ValueError as exc:
        raise _malformed(f"invalid transaction hash: {raw_hash!r}") from exc


def extract_spec_version(result: Any) -> str:
    if not isinstance(result, str) or not result.strip():
        raise _malformed(f"spec version result is not a string: {result!r}"[:200])
    return result.strip()
