"""
Invoke orchestrator: build, sign, send, decode, classify.

``invoke`` never raises for a condition the taxonomy can describe. One
call that passes local validation performs exactly one transport
exchange; one that fails validation performs none. Retries belong to the
caller (see ``starkscript.retry``).
"""

from __future__ import annotations

from typing import Any

from loguru import logger

from starkscript.builder import build_invoke_request
from starkscript.config.access import get_config
from starkscript.config.schema import EXPECTED_RPC_VERSION, StarkscriptConfig
from starkscript.core.errors import RPCCommandError, RPCVersionNotSupported, ScriptCommandError, taxonomy_path
from starkscript.core.fee import FeeToken
from starkscript.core.outcome import Failure, InvokeOutcome, Success
from starkscript.core.types import InvokeRequest, TransportFailureKind
from starkscript.rpc.classifier import classify
from starkscript.rpc.serialization import (
    decode_response,
    encode_request,
    extract_spec_version,
    extract_transaction_hash,
    invoke_request,
    spec_version_request,
)
from starkscript.signer import Signer, encode_execute_calldata
from starkscript.transport.contracts import Transport, TransportFailure
from starkscript.transport.http import HttpTransport
from starkscript.utils.exceptions import (
    ErrorCategory,
    RequestValidationError,
    StarkscriptError,
    sanitize_error_message,
)
from starkscript.utils.logging_utils import ensure_rotating_log_file


def _major_minor(version: str) -> tuple[str, ...]:
    return tuple(version.strip().lstrip("v").split(".")[:2])


class InvokeClient:
    def __init__(
        self,
        transport: Transport,
        signer: Signer,
        *,
        expected_rpc_version: str = EXPECTED_RPC_VERSION,
    ) -> None:
        self.transport = transport
        self.signer = signer
        self.expected_rpc_version = expected_rpc_version

    @classmethod
    def from_config(cls, signer: Signer, config: StarkscriptConfig | None = None) -> InvokeClient:
        """
        Build a client talking HTTP to the node configured in ``config.rpc``.

        Without an explicit config the cached ``get_config()`` is used, which
        reads ~/.starkscript/config.json and falls back to RPC_URL.
        """
        cfg = config if config is not None else get_config()
        if not cfg.rpc.url:
            raise StarkscriptError(
                "RPC url not passed nor found in config (set rpc.url or RPC_URL)",
                code="CONFIG_ERROR",
                category=ErrorCategory.VALIDATION,
            )
        if cfg.log.file_enabled:
            ensure_rotating_log_file(cfg.log.file_name, level=cfg.log.level)
        transport = HttpTransport(cfg.rpc.url, timeout_s=cfg.rpc.timeout_s, headers=cfg.rpc.headers)
        return cls(transport, signer, expected_rpc_version=cfg.rpc.expected_version)

    def invoke(
        self,
        contract_address: Any,
        entry_point: Any,
        calldata: Any = None,
        *,
        max_fee: Any = None,
        nonce: Any = None,
        fee_token: FeeToken | str | None = None,
        max_gas: Any = None,
        max_gas_unit_price: Any = None,
    ) -> InvokeOutcome:
        try:
            request = build_invoke_request(
                contract_address,
                entry_point,
                calldata,
                max_fee=max_fee,
                nonce=nonce,
                fee_token=fee_token,
                max_gas=max_gas,
                max_gas_unit_price=max_gas_unit_price,
            )
        except RequestValidationError as exc:
            return self._failure(classify(exc))
        return self.submit(request)

    def submit(self, request: InvokeRequest) -> InvokeOutcome:
        """Sign and send an already-built request."""
        try:
            signed = self.signer.sign_invoke(request, encode_execute_calldata([request]))
        except Exception as exc:
            # Signer/account failures: validation problems keep their branch,
            # everything else lands in UnknownError.
            return self._failure(classify(exc))

        rpc_request = invoke_request(signed)
        try:
            raw = self._send(encode_request(rpc_request))
            response = decode_response(raw, expected_id=rpc_request.id)
            if response.error is not None:
                return self._failure(classify(response.error))
            tx_hash = extract_transaction_hash(response.result)
        except TransportFailure as exc:
            return self._failure(classify(exc))

        logger.info("invoke submitted contract={} tx_hash={}", hex(request.contract_address), hex(tx_hash))
        return Success(tx_hash)

    def check_rpc_version(self) -> ScriptCommandError | None:
        """
        Ask the node for its spec version.

        Returns None when major.minor matches ``expected_rpc_version``,
        otherwise the classified problem. Costs one exchange; ``invoke``
        never calls it.
        """
        rpc_request = spec_version_request()
        try:
            raw = self._send(encode_request(rpc_request))
            response = decode_response(raw, expected_id=rpc_request.id)
            if response.error is not None:
                return classify(response.error)
            version = extract_spec_version(response.result)
        except TransportFailure as exc:
            return classify(exc)

        if _major_minor(version) != _major_minor(self.expected_rpc_version):
            logger.warning("node rpc version {} does not match expected {}", version, self.expected_rpc_version)
            return RPCCommandError(
                RPCVersionNotSupported(message=f"node speaks {version}, expected {self.expected_rpc_version}")
            )
        return None

    def _send(self, payload: bytes) -> bytes:
        logger.debug("rpc request bytes={}", len(payload))
        try:
            return self.transport.send(payload)
        except TransportFailure:
            raise
        except TimeoutError as exc:
            raise TransportFailure(TransportFailureKind.TIMEOUT, sanitize_error_message(str(exc)) or "timeout") from exc
        except OSError as exc:
            raise TransportFailure(
                TransportFailureKind.CONNECTION_ERROR,
                sanitize_error_message(str(exc)) or type(exc).__name__,
            ) from exc

    @staticmethod
    def _failure(error: ScriptCommandError) -> Failure:
        logger.warning("invoke failed: {}", "/".join(taxonomy_path(error)))
        return Failure(error)


def invoke(
    transport: Transport,
    signer: Signer,
    contract_address: Any,
    entry_point: Any,
    calldata: Any = None,
    **overrides: Any,
) -> InvokeOutcome:
    """One-shot invoke; see InvokeClient.invoke for the accepted overrides."""
    return InvokeClient(transport, signer).invoke(contract_address, entry_point, calldata, **overrides)
