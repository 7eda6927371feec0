"""
Map every failure the pipeline can observe onto the error taxonomy.

The order is fixed: local validation, then transport failures, then the
JSON-RPC version check, then the known Starknet code table, then the
unknown-code fallback. Only the table (``StarknetError``) grows when the
node publishes new codes.
"""

from __future__ import annotations

from starkscript.core.errors import (
    ProviderError,
    RPCCommandError,
    RPCError,
    RPCVersionNotSupported,
    ScriptCommandError,
    StarknetError,
    StarknetRPCError,
    UnknownError,
    UnknownRPCError,
    ValidationError,
)
from starkscript.rpc.protocol import METHOD_NOT_FOUND, SERVER_ERROR_MAX, SERVER_ERROR_MIN, RpcErrorObject
from starkscript.transport.contracts import TransportFailure
from starkscript.utils.exceptions import (
    RequestValidationError,
    StarkscriptError,
    classify_exception,
    sanitize_error_message,
)


def is_version_mismatch_code(code: int) -> bool:
    return code == METHOD_NOT_FOUND or SERVER_ERROR_MIN <= code <= SERVER_ERROR_MAX


def classify_rpc_error(error: RpcErrorObject) -> RPCError:
    if is_version_mismatch_code(error.code):
        return RPCVersionNotSupported(code=error.code, message=error.message)
    if StarknetError.is_known(error.code):
        return StarknetRPCError(StarknetError(error.code), message=error.message, data=error.data)
    return UnknownRPCError(code=error.code, message=error.message, data=error.data)


def classify_transport_failure(failure: TransportFailure) -> ProviderError:
    return ProviderError(kind=failure.kind, message=failure.message, status_code=failure.status_code)


def classify(failure: RpcErrorObject | BaseException) -> ScriptCommandError:
    """Total classification: any input yields exactly one ScriptCommandError."""
    if isinstance(failure, RequestValidationError):
        return ValidationError(failure.message)
    if isinstance(failure, TransportFailure):
        return classify_transport_failure(failure)
    if isinstance(failure, RpcErrorObject):
        return RPCCommandError(classify_rpc_error(failure))
    if isinstance(failure, Exception):
        code, _, _ = classify_exception(failure)
        detail = failure.message if isinstance(failure, StarkscriptError) else str(failure)
        return UnknownError(f"{code}: {sanitize_error_message(detail) or type(failure).__name__}")
    return UnknownError(type(failure).__name__)
