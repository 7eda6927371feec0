"""JSON-RPC wire codec and error classification."""

from .classifier import classify, classify_rpc_error, classify_transport_failure
from .protocol import RpcErrorObject, RpcRequest, RpcResponse
from .serialization import decode_response, encode_request, extract_transaction_hash, invoke_request

__all__ = [
    "RpcErrorObject",
    "RpcRequest",
    "RpcResponse",
    "classify",
    "classify_rpc_error",
    "classify_transport_failure",
    "decode_response",
    "encode_request",
    "extract_transaction_hash",
    "invoke_request",
]
