"""starkscript: invoke Starknet contracts from scripts with typed failures."""

__version__ = "0.1.0"

from starkscript.builder import build_invoke_request
from starkscript.core import (
    Failure,
    InvokeOutcome,
    InvokeRequest,
    ProviderError,
    RPCCommandError,
    RPCVersionNotSupported,
    ScriptCommandError,
    StarknetError,
    StarknetRPCError,
    Success,
    UnknownError,
    UnknownRPCError,
    ValidationError,
)
from starkscript.client import InvokeClient, invoke
from starkscript.retry import RetryPolicy, invoke_with_retry
from starkscript.signer import PresignedSigner, Signer
from starkscript.transport import HttpTransport, ScriptedTransport, Transport, TransportFailure

__all__ = [
    "Failure",
    "HttpTransport",
    "InvokeClient",
    "InvokeOutcome",
    "InvokeRequest",
    "PresignedSigner",
    "ProviderError",
    "RPCCommandError",
    "RPCVersionNotSupported",
    "RetryPolicy",
    "ScriptCommandError",
    "ScriptedTransport",
    "Signer",
    "StarknetError",
    "StarknetRPCError",
    "Success",
    "Transport",
    "TransportFailure",
    "UnknownError",
    "UnknownRPCError",
    "ValidationError",
    "build_invoke_request",
    "invoke",
    "invoke_with_retry",
]
