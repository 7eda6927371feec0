"""Core value types and the error taxonomy."""

from .errors import (
    ProviderError,
    RPCCommandError,
    RPCError,
    RPCVersionNotSupported,
    ScriptCommandError,
    StarknetError,
    StarknetRPCError,
    UnknownError,
    UnknownRPCError,
    UnknownStarknetError,
    ValidationError,
    taxonomy_path,
)
from .fee import EthFeeSettings, FeeEstimate, FeeSettings, FeeToken, StrkFeeSettings, fee_settings_from_args
from .outcome import Failure, InvokeOutcome, OutcomeError, Success
from .types import InvokeRequest, SignedInvoke, TransportFailureKind

__all__ = [
    "EthFeeSettings",
    "Failure",
    "FeeEstimate",
    "FeeSettings",
    "FeeToken",
    "InvokeOutcome",
    "InvokeRequest",
    "OutcomeError",
    "ProviderError",
    "RPCCommandError",
    "RPCError",
    "RPCVersionNotSupported",
    "ScriptCommandError",
    "SignedInvoke",
    "StarknetError",
    "StarknetRPCError",
    "StrkFeeSettings",
    "Success",
    "TransportFailureKind",
    "UnknownError",
    "UnknownRPCError",
    "UnknownStarknetError",
    "ValidationError",
    "fee_settings_from_args",
    "taxonomy_path",
]
