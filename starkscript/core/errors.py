"""
Error taxonomy returned by invoke.

Three closed layers::

    ScriptCommandError = RPCCommandError | ProviderError | ValidationError | UnknownError
    RPCError           = StarknetRPCError | RPCVersionNotSupported | UnknownRPCError
    StarknetError      = one member per node error code (+ UnknownStarknetError)

Every variant is a frozen dataclass (or enum member) with structural
equality. Informational fields (node message, raw ``data``, HTTP status)
do not take part in equality: two errors on the same taxonomy path are
equal whatever text the node attached.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from starkscript.core.types import TransportFailureKind


class StarknetError(Enum):
    """Node-defined error codes (Starknet JSON-RPC error catalog)."""

    FAILED_TO_RECEIVE_TRANSACTION = 1
    NO_TRACE_AVAILABLE = 10
    CONTRACT_NOT_FOUND = 20
    # Legacy nodes report an unknown selector with its own code instead of
    # a CONTRACT_ERROR revert.
    ENTRY_POINT_NOT_FOUND = 21
    BLOCK_NOT_FOUND = 24
    INVALID_TRANSACTION_INDEX = 27
    CLASS_HASH_NOT_FOUND = 28
    TRANSACTION_HASH_NOT_FOUND = 29
    PAGE_SIZE_TOO_BIG = 31
    NO_BLOCKS = 32
    INVALID_CONTINUATION_TOKEN = 33
    TOO_MANY_KEYS_IN_FILTER = 34
    CONTRACT_ERROR = 40
    TRANSACTION_EXECUTION_ERROR = 41
    CLASS_ALREADY_DECLARED = 51
    INVALID_TRANSACTION_NONCE = 52
    INSUFFICIENT_MAX_FEE = 53
    INSUFFICIENT_ACCOUNT_BALANCE = 54
    VALIDATION_FAILURE = 55
    COMPILATION_FAILED = 56
    CONTRACT_CLASS_SIZE_IS_TOO_LARGE = 57
    NON_ACCOUNT = 58
    DUPLICATE_TX = 59
    COMPILED_CLASS_HASH_MISMATCH = 60
    UNSUPPORTED_TX_VERSION = 61
    UNSUPPORTED_CONTRACT_CLASS_VERSION = 62
    UNEXPECTED_ERROR = 63

    @property
    def code(self) -> int:
        return self.value

    @classmethod
    def is_known(cls, code: int) -> bool:
        return code in cls._value2member_map_

    @classmethod
    def from_code(cls, code: int) -> StarknetError | UnknownStarknetError:
        """Total lookup: table member, or UnknownStarknetError for anything else."""
        if cls.is_known(code):
            return cls(code)
        return UnknownStarknetError(code)


@dataclass(frozen=True, slots=True)
class UnknownStarknetError:
    code: int


# --- RPCError -------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class StarknetRPCError:
    """JSON-RPC error whose code is in the node's published catalog."""

    error: StarknetError | UnknownStarknetError
    message: str = field(default="", compare=False)
    data: Any = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class RPCVersionNotSupported:
    """The node does not serve the JSON-RPC API version this client speaks."""

    code: int | None = field(default=None, compare=False)
    message: str = field(default="", compare=False)


@dataclass(frozen=True, slots=True)
class UnknownRPCError:
    """Catch-all keeping the node's raw code and message."""

    code: int
    message: str
    data: Any = field(default=None, compare=False)


RPCError = StarknetRPCError | RPCVersionNotSupported | UnknownRPCError


# --- ScriptCommandError ---------------------------------------------------


@dataclass(frozen=True, slots=True)
class RPCCommandError:
    """The node answered with a JSON-RPC error."""

    error: RPCError


@dataclass(frozen=True, slots=True)
class ProviderError:
    """The exchange with the node failed before a JSON-RPC answer was read."""

    kind: TransportFailureKind
    message: str = field(default="", compare=False)
    status_code: int | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Arguments rejected locally; nothing was sent."""

    message: str


@dataclass(frozen=True, slots=True)
class UnknownError:
    """Failure outside the other branches (signer, unexpected collaborator fault)."""

    message: str


ScriptCommandError = RPCCommandError | ProviderError | ValidationError | UnknownError


def taxonomy_path(error: ScriptCommandError) -> tuple[str, ...]:
    """Variant names from the root to the most specific node, e.g. for logs."""
    if isinstance(error, RPCCommandError):
        inner = error.error
        if isinstance(inner, StarknetRPCError):
            leaf = inner.error
            leaf_name = leaf.name if isinstance(leaf, StarknetError) else f"Unknown({leaf.code})"
            return ("RPCError", "StarknetError", leaf_name)
        if isinstance(inner, RPCVersionNotSupported):
            return ("RPCError", "RPCVersionNotSupported")
        return ("RPCError", "UnknownError", str(inner.code))
    if isinstance(error, ProviderError):
        return ("ProviderError", error.kind.name)
    if isinstance(error, ValidationError):
        return ("ValidationError",)
    return ("UnknownError",)
