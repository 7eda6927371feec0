"""Value types shared by the invoke pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from starkscript.core.fee import EthFeeSettings, FeeSettings


class TransportFailureKind(str, Enum):
    CONNECTION_ERROR = "connection_error"
    TIMEOUT = "timeout"
    MALFORMED_RESPONSE = "malformed_response"


@dataclass(frozen=True, slots=True)
class InvokeRequest:
    """
    A validated contract call.

    Built by ``starkscript.builder.build_invoke_request``; constructing one
    directly skips validation.
    """

    contract_address: int
    entry_point_selector: int
    calldata: tuple[int, ...] = ()
    nonce: int | None = None
    fee_settings: FeeSettings = field(default_factory=EthFeeSettings)

    @property
    def max_fee(self) -> int | None:
        return self.fee_settings.max_fee


@dataclass(frozen=True, slots=True)
class SignedInvoke:
    """Envelope returned by the account collaborator, ready for the wire."""

    sender_address: int
    calldata: tuple[int, ...]
    signature: tuple[int, ...]
    nonce: int
    version: int = 1
    max_fee: int = 0
    max_gas: int = 0
    max_gas_unit_price: int = 0
