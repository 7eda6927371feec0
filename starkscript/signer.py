"""
Account collaborator contract.

Signing and key storage live outside starkscript. The pipeline hands the
signer a validated InvokeRequest together with the account ``__execute__``
calldata and gets back a SignedInvoke ready for the wire.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from starkscript.core.fee import FeeEstimate, StrkFeeSettings
from starkscript.core.types import InvokeRequest, SignedInvoke


@runtime_checkable
class Signer(Protocol):
    """
    Produces a SignedInvoke for a validated request.

    Implementations raise ``SignerError`` when they cannot sign (locked
    keystore, unknown account, nonce lookup failure) and
    ``RequestValidationError`` when the request itself cannot be paid for.
    Any other exception is treated as an unexpected collaborator fault.
    All three end up as a Failure, never as an exception out of invoke.
    """

    address: int

    def sign_invoke(self, request: InvokeRequest, execute_calldata: tuple[int, ...]) -> SignedInvoke: ...


def encode_execute_calldata(requests: Sequence[InvokeRequest]) -> tuple[int, ...]:
    """Cairo 1 account multicall layout: [n_calls, (to, selector, len, *calldata)...]."""
    out: list[int] = [len(requests)]
    for request in requests:
        out.append(request.contract_address)
        out.append(request.entry_point_selector)
        out.append(len(request.calldata))
        out.extend(request.calldata)
    return tuple(out)


class PresignedSigner:
    """
    Signer that returns a fixed signature.

    For devnets with signature checks disabled, dry runs against a
    ScriptedTransport, and tests.
    """

    def __init__(
        self,
        address: int,
        *,
        signature: Sequence[int] = (),
        nonce: int = 0,
        fee_estimate: FeeEstimate | None = None,
    ):
        self.address = address
        self.signature = tuple(signature)
        self.nonce = nonce
        self.fee_estimate = fee_estimate

    def sign_invoke(self, request: InvokeRequest, execute_calldata: tuple[int, ...]) -> SignedInvoke:
        nonce = request.nonce if request.nonce is not None else self.nonce
        settings = request.fee_settings
        if isinstance(settings, StrkFeeSettings):
            fee = settings.resolve(self.fee_estimate)
            return SignedInvoke(
                sender_address=self.address,
                calldata=execute_calldata,
                signature=self.signature,
                nonce=nonce,
                version=3,
                max_gas=fee.max_gas,
                max_gas_unit_price=fee.max_gas_unit_price,
            )
        eth_fee = settings.resolve(self.fee_estimate)
        return SignedInvoke(
            sender_address=self.address,
            calldata=execute_calldata,
            signature=self.signature,
            nonce=nonce,
            version=1,
            max_fee=eth_fee.max_fee,
        )
