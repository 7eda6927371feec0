"""Fee settings for invoke transactions (ETH v1 / STRK v3)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from starkscript.core.felt import U64_MAX, U128_MAX, parse_felt
from starkscript.utils.exceptions import RequestValidationError


class FeeToken(str, Enum):
    ETH = "eth"
    STRK = "strk"


_ZERO_UNIT_PRICE = "Max gas unit price must be greater than zero to derive max gas from max fee"
_ZERO_MAX_GAS = "Max gas amount must be greater than zero to derive max gas unit price from max fee"


@dataclass(frozen=True, slots=True)
class FeeEstimate:
    """Node fee estimate, supplied by the account collaborator."""

    overall_fee: int
    gas_consumed: int
    gas_price: int


@dataclass(frozen=True, slots=True)
class EthFee:
    max_fee: int


@dataclass(frozen=True, slots=True)
class StrkFee:
    max_gas: int
    max_gas_unit_price: int


@dataclass(frozen=True, slots=True)
class EthFeeSettings:
    max_fee: int | None = None

    @property
    def token(self) -> FeeToken:
        return FeeToken.ETH

    def resolve(self, estimate: FeeEstimate | None = None) -> EthFee:
        if self.max_fee is not None:
            return EthFee(max_fee=self.max_fee)
        if estimate is None:
            raise RequestValidationError("Max fee is not provided and no fee estimate is available", field="max_fee")
        return EthFee(max_fee=estimate.overall_fee)


@dataclass(frozen=True, slots=True)
class StrkFeeSettings:
    max_fee: int | None = None
    max_gas: int | None = None
    max_gas_unit_price: int | None = None

    @property
    def token(self) -> FeeToken:
        return FeeToken.STRK

    def resolve(self, estimate: FeeEstimate | None = None) -> StrkFee:
        """
        Fill missing gas bounds.

        Explicit values always win. When only max_fee and one of the two
        gas fields are given, the other is derived from max_fee; otherwise
        the estimate fills the gaps.
        """
        max_gas = self.max_gas
        unit_price = self.max_gas_unit_price
        if max_gas is None and estimate is not None:
            max_gas = estimate.gas_consumed
        if unit_price is None and estimate is not None:
            unit_price = estimate.gas_price

        if self.max_fee is not None and self.max_gas is None and unit_price is not None:
            if unit_price == 0:
                raise RequestValidationError(_ZERO_UNIT_PRICE, field="max_gas_unit_price")
            max_gas = self.max_fee // unit_price
        elif self.max_fee is not None and self.max_gas is not None and self.max_gas_unit_price is None:
            if self.max_gas == 0:
                raise RequestValidationError(_ZERO_MAX_GAS, field="max_gas")
            unit_price = self.max_fee // self.max_gas

        if max_gas is None or unit_price is None:
            raise RequestValidationError(
                "Max gas and max gas unit price cannot be resolved without a fee estimate",
                field="max_gas",
            )
        if max_gas > U64_MAX:
            raise RequestValidationError("Failed to convert max gas amount: value does not fit u64", field="max_gas")
        if unit_price > U128_MAX:
            raise RequestValidationError(
                "Failed to convert max gas unit price: value does not fit u128",
                field="max_gas_unit_price",
            )
        return StrkFee(max_gas=max_gas, max_gas_unit_price=unit_price)


FeeSettings = EthFeeSettings | StrkFeeSettings


def _optional_felt(value: Any, field: str) -> int | None:
    if value is None:
        return None
    try:
        return parse_felt(value)
    except ValueError as exc:
        raise RequestValidationError(f"Invalid {field.replace('_', ' ')}: {exc}", field=field) from exc


def _parse_fee_token(raw: Any) -> FeeToken:
    if raw is None:
        return FeeToken.ETH
    if isinstance(raw, FeeToken):
        return raw
    try:
        return FeeToken(str(raw).strip().lower())
    except ValueError as exc:
        raise RequestValidationError(f"Unsupported fee token: {raw!r}", field="fee_token") from exc


def fee_settings_from_args(
    *,
    fee_token: FeeToken | str | None = None,
    max_fee: Any = None,
    max_gas: Any = None,
    max_gas_unit_price: Any = None,
) -> FeeSettings:
    """Validate fee overrides and build the matching settings."""
    token = _parse_fee_token(fee_token)
    fee = _optional_felt(max_fee, "max_fee")
    gas = _optional_felt(max_gas, "max_gas")
    price = _optional_felt(max_gas_unit_price, "max_gas_unit_price")

    if token is FeeToken.ETH:
        if gas is not None:
            raise RequestValidationError("Max gas is not supported for ETH fee payment", field="max_gas")
        if price is not None:
            raise RequestValidationError(
                "Max gas unit price is not supported for ETH fee payment",
                field="max_gas_unit_price",
            )
        return EthFeeSettings(max_fee=fee)

    if fee is not None and gas is not None and price is not None and fee != gas * price:
        raise RequestValidationError(
            "Max fee should be equal to max gas amount multiplied by max gas unit price",
            field="max_fee",
        )
    if fee is not None and gas is not None and price is None and fee < gas:
        raise RequestValidationError("Max fee should be greater than or equal to max gas amount", field="max_fee")
    if fee is not None and gas is None and price is not None and fee < price:
        raise RequestValidationError(
            "Max fee should be greater than or equal to max gas unit price",
            field="max_fee",
        )
    if fee is not None and gas is None and price == 0:
        raise RequestValidationError(_ZERO_UNIT_PRICE, field="max_gas_unit_price")
    if fee is not None and price is None and gas == 0:
        raise RequestValidationError(_ZERO_MAX_GAS, field="max_gas")
    if gas is not None and gas > U64_MAX:
        raise RequestValidationError("Failed to convert max gas amount: value does not fit u64", field="max_gas")
    if price is not None and price > U128_MAX:
        raise RequestValidationError(
            "Failed to convert max gas unit price: value does not fit u128",
            field="max_gas_unit_price",
        )
    return StrkFeeSettings(max_fee=fee, max_gas=gas, max_gas_unit_price=price)

