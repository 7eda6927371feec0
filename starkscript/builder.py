"""Validate invoke arguments and build an InvokeRequest. No network I/O."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from loguru import logger

from starkscript.core.fee import FeeToken, fee_settings_from_args
from starkscript.core.felt import ADDRESS_UPPER_BOUND, parse_felt, parse_int, selector_from_name
from starkscript.core.types import InvokeRequest
from starkscript.utils.exceptions import RequestValidationError


def parse_contract_address(value: Any) -> int:
    try:
        address = parse_int(value)
    except ValueError as exc:
        raise RequestValidationError(f"Invalid contract address {value!r}: {exc}", field="contract_address") from exc
    if address == 0:
        raise RequestValidationError("Contract address must be non-zero", field="contract_address")
    if not 0 < address < ADDRESS_UPPER_BOUND:
        raise RequestValidationError(
            f"Contract address {value!r} is out of range for a contract address",
            field="contract_address",
        )
    return address


def resolve_selector(entry_point: Any) -> int:
    """
    Resolve an entry point to its selector.

    Accepts a function name (``"put"``), an explicit ``0x`` selector, or an
    int selector.
    """
    if isinstance(entry_point, str) and not entry_point.strip().lower().startswith("0x"):
        try:
            return selector_from_name(entry_point.strip())
        except ValueError as exc:
            raise RequestValidationError(
                f"Cannot resolve entry point {entry_point!r} to a selector: {exc}",
                field="entry_point",
            ) from exc
    try:
        return parse_felt(entry_point)
    except ValueError as exc:
        raise RequestValidationError(
            f"Cannot resolve entry point {entry_point!r} to a selector: {exc}",
            field="entry_point",
        ) from exc


def parse_calldata(calldata: Any) -> tuple[int, ...]:
    if calldata is None:
        return ()
    if isinstance(calldata, (str, bytes)) or not isinstance(calldata, Iterable):
        raise RequestValidationError("Calldata must be a sequence of field elements", field="calldata")
    values: list[int] = []
    for index, item in enumerate(calldata):
        try:
            values.append(parse_felt(item))
        except ValueError as exc:
            raise RequestValidationError(f"Invalid calldata value at index {index}: {exc}", field="calldata") from exc
    return tuple(values)


def parse_nonce(nonce: Any) -> int | None:
    if nonce is None:
        return None
    try:
        return parse_felt(nonce)
    except ValueError as exc:
        raise RequestValidationError(f"Invalid nonce: {exc}", field="nonce") from exc


def build_invoke_request(
    contract_address: Any,
    entry_point: Any,
    calldata: Iterable[Any] | None = None,
    *,
    max_fee: Any = None,
    nonce: Any = None,
    fee_token: FeeToken | str | None = None,
    max_gas: Any = None,
    max_gas_unit_price: Any = None,
) -> InvokeRequest:
    """Build an InvokeRequest or raise RequestValidationError."""
    request = InvokeRequest(
        contract_address=parse_contract_address(contract_address),
        entry_point_selector=resolve_selector(entry_point),
        calldata=parse_calldata(calldata),
        nonce=parse_nonce(nonce),
        fee_settings=fee_settings_from_args(
            fee_token=fee_token,
            max_fee=max_fee,
            max_gas=max_gas,
            max_gas_unit_price=max_gas_unit_price,
        ),
    )
    logger.debug(
        "built invoke request contract={} selector={} calldata_len={}",
        hex(request.contract_address),
        hex(request.entry_point_selector),
        len(request.calldata),
    )
    return request
