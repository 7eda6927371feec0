"""Tests for starkscript.builder and fee settings."""

from __future__ import annotations

import pytest

from starkscript.builder import build_invoke_request, parse_calldata, parse_contract_address, resolve_selector
from starkscript.core.fee import (
    EthFeeSettings,
    FeeEstimate,
    FeeToken,
    StrkFeeSettings,
    fee_settings_from_args,
)
from starkscript.core.felt import ADDRESS_UPPER_BOUND, FIELD_PRIME, selector_from_name
from starkscript.utils.exceptions import RequestValidationError


class TestContractAddress:
    def test_accepts_hex_and_int(self) -> None:
        assert parse_contract_address("0x0456") == 0x456
        assert parse_contract_address(0x456) == 0x456

    def test_rejects_zero(self) -> None:
        with pytest.raises(RequestValidationError) as err:
            parse_contract_address("0x0")
        assert err.value.field == "contract_address"
        assert "non-zero" in err.value.message

    def test_rejects_out_of_range(self) -> None:
        with pytest.raises(RequestValidationError) as err:
            parse_contract_address(ADDRESS_UPPER_BOUND)
        assert "out of range" in err.value.message

    @pytest.mark.parametrize("value", ["not-an-address", None, True, "0x"])
    def test_rejects_undecodable(self, value) -> None:
        with pytest.raises(RequestValidationError) as err:
            parse_contract_address(value)
        assert err.value.field == "contract_address"


class TestSelector:
    def test_name_is_hashed(self) -> None:
        assert resolve_selector("put") == selector_from_name("put")

    def test_explicit_selector_passes_through(self) -> None:
        assert resolve_selector("0x1234") == 0x1234
        assert resolve_selector(0x1234) == 0x1234

    def test_default_entry_point(self) -> None:
        assert resolve_selector("__default__") == 0

    @pytest.mark.parametrize("value", ["bad name", "", hex(FIELD_PRIME), 1.5])
    def test_unresolvable(self, value) -> None:
        with pytest.raises(RequestValidationError) as err:
            resolve_selector(value)
        assert err.value.field == "entry_point"


class TestCalldata:
    def test_none_is_empty(self) -> None:
        assert parse_calldata(None) == ()

    def test_mixed_values(self) -> None:
        assert parse_calldata(["0x10", 3, "7"]) == (16, 3, 7)

    @pytest.mark.parametrize("value", ["0x10", b"\x01", 16])
    def test_rejects_non_sequences(self, value) -> None:
        with pytest.raises(RequestValidationError, match="sequence of field elements"):
            parse_calldata(value)

    def test_reports_bad_index(self) -> None:
        with pytest.raises(RequestValidationError, match="index 1"):
            parse_calldata([1, "nope", 3])

    def test_rejects_value_outside_field(self) -> None:
        with pytest.raises(RequestValidationError, match="index 0"):
            parse_calldata([FIELD_PRIME])


def test_build_invoke_request_defaults_to_eth_fee() -> None:
    request = build_invoke_request("0x456", "put", ["0x10"], nonce="0x3")
    assert request.contract_address == 0x456
    assert request.entry_point_selector == selector_from_name("put")
    assert request.calldata == (0x10,)
    assert request.nonce == 3
    assert request.fee_settings == EthFeeSettings(max_fee=None)
    assert request.max_fee is None


def test_build_invoke_request_rejects_bad_nonce() -> None:
    with pytest.raises(RequestValidationError) as err:
        build_invoke_request("0x456", "put", nonce="x")
    assert err.value.field == "nonce"


class TestFeeSettings:
    def test_eth_with_max_fee(self) -> None:
        assert fee_settings_from_args(max_fee="0x64") == EthFeeSettings(max_fee=100)

    def test_eth_rejects_max_gas(self) -> None:
        with pytest.raises(RequestValidationError, match="Max gas is not supported for ETH fee payment"):
            fee_settings_from_args(fee_token="eth", max_gas=10)

    def test_eth_rejects_max_gas_unit_price(self) -> None:
        with pytest.raises(RequestValidationError, match="Max gas unit price is not supported for ETH fee payment"):
            fee_settings_from_args(fee_token=FeeToken.ETH, max_gas_unit_price=10)

    def test_unsupported_token(self) -> None:
        with pytest.raises(RequestValidationError, match="Unsupported fee token"):
            fee_settings_from_args(fee_token="doge")

    def test_token_is_case_insensitive(self) -> None:
        assert fee_settings_from_args(fee_token="STRK").token is FeeToken.STRK

    def test_strk_all_fields_must_agree(self) -> None:
        with pytest.raises(RequestValidationError, match="multiplied by max gas unit price"):
            fee_settings_from_args(fee_token="strk", max_fee=100, max_gas=10, max_gas_unit_price=11)
        settings = fee_settings_from_args(fee_token="strk", max_fee=100, max_gas=10, max_gas_unit_price=10)
        assert settings == StrkFeeSettings(max_fee=100, max_gas=10, max_gas_unit_price=10)

    def test_strk_max_fee_below_max_gas(self) -> None:
        with pytest.raises(RequestValidationError, match="greater than or equal to max gas amount"):
            fee_settings_from_args(fee_token="strk", max_fee=5, max_gas=10)

    def test_strk_max_fee_below_unit_price(self) -> None:
        with pytest.raises(RequestValidationError, match="greater than or equal to max gas unit price"):
            fee_settings_from_args(fee_token="strk", max_fee=5, max_gas_unit_price=10)

    def test_strk_max_gas_must_fit_u64(self) -> None:
        with pytest.raises(RequestValidationError, match="u64"):
            fee_settings_from_args(fee_token="strk", max_gas=2**64)

    def test_strk_unit_price_must_fit_u128(self) -> None:
        with pytest.raises(RequestValidationError, match="u128"):
            fee_settings_from_args(fee_token="strk", max_gas_unit_price=2**128)

    def test_invalid_max_fee(self) -> None:
        with pytest.raises(RequestValidationError, match="Invalid max fee"):
            fee_settings_from_args(max_fee="lots")


class TestFeeResolution:
    estimate = FeeEstimate(overall_fee=500, gas_consumed=50, gas_price=10)

    def test_eth_explicit_wins(self) -> None:
        assert EthFeeSettings(max_fee=7).resolve(self.estimate).max_fee == 7

    def test_eth_from_estimate(self) -> None:
        assert EthFeeSettings().resolve(self.estimate).max_fee == 500

    def test_eth_without_anything(self) -> None:
        with pytest.raises(RequestValidationError, match="no fee estimate"):
            EthFeeSettings().resolve(None)

    def test_strk_from_estimate(self) -> None:
        fee = StrkFeeSettings().resolve(self.estimate)
        assert (fee.max_gas, fee.max_gas_unit_price) == (50, 10)

    def test_strk_max_gas_derived_from_max_fee(self) -> None:
        fee = StrkFeeSettings(max_fee=100, max_gas_unit_price=4).resolve(None)
        assert (fee.max_gas, fee.max_gas_unit_price) == (25, 4)

    def test_strk_unit_price_derived_from_max_fee(self) -> None:
        fee = StrkFeeSettings(max_fee=100, max_gas=20).resolve(None)
        assert (fee.max_gas, fee.max_gas_unit_price) == (20, 5)

    def test_strk_unresolvable(self) -> None:
        with pytest.raises(RequestValidationError):
            StrkFeeSettings(max_fee=100).resolve(None)


class TestZeroDivisors:
    def test_zero_unit_price_with_max_fee_is_rejected(self) -> None:
        with pytest.raises(RequestValidationError, match="unit price must be greater than zero") as err:
            fee_settings_from_args(fee_token="strk", max_fee=100, max_gas_unit_price=0)
        assert err.value.field == "max_gas_unit_price"

    def test_zero_max_gas_with_max_fee_is_rejected(self) -> None:
        with pytest.raises(RequestValidationError, match="amount must be greater than zero") as err:
            fee_settings_from_args(fee_token="strk", max_fee=100, max_gas=0)
        assert err.value.field == "max_gas"

    def test_resolve_does_not_fall_back_to_estimate(self) -> None:
        estimate = FeeEstimate(overall_fee=500, gas_consumed=50, gas_price=10)
        with pytest.raises(RequestValidationError, match="greater than zero"):
            StrkFeeSettings(max_fee=100, max_gas_unit_price=0).resolve(estimate)
        with pytest.raises(RequestValidationError, match="greater than zero"):
            StrkFeeSettings(max_fee=100, max_gas=0).resolve(estimate)

    def test_zero_unit_price_without_max_fee_is_allowed(self) -> None:
        fee = StrkFeeSettings(max_gas=10, max_gas_unit_price=0).resolve(None)
        assert (fee.max_gas, fee.max_gas_unit_price) == (10, 0)
