import pytest

from starkscript.core.felt import (
    FIELD_PRIME,
    parse_felt,
    parse_int,
    selector_from_name,
    starknet_keccak,
    to_hex,
)


def test_selector_from_name_matches_known_selector() -> None:
    assert selector_from_name("transfer") == 0x83AFD3F4CAEDC6EEBF44246FE54E38C95E3179A5EC9EA81740ECA5B482D12E


def test_default_entry_points_resolve_to_zero() -> None:
    assert selector_from_name("__default__") == 0
    assert selector_from_name("__l1_default__") == 0


def test_selector_is_250_bits_and_deterministic() -> None:
    first = selector_from_name("put")
    assert first == selector_from_name("put")
    assert 0 < first < 2**250
    assert first != selector_from_name("get")


def test_starknet_keccak_masks_top_bits() -> None:
    assert starknet_keccak(b"") < 2**250


@pytest.mark.parametrize("name", ["", "1abc", "has space", "dash-name", "é"])
def test_selector_from_name_rejects_non_identifiers(name: str) -> None:
    with pytest.raises(ValueError):
        selector_from_name(name)


def test_parse_int_accepts_hex_decimal_and_ints() -> None:
    assert parse_int(5) == 5
    assert parse_int("0x10") == 16
    assert parse_int("0X10") == 16
    assert parse_int(" 42 ") == 42


@pytest.mark.parametrize("value", [True, None, 1.5, "abc", "0xzz", b"0x1", [1]])
def test_parse_int_rejects_garbage(value) -> None:
    with pytest.raises(ValueError):
        parse_int(value)


def test_parse_felt_enforces_field_range() -> None:
    assert parse_felt(FIELD_PRIME - 1) == FIELD_PRIME - 1
    with pytest.raises(ValueError):
        parse_felt(FIELD_PRIME)
    with pytest.raises(ValueError):
        parse_felt(-1)


def test_to_hex_is_unpadded_lowercase() -> None:
    assert to_hex(0) == "0x0"
    assert to_hex(0xABC) == "0xabc"
