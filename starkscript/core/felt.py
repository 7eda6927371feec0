"""
Field element helpers.

Addresses, selectors and calldata are all felts: integers in [0, P).
Values arrive from scripts as ints or as hex/decimal strings.
"""

from __future__ import annotations

import re
from typing import Any

FIELD_PRIME = 2**251 + 17 * 2**192 + 1

# Contract addresses are patricia keys and stay strictly below 2**251.
ADDRESS_UPPER_BOUND = 2**251

MASK_250 = 2**250 - 1

U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1

DEFAULT_ENTRY_POINT_NAME = "__default__"
DEFAULT_L1_ENTRY_POINT_NAME = "__l1_default__"
DEFAULT_ENTRY_POINT_SELECTOR = 0

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def parse_int(value: Any) -> int:
    """
    Parse an int, a ``0x`` hex string or a decimal string.

    Raises ValueError for anything else (bools included).
    """
    if isinstance(value, bool):
        raise ValueError(f"expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.lower().startswith("0x"):
            return int(text[2:], 16)
        if text.lstrip("-").isdigit():
            return int(text, 10)
    raise ValueError(f"cannot decode {value!r} as an integer")


def parse_felt(value: Any) -> int:
    """Parse a value and check it lies in [0, P)."""
    number = parse_int(value)
    if not 0 <= number < FIELD_PRIME:
        raise ValueError(f"{value!r} is outside the field element range")
    return number


def to_hex(value: int) -> str:
    """Serialize a felt the way nodes expect: lowercase 0x hex without padding."""
    return hex(value)


def keccak256(data: bytes) -> bytes:
    """Keccak-256 hash"""
    from Crypto.Hash import keccak
    h = keccak.new(digest_bits=256)
    h.update(data)
    return h.digest()


def starknet_keccak(data: bytes) -> int:
    """Keccak-256 truncated to the low 250 bits."""
    return int.from_bytes(keccak256(data), "big") & MASK_250


def is_identifier(name: str) -> bool:
    return bool(_IDENTIFIER_RE.match(name))


def selector_from_name(name: str) -> int:
    """Entry-point selector for a function name."""
    if name in (DEFAULT_ENTRY_POINT_NAME, DEFAULT_L1_ENTRY_POINT_NAME):
        return DEFAULT_ENTRY_POINT_SELECTOR
    if not is_identifier(name):
        raise ValueError(f"{name!r} is not a valid entry point name")
    return starknet_keccak(name.encode("ascii"))
