"""Scalar types shared by currencies and the HTTP schemas.

Raw token amounts cross the API as plain decimal strings so that values
above 2**53 survive JSON clients. Addresses are stored lowercase so that
tokens compare by value.
"""

import re
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator, Field

UINT256_MAX = 2**256 - 1

_DIGITS = re.compile(r"[0-9]+")
_ADDRESS = re.compile(r"0x[0-9a-fA-F]{40}")


def parse_uint256(value: Any) -> int:
    """Parse a raw token amount.

    Strings must be bare decimal digits: signs, whitespace, underscores and
    hex are rejected so that every amount has exactly one spelling.

    Args:
        value: int or decimal digit string

    Returns:
        The amount as an int in [0, 2**256 - 1]

    Raises:
        ValueError: If the value is not a uint256
    """
    if isinstance(value, bool):
        raise ValueError("Amount must be an int or decimal string, got bool")
    if isinstance(value, str):
        if not _DIGITS.fullmatch(value):
            raise ValueError(f"Amount must be a decimal digit string: {value!r}")
        value = int(value)
    elif not isinstance(value, int):
        raise ValueError(f"Amount must be an int or decimal string, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"Amount cannot be negative: {value}")
    if value > UINT256_MAX:
        raise ValueError(f"Amount overflow: {value} > 2^256-1")
    return value


def _canonical_uint256(value: Any) -> str:
    return str(parse_uint256(value))


def is_valid_address(address: Any) -> bool:
    """Check for a 0x-prefixed, 20-byte hex address (any case)."""
    return isinstance(address, str) and _ADDRESS.fullmatch(address) is not None


def normalize_address(address: str) -> str:
    """Lowercase a token address.

    Raises:
        ValueError: If the address is not 0x followed by 40 hex characters
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid address: {address}")
    return address.lower()


# Token address in requests and responses, lowercased on input
Address = Annotated[
    str,
    Field(pattern=r"^0x[a-fA-F0-9]{40}$"),
    AfterValidator(str.lower),
]

# Raw amount as a canonical decimal string (ints are accepted on input)
Uint256 = Annotated[
    str,
    BeforeValidator(_canonical_uint256),
    Field(description="Raw token amount as a decimal string"),
]


__all__ = [
    "UINT256_MAX",
    "parse_uint256",
    "is_valid_address",
    "normalize_address",
    "Address",
    "Uint256",
]
