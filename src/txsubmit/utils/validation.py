"""
Validation utilities for txsubmit.

Provides input validation functions for:
- Ethereum addresses
- Unsigned integer request fields (wei amounts, gas, nonce)
- Hex-encoded calldata

All validation functions raise ValidationError (or subclasses) on failure.
"""

from __future__ import annotations

import re
from typing import Any, Optional, Union

from txsubmit.errors.validation import (
    InvalidAddressError,
    InvalidAmountError,
    ValidationError,
)

ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")
HEX_PATTERN = re.compile(r"^0x([0-9a-fA-F]{2})*$")


def validate_address(address: Any, field_name: str = "address") -> str:
    """
    Validate Ethereum address format.

    The address is returned unchanged so that error messages echo exactly
    what the caller supplied.

    Args:
        address: Address to validate
        field_name: Field name for error messages

    Returns:
        The address as given

    Raises:
        InvalidAddressError: If address is invalid
    """
    if not address:
        raise InvalidAddressError(
            "" if address is None else str(address),
            field=field_name,
            reason=f"{field_name} is required",
        )

    if not isinstance(address, str):
        raise InvalidAddressError(
            str(address),
            field=field_name,
            reason=f"{field_name} must be a string",
        )

    if not ADDRESS_PATTERN.match(address):
        raise InvalidAddressError(
            address,
            field=field_name,
            reason="must be 0x followed by 40 hex characters",
        )

    return address


def validate_uint(value: Any, field_name: str) -> Optional[int]:
    """
    Validate an optional unsigned integer field.

    No upper bound is enforced here; fee ceilings are checked by the fee
    validator so that they surface as transaction errors.

    Returns:
        The value as ``int``, or ``None`` when unset

    Raises:
        InvalidAmountError: If the value is not a non-negative integer
    """
    if value is None:
        return None

    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAmountError(
            repr(value),
            field=field_name,
            reason="must be an integer",
        )

    if value < 0:
        raise InvalidAmountError(
            str(value),
            field=field_name,
            reason="cannot be negative",
        )

    return value


def validate_data(data: Union[bytes, str, None]) -> Optional[str]:
    """
    Validate calldata and normalize it to a 0x-prefixed hex string.

    Raises:
        ValidationError: If ``data`` is neither bytes nor an even-length hex string
    """
    if data is None:
        return None
    if isinstance(data, (bytes, bytearray)):
        return "0x" + bytes(data).hex()
    if isinstance(data, str) and HEX_PATTERN.match(data):
        return data.lower()
    raise ValidationError("data must be bytes or a 0x-prefixed hex string", field="data")


__all__ = [
    "ADDRESS_PATTERN",
    "validate_address",
    "validate_uint",
    "validate_data",
]
