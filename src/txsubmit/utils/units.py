"""
Unit conversion helpers.

Amounts are carried as integers in wei everywhere in the library. These
helpers render them as exact decimal strings for error messages and parse
human-readable amounts back into wei. Rendering never goes through floats or
``Decimal`` contexts, so values far above 2^256 keep every digit.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Union

from eth_utils import to_wei

from txsubmit.constants import ETHER_DECIMALS, GWEI_DECIMALS


def format_units(value: int, decimals: int) -> str:
    """
    Render an integer amount of base units as a decimal string.

    Trailing zeros of the fractional part are dropped and no exponent
    notation is ever produced.

    Args:
        value: Amount in base units
        decimals: Number of decimals of the display unit

    Returns:
        Decimal string, e.g. ``format_units(1_500_000_000, 9) == "1.5"``

    Example:
        >>> format_units(10**18, 18)
        '1'
        >>> format_units(1, 9)
        '0.000000001'
    """
    negative = value < 0
    display = str(abs(value)).rjust(decimals, "0")

    if decimals:
        integer, fraction = display[:-decimals], display[-decimals:]
    else:
        integer, fraction = display, ""
    fraction = fraction.rstrip("0")

    result = integer or "0"
    if fraction:
        result = f"{result}.{fraction}"
    return f"-{result}" if negative else result


def format_ether(wei: int) -> str:
    """Render a wei amount in ether."""
    return format_units(wei, ETHER_DECIMALS)


def format_gwei(wei: int) -> str:
    """Render a wei amount in gwei."""
    return format_units(wei, GWEI_DECIMALS)


def parse_ether(amount: Union[int, str, Decimal]) -> int:
    """
    Parse an ether amount into wei.

    Example:
        >>> parse_ether("1")
        1000000000000000000
    """
    return int(to_wei(Decimal(str(amount)), "ether"))


def parse_gwei(amount: Union[int, str, Decimal]) -> int:
    """Parse a gwei amount into wei."""
    return int(to_wei(Decimal(str(amount)), "gwei"))


__all__ = [
    "format_units",
    "format_ether",
    "format_gwei",
    "parse_ether",
    "parse_gwei",
]
