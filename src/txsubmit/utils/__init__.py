"""
txsubmit utilities.

Unit conversion, input validation and structured logging helpers.
"""

from txsubmit.utils.logging import (
    configure_logging,
    disable_logging,
    enable_debug,
    get_logger,
    set_level,
)
from txsubmit.utils.units import (
    format_ether,
    format_gwei,
    format_units,
    parse_ether,
    parse_gwei,
)
from txsubmit.utils.validation import validate_address, validate_data, validate_uint

__all__ = [
    # Units
    "format_units",
    "format_ether",
    "format_gwei",
    "parse_ether",
    "parse_gwei",
    # Validation
    "validate_address",
    "validate_uint",
    "validate_data",
    # Structured logging
    "get_logger",
    "configure_logging",
    "set_level",
    "disable_logging",
    "enable_debug",
]
