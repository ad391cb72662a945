"""
Argument validation exceptions.

These are raised while a request is being constructed, before the
submission pipeline runs, and are not part of the transaction error
taxonomy.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from txsubmit.errors.base import TxSubmitError


class ValidationError(TxSubmitError):
    """
    Raised when input validation fails.

    Example:
        >>> raise ValidationError("gas must be non-negative", field="gas")
    """

    code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = details or {}
        if field:
            details["field"] = field

        super().__init__(message, details=details)
        self.field = field


class InvalidAddressError(ValidationError):
    """
    Raised when an Ethereum address is malformed.

    Example:
        >>> raise InvalidAddressError("0x123", field="to")
    """

    code = "INVALID_ADDRESS"

    def __init__(
        self,
        address: str,
        *,
        field: str = "address",
        reason: Optional[str] = None,
    ) -> None:
        message = f"Invalid {field}: {address!r}"
        if reason:
            message += f" ({reason})"

        super().__init__(message, field=field, details={"address": address})
        self.address = address
        self.reason = reason


class InvalidAmountError(ValidationError):
    """
    Raised when a numeric request field is not an unsigned integer.

    Example:
        >>> raise InvalidAmountError("-1", field="value", reason="cannot be negative")
    """

    code = "INVALID_AMOUNT"

    def __init__(
        self,
        amount: str,
        *,
        field: str = "amount",
        reason: Optional[str] = None,
    ) -> None:
        message = f"Invalid {field}: {amount}"
        if reason:
            message += f" ({reason})"

        super().__init__(message, field=field, details={"amount": amount})
        self.amount = amount
        self.reason = reason


class FeeModelConflictError(ValidationError):
    """Raised when legacy and EIP-1559 fee fields are mixed in one request."""

    code = "FEE_MODEL_CONFLICT"

    def __init__(self) -> None:
        super().__init__(
            "Cannot specify both a `gasPrice` and a `maxFeePerGas`/`maxPriorityFeePerGas`.",
            field="gasPrice",
        )
