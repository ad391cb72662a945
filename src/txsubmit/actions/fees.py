"""
Fee parameter validation.

Rules, checked in order, first violation wins:

1. ``maxFeePerGas`` (or legacy ``gasPrice``) above 2^256-1
2. ``maxPriorityFeePerGas`` above ``maxFeePerGas``
3. ``maxFeePerGas`` below the block base fee (only when the base fee is known)

Validation is a pure function of the request and the base fee, so running
it twice against the same snapshot gives the same outcome.
"""

from __future__ import annotations

from typing import Optional

from txsubmit.constants import MAX_UINT256
from txsubmit.errors.transaction import (
    FeeCapTooHighError,
    FeeCapTooLowError,
    TipHigherThanFeeCapError,
)
from txsubmit.types.request import TransactionRequest


def assert_fees(
    request: TransactionRequest,
    base_fee_per_gas: Optional[int] = None,
    *,
    echo: Optional[TransactionRequest] = None,
) -> None:
    """
    Validate the fee fields of a request.

    Args:
        request: Request whose fee fields are checked
        base_fee_per_gas: Base fee of the latest block, ``None`` if unknown
        echo: Request echoed in the error message; defaults to ``request``.
            The pipeline passes the caller's original fields here so that
            defaults filled in by the resolver are not echoed.

    Raises:
        FeeCapTooHighError: Fee cap above 2^256-1
        TipHigherThanFeeCapError: Tip above the fee cap
        FeeCapTooLowError: Fee cap below the block base fee
    """
    echo = echo if echo is not None else request

    if request.gas_price is not None:
        if request.gas_price > MAX_UINT256:
            raise FeeCapTooHighError(
                max_fee_per_gas=request.gas_price,
                fee_field="gasPrice",
                request=echo,
            )
        return

    max_fee = request.max_fee_per_gas
    tip = request.max_priority_fee_per_gas

    if max_fee is not None and max_fee > MAX_UINT256:
        raise FeeCapTooHighError(max_fee_per_gas=max_fee, request=echo)

    if max_fee is not None and tip is not None and tip > max_fee:
        raise TipHigherThanFeeCapError(
            max_fee_per_gas=max_fee,
            max_priority_fee_per_gas=tip,
            request=echo,
        )

    if max_fee is not None and base_fee_per_gas is not None and max_fee < base_fee_per_gas:
        raise FeeCapTooLowError(
            max_fee_per_gas=max_fee,
            base_fee_per_gas=base_fee_per_gas,
            request=echo,
        )


__all__ = ["assert_fees"]
