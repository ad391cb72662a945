"""
Node error classification.

Maps an error reported by the node to exactly one transaction error kind
by matching the raw message against a fixed, ordered table of known node
diagnostics. The first matching row wins; no match yields
UnknownTransactionError. Matching is best-effort: two failure conditions can
share wording, and only table order disambiguates them.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Dict, Optional, Pattern, Tuple

from txsubmit.errors.rpc import ProviderError
from txsubmit.errors.transaction import (
    FeeCapTooHighError,
    FeeCapTooLowError,
    InsufficientFundsError,
    IntrinsicGasTooHighError,
    IntrinsicGasTooLowError,
    NonceTooLowError,
    TipHigherThanFeeCapError,
    TransactionError,
    UnknownTransactionError,
)
from txsubmit.utils.logging import get_logger

if TYPE_CHECKING:
    from txsubmit.types.request import TransactionRequest

_logger = get_logger(__name__)

# (pattern, error class, request attributes forwarded to the error)
NODE_ERROR_TABLE: Tuple[Tuple[Pattern[str], type, Tuple[str, ...]], ...] = (
    (re.compile(r"insufficient funds", re.IGNORECASE), InsufficientFundsError, ()),
    (re.compile(r"intrinsic gas too low", re.IGNORECASE), IntrinsicGasTooLowError, ("gas",)),
    (
        re.compile(
            r"intrinsic gas too high|gas limit reached|exceeds block gas limit",
            re.IGNORECASE,
        ),
        IntrinsicGasTooHighError,
        ("gas",),
    ),
    (
        re.compile(
            r"max fee per gas less than block base fee"
            r"|fee cap less than block base fee"
            r"|transaction is outdated",
            re.IGNORECASE,
        ),
        FeeCapTooLowError,
        ("max_fee_per_gas",),
    ),
    (
        re.compile(
            r"nonce too low|transaction already imported|already known",
            re.IGNORECASE,
        ),
        NonceTooLowError,
        ("nonce",),
    ),
    (
        re.compile(
            r"max fee per gas higher than 2\^256-1|fee cap higher than 2\^256-1",
            re.IGNORECASE,
        ),
        FeeCapTooHighError,
        ("max_fee_per_gas",),
    ),
    (
        re.compile(
            r"max priority fee per gas higher than max fee per gas|tip higher than fee cap",
            re.IGNORECASE,
        ),
        TipHigherThanFeeCapError,
        ("max_fee_per_gas", "max_priority_fee_per_gas"),
    ),
)


def node_message_of(error: BaseException) -> str:
    """Extract the raw node diagnostic from a provider error or any exception."""
    if isinstance(error, ProviderError):
        return error.rpc_message
    return str(error)


def matches_node_error(error: BaseException) -> bool:
    """Whether the error carries node wording from the classifier table."""
    message = node_message_of(error)
    return any(pattern.search(message) for pattern, _, _ in NODE_ERROR_TABLE)


def classify(
    error: BaseException,
    request: Optional["TransactionRequest"] = None,
) -> TransactionError:
    """
    Turn a submission failure into a typed transaction error.

    Already-typed errors (raised client-side) pass through unchanged.

    Args:
        error: Error raised while submitting
        request: Request as supplied by the caller; its set fields are echoed

    Returns:
        The matching TransactionError subclass instance
    """
    if isinstance(error, TransactionError):
        return error

    message = node_message_of(error)
    for pattern, error_class, forwarded in NODE_ERROR_TABLE:
        if pattern.search(message):
            values: Dict[str, Any] = {}
            if request is not None:
                values = {name: getattr(request, name) for name in forwarded}
            _logger.debug(
                "Classified node error",
                extra={"kind": error_class.kind.value, "node_message": message},
            )
            return error_class(request=request, details=message, **values)

    _logger.debug("Unclassified node error", extra={"node_message": message})
    return UnknownTransactionError(node_message=message, request=request)


__all__ = ["NODE_ERROR_TABLE", "node_message_of", "matches_node_error", "classify"]
