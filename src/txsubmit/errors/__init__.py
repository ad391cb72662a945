"""
Exception hierarchy for txsubmit.

- TxSubmitError: root of every library exception
- TransactionError: closed taxonomy of submission failures
- ValidationError: malformed request arguments
- RpcError / ProviderError: failures reported by the node
"""

from txsubmit.errors.base import TxSubmitError
from txsubmit.errors.classify import NODE_ERROR_TABLE, classify
from txsubmit.errors.kinds import ErrorKind
from txsubmit.errors.render import echo_request_args, pretty_print, render_message
from txsubmit.errors.rpc import ProviderError, RpcError
from txsubmit.errors.transaction import (
    ERROR_CLASSES,
    ChainMismatchError,
    ErrorRecord,
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
from txsubmit.errors.validation import (
    FeeModelConflictError,
    InvalidAddressError,
    InvalidAmountError,
    ValidationError,
)

__all__ = [
    "TxSubmitError",
    # Taxonomy
    "ErrorKind",
    "ErrorRecord",
    "TransactionError",
    "ChainMismatchError",
    "FeeCapTooHighError",
    "FeeCapTooLowError",
    "TipHigherThanFeeCapError",
    "IntrinsicGasTooLowError",
    "IntrinsicGasTooHighError",
    "InsufficientFundsError",
    "NonceTooLowError",
    "UnknownTransactionError",
    "ERROR_CLASSES",
    # Classification and rendering
    "NODE_ERROR_TABLE",
    "classify",
    "echo_request_args",
    "pretty_print",
    "render_message",
    # Validation
    "ValidationError",
    "InvalidAddressError",
    "InvalidAmountError",
    "FeeModelConflictError",
    # Provider
    "RpcError",
    "ProviderError",
]
