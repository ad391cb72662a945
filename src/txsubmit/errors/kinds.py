from enum import Enum

__all__ = ["ErrorKind"]


class ErrorKind(str, Enum):
    """Closed set of transaction failure kinds."""

    CHAIN_MISMATCH = "ChainMismatchError"
    FEE_CAP_TOO_HIGH = "FeeCapTooHighError"
    FEE_CAP_TOO_LOW = "FeeCapTooLowError"
    TIP_HIGHER_THAN_FEE_CAP = "TipHigherThanFeeCapError"
    INTRINSIC_GAS_TOO_LOW = "IntrinsicGasTooLowError"
    INTRINSIC_GAS_TOO_HIGH = "IntrinsicGasTooHighError"
    INSUFFICIENT_FUNDS = "InsufficientFundsError"
    NONCE_TOO_LOW = "NonceTooLowError"
    UNKNOWN = "UnknownTransactionError"
