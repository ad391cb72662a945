"""
Transaction error taxonomy.

Every failure of the submission pipeline surfaces as exactly one of the
classes below. Each carries its structured fields (fees in wei, gas, nonce),
the echoed request arguments and the raw node diagnostic, and renders a
deterministic message through :mod:`txsubmit.errors.render`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Optional, Tuple

from txsubmit.errors.base import TxSubmitError
from txsubmit.errors.kinds import ErrorKind
from txsubmit.errors.render import RequestArgs, describe, echo_request_args, render_message
from txsubmit.version import get_version_tag

if TYPE_CHECKING:
    from txsubmit.types.chain import Chain
    from txsubmit.types.request import TransactionRequest


@dataclass(frozen=True)
class ErrorRecord:
    """
    Terminal, serializable outcome of a failed submission.

    Attributes:
        kind: Error kind
        message: Fully rendered multi-line message
        request_args: Caller-supplied fields as ``(name, rendered)`` pairs
        details: Raw node diagnostic, if the node reported one
        version: ``name@version`` tag printed in the message
    """

    kind: ErrorKind
    message: str
    request_args: RequestArgs = ()
    details: Optional[str] = None
    version: str = field(default_factory=get_version_tag)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "request_args": [list(pair) for pair in self.request_args],
            "details": self.details,
            "version": self.version,
        }


class TransactionError(TxSubmitError):
    """
    Base class of the transaction error taxonomy.

    ``str(error)`` is the rendered message; ``code`` is the kind name.

    Attributes:
        kind: Error kind of the concrete class
        short_message: First paragraph of the message
        request_args: Echoed caller-supplied fields
        node_message: Raw node diagnostic (``Details:`` line)
        values: Structured fields the message was rendered from
    """

    kind: ClassVar[ErrorKind]

    def __init__(
        self,
        *,
        request: Optional["TransactionRequest"] = None,
        chain: Optional["Chain"] = None,
        details: Optional[str] = None,
        **values: Any,
    ) -> None:
        short_message, meta_messages = describe(self.kind, chain=chain, **values)
        request_args = echo_request_args(request, chain) if request is not None else ()
        message = render_message(
            short_message,
            meta_messages=meta_messages,
            request_args=request_args,
            details=details,
        )

        context: Dict[str, Any] = {"kind": self.kind.value}
        context.update(values)
        if details:
            context["node_message"] = details

        super().__init__(message, code=self.kind.name, details=context)
        self.short_message = short_message
        self.meta_messages = meta_messages
        self.request_args = request_args
        self.node_message = details
        self.values = values

    @property
    def record(self) -> ErrorRecord:
        """The error as an :class:`ErrorRecord`."""
        return ErrorRecord(
            kind=self.kind,
            message=self.message,
            request_args=self.request_args,
            details=self.node_message,
        )


class ChainMismatchError(TransactionError):
    """
    Raised when the connected node's chain differs from ``request.chain``.

    Example:
        >>> raise ChainMismatchError(chain=OPTIMISM, current_chain_id=1)
    """

    kind = ErrorKind.CHAIN_MISMATCH

    def __init__(
        self,
        *,
        chain: "Chain",
        current_chain_id: int,
        request: Optional["TransactionRequest"] = None,
    ) -> None:
        super().__init__(
            request=request,
            chain=chain,
            current_chain_id=current_chain_id,
        )
        self.details["chain_id"] = chain.id
        self.chain = chain
        self.current_chain_id = current_chain_id


class FeeCapTooHighError(TransactionError):
    """Raised when the fee cap exceeds 2^256-1."""

    kind = ErrorKind.FEE_CAP_TOO_HIGH

    def __init__(
        self,
        *,
        max_fee_per_gas: Optional[int] = None,
        fee_field: str = "maxFeePerGas",
        request: Optional["TransactionRequest"] = None,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(
            request=request,
            details=details,
            max_fee_per_gas=max_fee_per_gas,
            fee_field=fee_field,
        )
        self.max_fee_per_gas = max_fee_per_gas


class FeeCapTooLowError(TransactionError):
    """Raised when the fee cap is below the current block base fee."""

    kind = ErrorKind.FEE_CAP_TOO_LOW

    def __init__(
        self,
        *,
        max_fee_per_gas: Optional[int] = None,
        base_fee_per_gas: Optional[int] = None,
        request: Optional["TransactionRequest"] = None,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(
            request=request,
            details=details,
            max_fee_per_gas=max_fee_per_gas,
            base_fee_per_gas=base_fee_per_gas,
        )
        self.max_fee_per_gas = max_fee_per_gas
        self.base_fee_per_gas = base_fee_per_gas


class TipHigherThanFeeCapError(TransactionError):
    """Raised when ``maxPriorityFeePerGas`` exceeds ``maxFeePerGas``."""

    kind = ErrorKind.TIP_HIGHER_THAN_FEE_CAP

    def __init__(
        self,
        *,
        max_fee_per_gas: Optional[int] = None,
        max_priority_fee_per_gas: Optional[int] = None,
        request: Optional["TransactionRequest"] = None,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(
            request=request,
            details=details,
            max_fee_per_gas=max_fee_per_gas,
            max_priority_fee_per_gas=max_priority_fee_per_gas,
        )
        self.max_fee_per_gas = max_fee_per_gas
        self.max_priority_fee_per_gas = max_priority_fee_per_gas


class IntrinsicGasTooLowError(TransactionError):
    """Raised when the gas limit is below the intrinsic cost of the request."""

    kind = ErrorKind.INTRINSIC_GAS_TOO_LOW

    def __init__(
        self,
        *,
        gas: Optional[int] = None,
        request: Optional["TransactionRequest"] = None,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(request=request, details=details, gas=gas)
        self.gas = gas


class IntrinsicGasTooHighError(TransactionError):
    """Raised when the gas limit exceeds the block gas limit."""

    kind = ErrorKind.INTRINSIC_GAS_TOO_HIGH

    def __init__(
        self,
        *,
        gas: Optional[int] = None,
        request: Optional["TransactionRequest"] = None,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(request=request, details=details, gas=gas)
        self.gas = gas


class InsufficientFundsError(TransactionError):
    """Raised when ``gas * gas fee + value`` exceeds the sender balance."""

    kind = ErrorKind.INSUFFICIENT_FUNDS

    def __init__(
        self,
        *,
        request: Optional["TransactionRequest"] = None,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(request=request, details=details)


class NonceTooLowError(TransactionError):
    """Raised when the nonce is below the account's current nonce."""

    kind = ErrorKind.NONCE_TOO_LOW

    def __init__(
        self,
        *,
        nonce: Optional[int] = None,
        request: Optional["TransactionRequest"] = None,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(request=request, details=details, nonce=nonce)
        self.nonce = nonce


class UnknownTransactionError(TransactionError):
    """Raised when the node error matches no known diagnostic."""

    kind = ErrorKind.UNKNOWN

    def __init__(
        self,
        *,
        node_message: str,
        request: Optional["TransactionRequest"] = None,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(
            request=request,
            details=details if details is not None else node_message,
            node_message=node_message,
        )


ERROR_CLASSES: Tuple[type, ...] = (
    ChainMismatchError,
    FeeCapTooHighError,
    FeeCapTooLowError,
    TipHigherThanFeeCapError,
    IntrinsicGasTooLowError,
    IntrinsicGasTooHighError,
    InsufficientFundsError,
    NonceTooLowError,
    UnknownTransactionError,
)


__all__ = [
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
]
