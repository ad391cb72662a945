"""
Transaction request model.

A TransactionRequest is built once per submission, enriched in place by the
resolver, and discarded once the node accepts or rejects it.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Mapping, Optional, Union

from txsubmit.constants import (
    TX_BASE_GAS,
    TX_CREATE_GAS,
    TX_DATA_NON_ZERO_GAS,
    TX_DATA_ZERO_GAS,
)
from txsubmit.errors.validation import FeeModelConflictError, ValidationError
from txsubmit.types.chain import Chain
from txsubmit.utils.validation import validate_address, validate_data, validate_uint

# python attribute -> JSON-RPC / caller-facing name
RPC_FIELD_NAMES: Dict[str, str] = {
    "from_": "from",
    "to": "to",
    "value": "value",
    "data": "data",
    "gas": "gas",
    "gas_price": "gasPrice",
    "max_fee_per_gas": "maxFeePerGas",
    "max_priority_fee_per_gas": "maxPriorityFeePerGas",
    "nonce": "nonce",
}
_ATTR_NAMES = {rpc: attr for attr, rpc in RPC_FIELD_NAMES.items()}

_UINT_FIELDS = (
    "value",
    "gas",
    "gas_price",
    "max_fee_per_gas",
    "max_priority_fee_per_gas",
    "nonce",
)


@dataclass
class TransactionRequest:
    """
    Parameters of a transaction to submit.

    Exactly one fee model may be used: ``gas_price`` alone (legacy) or the
    ``max_fee_per_gas``/``max_priority_fee_per_gas`` pair (EIP-1559). Fee
    fields left unset are filled with network defaults.

    Attributes:
        from_: Sender address (``from`` is a keyword in Python)
        to: Recipient address, ``None`` for contract creation
        value: Amount to transfer in wei
        gas: Gas limit
        gas_price: Legacy gas price in wei
        max_fee_per_gas: EIP-1559 fee cap in wei
        max_priority_fee_per_gas: EIP-1559 tip in wei
        nonce: Account nonce
        data: Calldata as bytes or 0x-hex
        chain: Chain the caller expects to be connected to
        assert_chain: Compare ``chain.id`` with the node's chain id
        extra: Chain-specific fields consumed only by chain formatters
    """

    from_: str
    to: Optional[str] = None
    value: Optional[int] = None
    gas: Optional[int] = None
    gas_price: Optional[int] = None
    max_fee_per_gas: Optional[int] = None
    max_priority_fee_per_gas: Optional[int] = None
    nonce: Optional[int] = None
    data: Optional[Union[bytes, str]] = None
    chain: Optional[Chain] = None
    assert_chain: bool = True
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        validate_address(self.from_, "from")
        if self.to is not None:
            validate_address(self.to, "to")
        for name in _UINT_FIELDS:
            validate_uint(getattr(self, name), name)
        validate_data(self.data)

        if self.gas_price is not None and (
            self.max_fee_per_gas is not None or self.max_priority_fee_per_gas is not None
        ):
            raise FeeModelConflictError()

    @classmethod
    def from_dict(cls, params: Mapping[str, Any]) -> "TransactionRequest":
        """
        Build a request from caller-style keys.

        Accepts both JSON-RPC names (``from``, ``gasPrice``, ``assertChain``)
        and attribute names (``from_``, ``gas_price``). Unknown keys are kept
        in ``extra`` for chain formatters.

        Example:
            >>> TransactionRequest.from_dict({
            ...     "from": "0xf39fd6e51aad88f6f4ce6ab8827279cfffb92266",
            ...     "to": "0x70997970c51812dc3a010c7d01b50e0d17dc79c8",
            ...     "value": 10**18,
            ...     "maxFeePerGas": 10**10,
            ... })
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        extra: Dict[str, Any] = dict(params.get("extra") or {})
        for key, value in params.items():
            if key == "extra":
                continue
            if key == "assertChain":
                key = "assert_chain"
            attr = _ATTR_NAMES.get(key, key)
            if attr in known:
                kwargs[attr] = value
            else:
                extra[key] = value
        if "from_" not in kwargs:
            raise ValidationError("from is required", field="from")
        return cls(extra=extra, **kwargs)

    @property
    def is_legacy(self) -> bool:
        return self.gas_price is not None

    @property
    def data_hex(self) -> Optional[str]:
        return validate_data(self.data)

    def supplied_fields(self) -> Dict[str, Any]:
        """Return the set fields keyed by their JSON-RPC names."""
        return {
            rpc: getattr(self, attr)
            for attr, rpc in RPC_FIELD_NAMES.items()
            if getattr(self, attr) is not None
        }

    def copy(self) -> "TransactionRequest":
        return replace(self, extra=dict(self.extra))


def intrinsic_gas(request: TransactionRequest) -> int:
    """
    Minimum gas the request shape needs before any execution.

    21000 base, plus 32000 for contract creation, plus 4 gas per zero byte
    and 16 gas per non-zero byte of calldata.
    """
    gas = TX_BASE_GAS
    if request.to is None:
        gas += TX_CREATE_GAS
    data = request.data_hex
    if data:
        payload = bytes.fromhex(data[2:])
        zeros = payload.count(0)
        gas += zeros * TX_DATA_ZERO_GAS + (len(payload) - zeros) * TX_DATA_NON_ZERO_GAS
    return gas


__all__ = ["RPC_FIELD_NAMES", "TransactionRequest", "intrinsic_gas"]
