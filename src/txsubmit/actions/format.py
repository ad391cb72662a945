"""
Request formatting.

Turns a resolved TransactionRequest into JSON-RPC parameters. A chain can
replace the default shape by registering a ``"transactionRequest"``
formatter; chains without one get the default formatting unchanged.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from txsubmit.constants import TRANSACTION_REQUEST
from txsubmit.types.chain import Chain
from txsubmit.types.request import TransactionRequest


def to_quantity(value: int) -> str:
    """Encode an integer as a JSON-RPC quantity (``0x``-hex, no padding)."""
    return hex(value)


def format_transaction_request(request: TransactionRequest) -> Dict[str, Any]:
    """
    Default request shape for ``eth_sendTransaction``/``eth_estimateGas``.

    Unset fields are omitted, integers become hex quantities and calldata
    becomes 0x-hex. Chain-specific ``extra`` fields are not included.
    """
    params: Dict[str, Any] = {"from": request.from_}
    if request.to is not None:
        params["to"] = request.to
    data = request.data_hex
    if data is not None:
        params["data"] = data

    quantities = (
        ("value", request.value),
        ("gas", request.gas),
        ("gasPrice", request.gas_price),
        ("maxFeePerGas", request.max_fee_per_gas),
        ("maxPriorityFeePerGas", request.max_priority_fee_per_gas),
        ("nonce", request.nonce),
    )
    for name, value in quantities:
        if value is not None:
            params[name] = to_quantity(value)
    return params


def format_request(
    request: TransactionRequest, chain: Optional[Chain] = None
) -> Dict[str, Any]:
    """
    Format a request, applying the chain's formatter when it has one.

    Args:
        request: Fully resolved request
        chain: Chain whose capabilities apply (defaults to ``request.chain``)

    Returns:
        JSON-RPC transaction object
    """
    chain = chain or request.chain
    formatter = chain.get_formatter(TRANSACTION_REQUEST) if chain else None
    if formatter is None:
        return format_transaction_request(request)
    return formatter(request)


def format_celo_transaction_request(request: TransactionRequest) -> Dict[str, Any]:
    """
    Celo transaction request shape.

    Adds the fee-currency fields Celo nodes accept on top of the default
    shape, reading them from ``request.extra``.
    """
    params = format_transaction_request(request)
    extra = request.extra
    if extra.get("feeCurrency") is not None:
        params["feeCurrency"] = extra["feeCurrency"]
    if extra.get("gatewayFee") is not None:
        params["gatewayFee"] = to_quantity(int(extra["gatewayFee"]))
    if extra.get("gatewayFeeRecipient") is not None:
        params["gatewayFeeRecipient"] = extra["gatewayFeeRecipient"]
    return params


__all__ = [
    "to_quantity",
    "format_transaction_request",
    "format_request",
    "format_celo_transaction_request",
]
