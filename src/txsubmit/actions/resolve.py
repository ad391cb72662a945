"""
Request resolution.

Fills the fields the caller left unset from live node state: nonce from
the pending-inclusive transaction count, fee fields from the latest block,
gas limit from the node's estimate. Fields the caller supplied are never
overwritten. A gas estimate the node rejects with known wording surfaces as
a TransactionError; other provider failures propagate as raised.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from txsubmit.actions.format import format_transaction_request
from txsubmit.config import SubmitterConfig
from txsubmit.errors.classify import classify, matches_node_error
from txsubmit.errors.rpc import ProviderError
from txsubmit.providers.base import Provider
from txsubmit.types.node import NodeSnapshot
from txsubmit.types.request import TransactionRequest
from txsubmit.utils.logging import get_logger

_logger = get_logger(__name__)


def default_max_fee_per_gas(
    base_fee_per_gas: int, priority_fee: int, multiplier: Decimal
) -> int:
    """``base fee * multiplier + tip``, rounded down to whole wei."""
    return int(Decimal(base_fee_per_gas) * multiplier) + priority_fee


async def resolve_fees(
    provider: Provider,
    request: TransactionRequest,
    base_fee_per_gas: Optional[int],
    config: SubmitterConfig,
) -> None:
    """
    Fill missing fee fields in place.

    Legacy pricing is used when the caller set ``gas_price`` or when the
    chain has no base fee and no EIP-1559 field was supplied. Otherwise the
    tip defaults to the configured priority fee (never above a supplied fee
    cap) and the fee cap to ``base fee * multiplier + tip``.
    """
    eip1559_supplied = (
        request.max_fee_per_gas is not None or request.max_priority_fee_per_gas is not None
    )

    if request.gas_price is not None or (base_fee_per_gas is None and not eip1559_supplied):
        if request.gas_price is None:
            request.gas_price = await provider.get_gas_price()
        return

    if request.max_priority_fee_per_gas is None:
        tip = config.default_priority_fee
        if request.max_fee_per_gas is not None:
            tip = min(tip, request.max_fee_per_gas)
        request.max_priority_fee_per_gas = tip

    if request.max_fee_per_gas is None:
        if base_fee_per_gas is None:
            # Pre-London node with EIP-1559 fields: price the cap off gas price
            request.max_fee_per_gas = (
                await provider.get_gas_price() + request.max_priority_fee_per_gas
            )
        else:
            request.max_fee_per_gas = default_max_fee_per_gas(
                base_fee_per_gas,
                request.max_priority_fee_per_gas,
                config.base_fee_multiplier,
            )


async def resolve_request(
    provider: Provider,
    request: TransactionRequest,
    config: Optional[SubmitterConfig] = None,
    *,
    echo: Optional[TransactionRequest] = None,
) -> NodeSnapshot:
    """
    Resolve unset request fields against the node.

    The gas estimate runs the node's admission checks, so a rejection
    worded like one of the known node errors (insufficient funds, nonce too
    low, ...) is classified here. Anything else raised by a query is a
    provider failure and propagates as raised.

    Args:
        provider: Provider to query
        request: Request to complete (modified in place)
        config: Pipeline tunables (defaults to ``SubmitterConfig()``)
        echo: Request echoed by a classified error (defaults to ``request``)

    Returns:
        Snapshot of the node state the defaults were derived from

    Raises:
        TransactionError: The node rejected the gas estimate
        ProviderError: A node query failed
    """
    config = config or SubmitterConfig()
    snapshot = await provider.get_block()

    if request.nonce is None:
        snapshot.nonce = await provider.get_transaction_count(request.from_, "pending")
        request.nonce = snapshot.nonce

    await resolve_fees(provider, request, snapshot.base_fee_per_gas, config)

    if request.gas is None:
        try:
            request.gas = await provider.estimate_gas(format_transaction_request(request))
        except ProviderError as e:
            if not matches_node_error(e):
                raise
            error = classify(e, echo if echo is not None else request)
            _logger.warning(
                "Gas estimate rejected",
                extra={"kind": error.kind.value, "from": request.from_},
            )
            raise error from e

    _logger.debug(
        "Resolved transaction request",
        extra={
            "from": request.from_,
            "nonce": request.nonce,
            "gas": request.gas,
            "base_fee": snapshot.base_fee_per_gas,
        },
    )
    return snapshot


__all__ = ["default_max_fee_per_gas", "resolve_fees", "resolve_request"]
