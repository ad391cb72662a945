"""
Transaction submission pipeline.

    assert chain -> validate fees (static) -> resolve defaults
      -> validate fees (base fee) -> format -> invoke -> classify on failure

Every failure reaching the caller is a TransactionError whose message echoes
only the fields the caller supplied, except provider failures raised while
resolving defaults that carry no known node wording, which propagate
unclassified.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from eth_typing import HexStr

from txsubmit.actions.assert_chain import assert_current_chain
from txsubmit.actions.fees import assert_fees
from txsubmit.actions.format import format_request
from txsubmit.actions.resolve import resolve_request
from txsubmit.config import SubmitterConfig
from txsubmit.errors.classify import classify
from txsubmit.errors.rpc import ProviderError
from txsubmit.providers.base import Provider
from txsubmit.types.request import TransactionRequest
from txsubmit.utils.logging import get_logger

_logger = get_logger(__name__)


async def invoke(provider: Provider, params: Dict[str, Any]) -> HexStr:
    """
    Submit formatted parameters and return the transaction hash.

    Raises:
        ProviderError: The node rejected the transaction (unmodified)
    """
    _logger.debug("Submitting transaction", extra={"from": params.get("from")})
    return await provider.send_transaction(params)


async def send_transaction(
    provider: Provider,
    request: TransactionRequest,
    config: Optional[SubmitterConfig] = None,
) -> HexStr:
    """
    Send a transaction through the full pipeline.

    Args:
        provider: Provider connected to the target node
        request: Caller request (completed in place with resolved defaults)
        config: Pipeline tunables

    Returns:
        Transaction hash as 0x-hex

    Raises:
        TransactionError: Validation failed or the node rejected the transaction
        ProviderError: A node query failed while resolving defaults for a
            reason other than a known node rejection

    Example:
        >>> tx_hash = await send_transaction(
        ...     provider,
        ...     TransactionRequest(from_=sender, to=recipient, value=parse_ether(1)),
        ... )
    """
    supplied = request.copy()
    chain = request.chain

    if chain is not None and request.assert_chain:
        current_chain_id = await provider.get_chain_id()
        assert_current_chain(chain, current_chain_id, request.assert_chain, request=supplied)

    assert_fees(request, echo=supplied)
    snapshot = await resolve_request(provider, request, config, echo=supplied)
    assert_fees(request, snapshot.base_fee_per_gas, echo=supplied)

    params = format_request(request, chain)
    try:
        tx_hash = await invoke(provider, params)
    except ProviderError as e:
        error = classify(e, supplied)
        _logger.warning(
            "Transaction rejected",
            extra={"kind": error.kind.value, "from": request.from_},
        )
        raise error from e

    _logger.info(
        "Transaction submitted",
        extra={"tx_hash": tx_hash, "from": request.from_, "nonce": request.nonce},
    )
    return tx_hash


__all__ = ["invoke", "send_transaction"]
