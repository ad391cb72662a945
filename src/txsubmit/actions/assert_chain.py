"""Chain id assertion for a submission."""

from __future__ import annotations

from typing import Optional

from txsubmit.errors.transaction import ChainMismatchError
from txsubmit.types.chain import Chain
from txsubmit.types.request import TransactionRequest


def assert_current_chain(
    chain: Optional[Chain],
    current_chain_id: int,
    assert_chain: bool = True,
    request: Optional[TransactionRequest] = None,
) -> None:
    """
    Check that the node is connected to the chain the caller declared.

    No-op when no chain was declared or when the assertion is disabled.

    Args:
        chain: Chain declared on the request
        current_chain_id: Chain id reported by the node
        assert_chain: ``False`` skips the comparison
        request: Request to echo in the error

    Raises:
        ChainMismatchError: ``chain.id`` differs from ``current_chain_id``
    """
    if chain is None or not assert_chain:
        return
    if chain.id != current_chain_id:
        raise ChainMismatchError(
            chain=chain,
            current_chain_id=current_chain_id,
            request=request,
        )


__all__ = ["assert_current_chain"]
