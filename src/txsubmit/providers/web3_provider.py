"""
web3.py-backed provider.

Reads go through ``AsyncWeb3.eth``; ``eth_estimateGas`` and
``eth_sendTransaction`` are issued as raw JSON-RPC requests so that
chain-formatted parameters (including chain-specific fields web3 does not
know about) reach the node untouched.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from eth_typing import HexStr
from web3 import AsyncWeb3
from web3.types import RPCEndpoint

from txsubmit.constants import (
    PROVIDER_TIMEOUT_SECONDS,
    RPC_ESTIMATE_GAS,
    RPC_SEND_TRANSACTION,
)
from txsubmit.errors.rpc import ProviderError
from txsubmit.providers.base import Provider
from txsubmit.types.node import NodeSnapshot
from txsubmit.utils.logging import get_logger

_logger = get_logger(__name__)


def _to_int(value: Any) -> int:
    if isinstance(value, str):
        return int(value, 16)
    return int(value)


class AsyncWeb3Provider(Provider):
    """
    Provider on top of ``web3.AsyncWeb3``.

    Example:
        >>> provider = AsyncWeb3Provider(rpc_url="http://127.0.0.1:8545")
        >>> chain_id = await provider.get_chain_id()
    """

    def __init__(
        self,
        rpc_url: Optional[str] = None,
        *,
        web3: Optional[AsyncWeb3] = None,
        timeout: int = PROVIDER_TIMEOUT_SECONDS,
    ) -> None:
        if web3 is None and not rpc_url:
            raise ValueError("rpc_url or web3 is required")
        # Timeout is enforced by the HTTP provider, not by the pipeline
        self.w3 = web3 or AsyncWeb3(
            AsyncWeb3.AsyncHTTPProvider(rpc_url, request_kwargs={"timeout": timeout})
        )

    async def get_chain_id(self) -> int:
        return int(await self.w3.eth.chain_id)

    async def get_transaction_count(self, address: str, block: str = "pending") -> int:
        return int(await self.w3.eth.get_transaction_count(AsyncWeb3.to_checksum_address(address), block))

    async def get_balance(self, address: str) -> int:
        return int(await self.w3.eth.get_balance(AsyncWeb3.to_checksum_address(address)))

    async def get_block(self) -> NodeSnapshot:
        block = await self.w3.eth.get_block("latest")
        base_fee = block.get("baseFeePerGas")
        return NodeSnapshot(
            base_fee_per_gas=int(base_fee) if base_fee is not None else None,
            gas_limit=int(block["gasLimit"]),
        )

    async def get_gas_price(self) -> int:
        return int(await self.w3.eth.gas_price)

    async def estimate_gas(self, params: Dict[str, Any]) -> int:
        return _to_int(await self._request(RPC_ESTIMATE_GAS, [params]))

    async def send_transaction(self, params: Dict[str, Any]) -> HexStr:
        tx_hash = await self._request(RPC_SEND_TRANSACTION, [params])
        return HexStr(str(tx_hash))

    async def close(self) -> None:
        provider = self.w3.provider
        if hasattr(provider, "disconnect"):
            await provider.disconnect()

    async def _request(self, method: str, params: list) -> Any:
        """
        Issue a raw JSON-RPC request.

        Raises:
            ProviderError: The response carries an ``error`` member
        """
        _logger.debug("RPC request", extra={"method": method})
        response = await self.w3.provider.make_request(RPCEndpoint(method), params)
        error = response.get("error")
        if error:
            if isinstance(error, str):
                error = {"message": error}
            raise ProviderError.from_response(error, method=method)
        return response.get("result")


__all__ = ["AsyncWeb3Provider"]
