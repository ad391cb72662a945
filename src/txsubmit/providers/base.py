"""
Provider interface.

The provider is the external collaborator that owns the connection to the
node. The pipeline only ever awaits these methods; they are its sole
suspension points. Timeouts and transport retries belong to the provider.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict

from eth_typing import HexStr

from txsubmit.types.node import NodeSnapshot


class Provider(ABC):
    """Read queries and transaction submission against one node."""

    @abstractmethod
    async def get_chain_id(self) -> int:
        """Chain id of the connected node (``eth_chainId``)."""

    @abstractmethod
    async def get_transaction_count(self, address: str, block: str = "pending") -> int:
        """Account nonce; ``"pending"`` includes transactions not yet mined."""

    @abstractmethod
    async def get_balance(self, address: str) -> int:
        """Account balance in wei."""

    @abstractmethod
    async def get_block(self) -> NodeSnapshot:
        """Base fee and gas limit of the latest block."""

    @abstractmethod
    async def get_gas_price(self) -> int:
        """Legacy gas price suggestion in wei."""

    @abstractmethod
    async def estimate_gas(self, params: Dict[str, Any]) -> int:
        """Gas estimate for a formatted request."""

    @abstractmethod
    async def send_transaction(self, params: Dict[str, Any]) -> HexStr:
        """
        Submit a formatted request (``eth_sendTransaction``).

        Returns:
            Transaction hash as 0x-hex

        Raises:
            ProviderError: The node rejected the transaction
        """

    async def close(self) -> None:
        """Release the underlying connection, if any."""
        return None


__all__ = ["Provider"]
