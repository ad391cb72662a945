"""
WalletClient: entry point for submitting transactions.

Example:
    >>> from txsubmit import WalletClient, parse_ether
    >>> client = await WalletClient.create(mode="mock")
    >>> client.provider.set_balance(sender, parse_ether(10))
    >>> tx_hash = await client.send_transaction(
    ...     from_=sender, to=recipient, value=parse_ether(1)
    ... )
"""

from __future__ import annotations

from typing import Any, Dict, Literal, Mapping, Optional, Union

from txsubmit.actions.send import send_transaction
from txsubmit.chains import get_chain
from txsubmit.config import SubmitterConfig
from txsubmit.providers.base import Provider
from txsubmit.providers.mock import MockProvider
from txsubmit.providers.web3_provider import AsyncWeb3Provider
from txsubmit.types.chain import Chain
from txsubmit.types.request import TransactionRequest
from txsubmit.utils.logging import configure_logging, get_logger

_logger = get_logger(__name__)

ClientMode = Literal["mock", "web3"]


class WalletClient:
    """
    Holds a provider, a default chain and the pipeline configuration.

    Attributes:
        provider: Node connection
        chain: Chain attached to requests that do not declare one
        config: Pipeline tunables
    """

    def __init__(
        self,
        provider: Provider,
        chain: Optional[Chain] = None,
        config: Optional[SubmitterConfig] = None,
    ) -> None:
        self.provider = provider
        self.chain = chain
        self.config = config or SubmitterConfig()

    @classmethod
    async def create(
        cls,
        mode: ClientMode = "mock",
        *,
        chain: Optional[Union[Chain, str]] = None,
        config: Optional[SubmitterConfig] = None,
        rpc_url: Optional[str] = None,
    ) -> "WalletClient":
        """
        Create a client.

        Args:
            mode: ``"mock"`` for the in-memory node, ``"web3"`` for a JSON-RPC node
            chain: Chain descriptor or built-in network name
            config: Pipeline tunables
            rpc_url: Endpoint for ``"web3"`` mode; falls back to
                ``config.rpc_url`` then the chain's first RPC URL

        Raises:
            ValueError: Unknown mode or no endpoint available
        """
        config = config or SubmitterConfig()
        if config.log_level:
            configure_logging(config.log_level)
        if isinstance(chain, str):
            chain = get_chain(chain)

        provider: Provider
        if mode == "mock":
            provider = MockProvider(chain_id=chain.id if chain else 1)
        elif mode == "web3":
            endpoint = rpc_url or config.rpc_url
            if endpoint is None and chain is not None and chain.rpc_urls:
                endpoint = chain.rpc_urls[0]
            if not endpoint:
                raise ValueError("web3 mode requires an rpc_url")
            provider = AsyncWeb3Provider(endpoint, timeout=config.timeout)
        else:
            raise ValueError(f"Unknown mode: {mode}. Expected 'mock' or 'web3'")

        _logger.info(
            "Client created",
            extra={"mode": mode, "chain": chain.name if chain else None},
        )
        return cls(provider, chain=chain, config=config)

    async def send_transaction(
        self,
        request: Optional[Union[TransactionRequest, Mapping[str, Any]]] = None,
        **params: Any,
    ) -> str:
        """
        Send a transaction.

        Accepts a TransactionRequest, a mapping of caller-style keys, or
        keyword arguments (``from_``, ``to``, ``value``, ...).
        A TransactionRequest is copied first; the caller's object is not
        modified.

        Returns:
            Transaction hash

        Raises:
            TransactionError: Submission failed
        """
        if request is None:
            request = TransactionRequest.from_dict(params)
        elif isinstance(request, TransactionRequest):
            request = request.copy()
        else:
            request = TransactionRequest.from_dict(request)

        if request.chain is None:
            request.chain = self.chain
        if not self.config.assert_chain:
            request.assert_chain = False

        return await send_transaction(self.provider, request, self.config)

    async def get_chain_id(self) -> int:
        return await self.provider.get_chain_id()

    async def get_balance(self, address: str) -> int:
        return await self.provider.get_balance(address)

    async def get_transaction_count(self, address: str, block: str = "pending") -> int:
        return await self.provider.get_transaction_count(address, block)

    async def close(self) -> None:
        await self.provider.close()

    async def __aenter__(self) -> "WalletClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def info(self) -> Dict[str, Any]:
        """Summary of the client setup."""
        return {
            "provider": type(self.provider).__name__,
            "chain": self.chain.describe() if self.chain else None,
            "assert_chain": self.config.assert_chain,
        }


__all__ = ["ClientMode", "WalletClient"]
