"""Providers: the connection between the pipeline and a node."""

from txsubmit.providers.base import Provider
from txsubmit.providers.mock import MockProvider, PendingTransaction, Receipt
from txsubmit.providers.web3_provider import AsyncWeb3Provider

__all__ = [
    "Provider",
    "MockProvider",
    "PendingTransaction",
    "Receipt",
    "AsyncWeb3Provider",
]
