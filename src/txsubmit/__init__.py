"""
txsubmit - EVM transaction submission.

Resolves, validates, formats and submits value and contract-call
transactions to an EVM node, and turns node failures into a closed set of
typed errors with deterministic, argument-echoing messages.

Quick Start:
    >>> from txsubmit import WalletClient, parse_ether
    >>> import asyncio
    >>>
    >>> async def main():
    ...     client = await WalletClient.create(mode="mock")
    ...     client.provider.set_balance(sender, parse_ether(10))
    ...     tx_hash = await client.send_transaction(
    ...         from_=sender,
    ...         to=recipient,
    ...         value=parse_ether(1),
    ...     )
    ...     print(f"Transaction: {tx_hash}")
    ...
    >>> asyncio.run(main())

Modules:
- `client`: WalletClient facade
- `actions`: pipeline steps (chain assertion, fee validation, resolution,
  formatting, submission)
- `errors`: transaction error taxonomy, classification and rendering
- `providers`: Provider interface, web3.py and in-memory implementations
- `chains`: built-in chain descriptors
- `utils`: units, validation and logging helpers
"""

from txsubmit.version import __version__, __version_info__

# Client
from txsubmit.client import ClientMode, WalletClient
from txsubmit.config import SubmitterConfig

# Chains
from txsubmit.chains import (
    BASE,
    BASE_SEPOLIA,
    CELO,
    FOUNDRY,
    LOCALHOST,
    MAINNET,
    NETWORKS,
    OPTIMISM,
    Network,
    get_chain,
)

# Pipeline
from txsubmit.actions import (
    assert_current_chain,
    assert_fees,
    format_request,
    format_transaction_request,
    invoke,
    resolve_request,
    send_transaction,
)

# Providers
from txsubmit.providers import AsyncWeb3Provider, MockProvider, Provider

# Types
from txsubmit.types import (
    Chain,
    NativeCurrency,
    NodeSnapshot,
    TransactionRequest,
    define_chain,
    intrinsic_gas,
)

# Errors
from txsubmit.errors import (
    ChainMismatchError,
    ErrorKind,
    ErrorRecord,
    FeeCapTooHighError,
    FeeCapTooLowError,
    InsufficientFundsError,
    IntrinsicGasTooHighError,
    IntrinsicGasTooLowError,
    NonceTooLowError,
    ProviderError,
    RpcError,
    TipHigherThanFeeCapError,
    TransactionError,
    TxSubmitError,
    UnknownTransactionError,
    ValidationError,
    classify,
)

# Utilities
from txsubmit.utils import (
    configure_logging,
    format_ether,
    format_gwei,
    get_logger,
    parse_ether,
    parse_gwei,
)

__all__ = [
    "__version__",
    "__version_info__",
    # Client
    "ClientMode",
    "WalletClient",
    "SubmitterConfig",
    # Chains
    "Network",
    "NETWORKS",
    "MAINNET",
    "OPTIMISM",
    "BASE",
    "BASE_SEPOLIA",
    "CELO",
    "LOCALHOST",
    "FOUNDRY",
    "get_chain",
    # Pipeline
    "assert_current_chain",
    "assert_fees",
    "format_request",
    "format_transaction_request",
    "invoke",
    "resolve_request",
    "send_transaction",
    # Providers
    "Provider",
    "MockProvider",
    "AsyncWeb3Provider",
    # Types
    "Chain",
    "NativeCurrency",
    "NodeSnapshot",
    "TransactionRequest",
    "define_chain",
    "intrinsic_gas",
    # Errors
    "TxSubmitError",
    "TransactionError",
    "ErrorKind",
    "ErrorRecord",
    "ChainMismatchError",
    "FeeCapTooHighError",
    "FeeCapTooLowError",
    "TipHigherThanFeeCapError",
    "IntrinsicGasTooLowError",
    "IntrinsicGasTooHighError",
    "InsufficientFundsError",
    "NonceTooLowError",
    "UnknownTransactionError",
    "ValidationError",
    "RpcError",
    "ProviderError",
    "classify",
    # Utilities
    "configure_logging",
    "get_logger",
    "format_ether",
    "format_gwei",
    "parse_ether",
    "parse_gwei",
]
