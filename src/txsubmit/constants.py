"""Constants for txsubmit.

This module defines all constant values used across the library,
including numeric bounds, intrinsic gas costs, fee defaults and the
JSON-RPC method names issued to the node.
"""

# Numeric bounds
MAX_UINT256 = 2**256 - 1

# Unit decimals
GWEI_DECIMALS = 9
ETHER_DECIMALS = 18

# Intrinsic gas (yellow paper, post-Istanbul)
TX_BASE_GAS = 21_000
TX_CREATE_GAS = 32_000
TX_DATA_ZERO_GAS = 4
TX_DATA_NON_ZERO_GAS = 16

# Fee defaults
DEFAULT_PRIORITY_FEE_GWEI = "1.5"
BASE_FEE_MULTIPLIER = "1.2"  # headroom for base fee growth over the next blocks

# Network Constants
PROVIDER_TIMEOUT_SECONDS = 30
DEFAULT_BLOCK_GAS_LIMIT = 30_000_000

# JSON-RPC methods
RPC_SEND_TRANSACTION = "eth_sendTransaction"
RPC_ESTIMATE_GAS = "eth_estimateGas"

# Request categories understood by chain formatters
TRANSACTION_REQUEST = "transactionRequest"

# Order in which request arguments are echoed in error messages
REQUEST_ARG_ORDER = (
    "chain",
    "from",
    "to",
    "value",
    "data",
    "gas",
    "gasPrice",
    "maxFeePerGas",
    "maxPriorityFeePerGas",
    "nonce",
)

__all__ = [
    "MAX_UINT256",
    "GWEI_DECIMALS",
    "ETHER_DECIMALS",
    "TX_BASE_GAS",
    "TX_CREATE_GAS",
    "TX_DATA_ZERO_GAS",
    "TX_DATA_NON_ZERO_GAS",
    "DEFAULT_PRIORITY_FEE_GWEI",
    "BASE_FEE_MULTIPLIER",
    "PROVIDER_TIMEOUT_SECONDS",
    "DEFAULT_BLOCK_GAS_LIMIT",
    "RPC_SEND_TRANSACTION",
    "RPC_ESTIMATE_GAS",
    "TRANSACTION_REQUEST",
    "REQUEST_ARG_ORDER",
]
