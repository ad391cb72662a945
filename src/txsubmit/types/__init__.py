"""Data model for transaction submission."""

from txsubmit.types.chain import ETHER, Chain, Formatter, NativeCurrency, define_chain
from txsubmit.types.node import NodeSnapshot
from txsubmit.types.request import RPC_FIELD_NAMES, TransactionRequest, intrinsic_gas

__all__ = [
    "Chain",
    "ETHER",
    "Formatter",
    "NativeCurrency",
    "define_chain",
    "NodeSnapshot",
    "RPC_FIELD_NAMES",
    "TransactionRequest",
    "intrinsic_gas",
]
