"""
In-memory node simulation.

MockProvider answers the provider queries from local state and applies the
node-side admission checks a real execution client performs on
``eth_sendTransaction`` (and the balance check on ``eth_estimateGas``),
rejecting with the same wording. Transactions wait
in a pending pool until :meth:`MockProvider.mine` includes them.

Only value transfers are simulated: no code runs, gas used equals the
intrinsic gas of the transaction.

Example:
    >>> provider = MockProvider(chain_id=1)
    >>> provider.set_balance(sender, parse_ether(10_000))
    >>> provider.set_next_block_base_fee_per_gas(parse_gwei(10))
    >>> await provider.mine()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from eth_typing import HexStr
from eth_utils import encode_hex, keccak

from txsubmit.constants import DEFAULT_BLOCK_GAS_LIMIT
from txsubmit.errors.rpc import ProviderError
from txsubmit.providers.base import Provider
from txsubmit.types.node import NodeSnapshot
from txsubmit.types.request import TransactionRequest, intrinsic_gas
from txsubmit.utils.logging import get_logger
from txsubmit.utils.units import parse_gwei

_logger = get_logger(__name__)

# JSON-RPC error codes used by execution clients
INVALID_INPUT = -32000
TRANSACTION_REJECTED = -32003

DEFAULT_BASE_FEE = parse_gwei(1)
DEFAULT_GAS_PRICE = parse_gwei(1)


@dataclass
class PendingTransaction:
    """A transaction admitted to the pending pool."""

    hash: str
    request: TransactionRequest
    nonce: int
    gas: int


@dataclass
class Receipt:
    """Outcome of a mined transaction."""

    transaction_hash: str
    block_number: int
    gas_used: int
    effective_gas_price: int

    @property
    def fee(self) -> int:
        return self.gas_used * self.effective_gas_price


def _decode(params: Dict[str, Any]) -> TransactionRequest:
    """Turn JSON-RPC parameters back into a request."""
    decoded: Dict[str, Any] = {}
    for key, value in params.items():
        if isinstance(value, str) and value.startswith("0x") and key in (
            "value",
            "gas",
            "gasPrice",
            "maxFeePerGas",
            "maxPriorityFeePerGas",
            "nonce",
        ):
            decoded[key] = int(value, 16)
        else:
            decoded[key] = value
    return TransactionRequest.from_dict(decoded)


class MockProvider(Provider):
    """
    Provider backed by a simulated single-node chain.

    Attributes:
        chain_id: Chain id reported by the node
        base_fee_per_gas: Base fee of the latest block, ``None`` for a
            pre-London chain
        gas_limit: Block gas limit
        block_number: Latest block number
    """

    def __init__(
        self,
        chain_id: int = 1,
        *,
        base_fee_per_gas: Optional[int] = DEFAULT_BASE_FEE,
        gas_limit: int = DEFAULT_BLOCK_GAS_LIMIT,
        gas_price: int = DEFAULT_GAS_PRICE,
    ) -> None:
        self.chain_id = chain_id
        self.base_fee_per_gas = base_fee_per_gas
        self.gas_limit = gas_limit
        self.gas_price = gas_price
        self.block_number = 0

        self._balances: Dict[str, int] = {}
        self._nonces: Dict[str, int] = {}
        self._pending: List[PendingTransaction] = []
        self._receipts: Dict[str, Receipt] = {}
        self._next_base_fee: Optional[int] = None
        self._sent = 0

    # ------------------------------------------------------------------
    # Test controls
    # ------------------------------------------------------------------

    def set_balance(self, address: str, wei: int) -> None:
        self._balances[address.lower()] = wei

    def set_next_block_base_fee_per_gas(self, wei: int) -> None:
        """Base fee applied from the next mined block on."""
        self._next_base_fee = wei

    async def mine(self, blocks: int = 1) -> None:
        """
        Produce blocks. The first one includes every pending transaction.
        """
        for _ in range(blocks):
            self.block_number += 1
            if self._next_base_fee is not None:
                self.base_fee_per_gas = self._next_base_fee
                self._next_base_fee = None

            for pending in self._pending:
                self._execute(pending)
            if self._pending:
                _logger.debug(
                    "Mined block",
                    extra={"block": self.block_number, "transactions": len(self._pending)},
                )
            self._pending = []

    def get_receipt(self, tx_hash: str) -> Optional[Receipt]:
        return self._receipts.get(tx_hash)

    @property
    def pending_transactions(self) -> List[PendingTransaction]:
        return list(self._pending)

    # ------------------------------------------------------------------
    # Provider interface
    # ------------------------------------------------------------------

    async def get_chain_id(self) -> int:
        return self.chain_id

    async def get_transaction_count(self, address: str, block: str = "pending") -> int:
        count = self._nonces.get(address.lower(), 0)
        if block == "pending":
            count += sum(1 for tx in self._pending if tx.request.from_.lower() == address.lower())
        return count

    async def get_balance(self, address: str) -> int:
        return self._balances.get(address.lower(), 0)

    async def get_block(self) -> NodeSnapshot:
        return NodeSnapshot(base_fee_per_gas=self.base_fee_per_gas, gas_limit=self.gas_limit)

    async def get_gas_price(self) -> int:
        if self.base_fee_per_gas is None:
            return self.gas_price
        return self.base_fee_per_gas + self.gas_price

    async def estimate_gas(self, params: Dict[str, Any]) -> int:
        """
        Intrinsic gas of the request, after the balance admission check.

        A call without fee fields is priced at zero, so only its value has
        to be covered.
        """
        tx = _decode(params)
        gas = intrinsic_gas(tx)
        price = tx.gas_price if tx.gas_price is not None else (tx.max_fee_per_gas or 0)
        await self._check_funds(tx.from_.lower(), gas * price + (tx.value or 0))
        return gas

    async def send_transaction(self, params: Dict[str, Any]) -> HexStr:
        tx = _decode(params)
        sender = tx.from_.lower()

        expected_nonce = await self.get_transaction_count(sender, "pending")
        nonce = tx.nonce if tx.nonce is not None else expected_nonce
        if nonce < expected_nonce:
            raise ProviderError(INVALID_INPUT, "nonce too low")

        gas = tx.gas if tx.gas is not None else intrinsic_gas(tx)
        if gas < intrinsic_gas(tx):
            raise ProviderError(INVALID_INPUT, "intrinsic gas too low")
        if gas > self.gas_limit:
            raise ProviderError(INVALID_INPUT, "intrinsic gas too high")

        fee_cap = self._fee_cap(tx)
        if self.base_fee_per_gas is not None and fee_cap < self.base_fee_per_gas:
            raise ProviderError(INVALID_INPUT, "max fee per gas less than block base fee")
        if (
            tx.max_priority_fee_per_gas is not None
            and tx.max_priority_fee_per_gas > fee_cap
        ):
            raise ProviderError(INVALID_INPUT, "max priority fee per gas higher than max fee per gas")

        await self._check_funds(sender, gas * fee_cap + (tx.value or 0))

        self._sent += 1
        tx_hash = encode_hex(
            keccak(text=f"{self.chain_id}:{sender}:{nonce}:{self._sent}")
        )
        self._pending.append(PendingTransaction(hash=tx_hash, request=tx, nonce=nonce, gas=gas))
        return tx_hash

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _fee_cap(self, tx: TransactionRequest) -> int:
        if tx.gas_price is not None:
            return tx.gas_price
        if tx.max_fee_per_gas is not None:
            return tx.max_fee_per_gas
        return self.gas_price if self.base_fee_per_gas is None else self.base_fee_per_gas + self.gas_price

    def _effective_gas_price(self, tx: TransactionRequest) -> int:
        fee_cap = self._fee_cap(tx)
        if tx.gas_price is not None or self.base_fee_per_gas is None:
            return fee_cap
        tip = tx.max_priority_fee_per_gas or 0
        return min(fee_cap, self.base_fee_per_gas + tip)

    async def _check_funds(self, sender: str, cost: int) -> None:
        if cost > await self.get_balance(sender) - self._reserved(sender):
            raise ProviderError(TRANSACTION_REJECTED, "Insufficient funds for gas * price + value")

    def _reserved(self, sender: str) -> int:
        return sum(
            pending.gas * self._fee_cap(pending.request) + (pending.request.value or 0)
            for pending in self._pending
            if pending.request.from_.lower() == sender
        )

    def _execute(self, pending: PendingTransaction) -> None:
        tx = pending.request
        sender = tx.from_.lower()
        gas_used = intrinsic_gas(tx)
        price = self._effective_gas_price(tx)
        value = tx.value or 0

        self._balances[sender] = self._balances.get(sender, 0) - gas_used * price - value
        if tx.to is not None:
            recipient = tx.to.lower()
            self._balances[recipient] = self._balances.get(recipient, 0) + value
        self._nonces[sender] = max(self._nonces.get(sender, 0), pending.nonce + 1)
        self._receipts[pending.hash] = Receipt(
            transaction_hash=pending.hash,
            block_number=self.block_number,
            gas_used=gas_used,
            effective_gas_price=price,
        )


__all__ = ["MockProvider", "PendingTransaction", "Receipt"]
