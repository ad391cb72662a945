"""
Tests for the in-memory node.

Tests cover:
- Account state and block production
- Admission checks and their node wording
- Receipts and fee accounting
"""

import pytest

from txsubmit.errors import ProviderError
from txsubmit.providers.mock import MockProvider
from txsubmit.utils.units import parse_ether, parse_gwei

from tests.conftest import BASE_FEE, INITIAL_BALANCE, RECIPIENT, SENDER, make_node


def _params(**overrides):
    params = {"from": SENDER, "to": RECIPIENT, "value": hex(parse_ether(1))}
    params.update(overrides)
    return params


class TestNodeState:
    """Tests for queried state."""

    @pytest.mark.asyncio
    async def test_defaults(self) -> None:
        """A fresh node is on chain 1 with a 1 gwei base fee."""
        provider = MockProvider()

        assert await provider.get_chain_id() == 1
        snapshot = await provider.get_block()
        assert snapshot.base_fee_per_gas == parse_gwei(1)
        assert snapshot.gas_limit == 30_000_000
        assert await provider.get_balance(SENDER) == 0

    @pytest.mark.asyncio
    async def test_next_block_base_fee(self) -> None:
        """A scheduled base fee applies after the next block."""
        provider = MockProvider()
        provider.set_next_block_base_fee_per_gas(BASE_FEE)

        assert (await provider.get_block()).base_fee_per_gas == parse_gwei(1)
        await provider.mine()
        assert (await provider.get_block()).base_fee_per_gas == BASE_FEE
        assert provider.block_number == 1

    @pytest.mark.asyncio
    async def test_balances_case_insensitive(self) -> None:
        """Addresses are matched regardless of case."""
        provider = MockProvider()
        provider.set_balance(SENDER.upper().replace("0X", "0x"), 5)

        assert await provider.get_balance(SENDER) == 5

    @pytest.mark.asyncio
    async def test_gas_price(self) -> None:
        """Gas price is base fee plus the suggested tip, or the flat price pre-London."""
        assert await MockProvider().get_gas_price() == parse_gwei(2)
        assert await MockProvider(base_fee_per_gas=None, gas_price=7).get_gas_price() == 7

    @pytest.mark.asyncio
    async def test_estimate_gas(self) -> None:
        """Estimates are the intrinsic gas of the request."""
        provider = MockProvider()
        provider.set_balance(SENDER, parse_ether(1))

        assert await provider.estimate_gas(_params()) == 21000
        assert await provider.estimate_gas({"from": SENDER}) == 53000

    @pytest.mark.asyncio
    async def test_estimate_gas_unpriced_call(self) -> None:
        """A call without fee fields only needs its value covered."""
        assert await MockProvider().estimate_gas({"from": SENDER, "to": RECIPIENT}) == 21000

    @pytest.mark.asyncio
    async def test_estimate_gas_insufficient_funds(self, node: MockProvider) -> None:
        """Estimating a transfer the sender cannot pay is rejected."""
        with pytest.raises(ProviderError) as exc_info:
            await node.estimate_gas(
                _params(gasPrice=hex(BASE_FEE + parse_ether(10_000)), value="0x0")
            )

        assert exc_info.value.rpc_code == -32003
        assert exc_info.value.rpc_message == "Insufficient funds for gas * price + value"

    @pytest.mark.asyncio
    async def test_estimate_gas_counts_pending_cost(self, node: MockProvider) -> None:
        """Funds reserved by pending transactions are not available."""
        await node.send_transaction(_params(value=hex(INITIAL_BALANCE - parse_ether(1))))

        with pytest.raises(ProviderError):
            await node.estimate_gas(_params(value=hex(parse_ether(2))))


class TestAdmission:
    """Tests for node-side rejections."""

    @pytest.mark.asyncio
    async def test_accepts_and_pools(self, node: MockProvider) -> None:
        """An accepted transaction waits in the pending pool."""
        tx_hash = await node.send_transaction(_params())

        assert [tx.hash for tx in node.pending_transactions] == [tx_hash]
        assert await node.get_transaction_count(SENDER) == 1
        assert await node.get_transaction_count(SENDER, "latest") == 0

    @pytest.mark.asyncio
    async def test_unique_hashes(self, node: MockProvider) -> None:
        first = await node.send_transaction(_params())
        second = await node.send_transaction(_params())

        assert first != second

    @pytest.mark.parametrize(
        "overrides,message",
        [
            ({"gas": hex(100)}, "intrinsic gas too low"),
            ({"gas": hex(100_000_000)}, "intrinsic gas too high"),
            ({"maxFeePerGas": hex(1), "maxPriorityFeePerGas": hex(1)}, "max fee per gas less than block base fee"),
            (
                {"maxFeePerGas": hex(parse_gwei(20)), "maxPriorityFeePerGas": hex(parse_gwei(21))},
                "max priority fee per gas higher than max fee per gas",
            ),
            ({"gasPrice": hex(BASE_FEE + parse_ether(10_000))}, "Insufficient funds for gas * price + value"),
        ],
    )
    @pytest.mark.asyncio
    async def test_rejections(self, node: MockProvider, overrides, message: str) -> None:
        """Each admission check uses the node's wording."""
        with pytest.raises(ProviderError) as exc_info:
            await node.send_transaction(_params(**overrides))

        assert exc_info.value.rpc_message == message
        assert node.pending_transactions == []

    @pytest.mark.asyncio
    async def test_nonce_too_low(self, node: MockProvider) -> None:
        """A reused nonce is rejected."""
        await node.send_transaction(_params(nonce="0x0"))

        with pytest.raises(ProviderError) as exc_info:
            await node.send_transaction(_params(nonce="0x0"))

        assert exc_info.value.rpc_message == "nonce too low"

    @pytest.mark.asyncio
    async def test_pending_costs_reserved(self) -> None:
        """Pending transactions count against the balance."""
        provider = await make_node(balance=parse_ether(1) + parse_gwei(21000 * 20))
        await provider.send_transaction(_params(gasPrice=hex(parse_gwei(10))))

        with pytest.raises(ProviderError):
            await provider.send_transaction(_params(gasPrice=hex(parse_gwei(10))))


class TestMining:
    """Tests for block production."""

    @pytest.mark.asyncio
    async def test_transfer_settles(self, node: MockProvider) -> None:
        """Mining moves value and charges base fee plus tip."""
        tx_hash = await node.send_transaction(
            _params(maxFeePerGas=hex(parse_gwei(20)), maxPriorityFeePerGas=hex(parse_gwei(2)))
        )

        await node.mine()

        receipt = node.get_receipt(tx_hash)
        assert receipt.block_number == 2
        assert receipt.effective_gas_price == parse_gwei(12)
        assert receipt.fee == 21000 * parse_gwei(12)
        assert await node.get_balance(RECIPIENT) == INITIAL_BALANCE + parse_ether(1)
        assert await node.get_balance(SENDER) == INITIAL_BALANCE - parse_ether(1) - receipt.fee
        assert await node.get_transaction_count(SENDER, "latest") == 1
        assert node.pending_transactions == []

    @pytest.mark.asyncio
    async def test_cap_limits_price(self, node: MockProvider) -> None:
        """The effective price never exceeds the fee cap."""
        tx_hash = await node.send_transaction(
            _params(maxFeePerGas=hex(parse_gwei(11)), maxPriorityFeePerGas=hex(parse_gwei(5)))
        )
        await node.mine()

        assert node.get_receipt(tx_hash).effective_gas_price == parse_gwei(11)

    @pytest.mark.asyncio
    async def test_empty_blocks(self, node: MockProvider) -> None:
        await node.mine(blocks=3)

        assert node.block_number == 4

    def test_unknown_receipt(self) -> None:
        assert MockProvider().get_receipt("0x00") is None
