"""
Tests for the web3.py-backed provider.

The AsyncWeb3 instance is replaced by mocks; no node is contacted.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from txsubmit.errors import ProviderError
from txsubmit.providers.web3_provider import AsyncWeb3Provider

from tests.conftest import RECIPIENT, SENDER


async def _value(value):
    return value


@pytest.fixture
def w3() -> MagicMock:
    """Stand-in for an AsyncWeb3 instance."""
    w3 = MagicMock()
    w3.provider.make_request = AsyncMock()
    w3.provider.disconnect = AsyncMock()
    return w3


class TestConstruction:
    """Tests for provider construction."""

    def test_requires_endpoint(self) -> None:
        with pytest.raises(ValueError):
            AsyncWeb3Provider()

    def test_builds_http_provider(self) -> None:
        """An RPC URL yields an AsyncWeb3 over HTTP."""
        provider = AsyncWeb3Provider("http://127.0.0.1:8545", timeout=5)

        assert provider.w3.provider.endpoint_uri == "http://127.0.0.1:8545"


class TestReads:
    """Tests for read queries."""

    @pytest.mark.asyncio
    async def test_chain_id(self, w3: MagicMock) -> None:
        w3.eth.chain_id = _value(8453)

        assert await AsyncWeb3Provider(web3=w3).get_chain_id() == 8453

    @pytest.mark.asyncio
    async def test_transaction_count_pending(self, w3: MagicMock) -> None:
        """The block tag is forwarded and the address checksummed."""
        w3.eth.get_transaction_count = AsyncMock(return_value=4)

        count = await AsyncWeb3Provider(web3=w3).get_transaction_count(SENDER)

        assert count == 4
        address, block = w3.eth.get_transaction_count.await_args.args
        assert address.lower() == SENDER
        assert block == "pending"

    @pytest.mark.asyncio
    async def test_block_with_base_fee(self, w3: MagicMock) -> None:
        w3.eth.get_block = AsyncMock(return_value={"baseFeePerGas": 7, "gasLimit": 30_000_000})

        snapshot = await AsyncWeb3Provider(web3=w3).get_block()

        assert snapshot.base_fee_per_gas == 7
        assert snapshot.gas_limit == 30_000_000

    @pytest.mark.asyncio
    async def test_block_without_base_fee(self, w3: MagicMock) -> None:
        """Pre-London blocks report no base fee."""
        w3.eth.get_block = AsyncMock(return_value={"gasLimit": 8_000_000})

        snapshot = await AsyncWeb3Provider(web3=w3).get_block()

        assert snapshot.base_fee_per_gas is None
        assert not snapshot.supports_eip1559


class TestRawRequests:
    """Tests for estimate and send."""

    @pytest.mark.asyncio
    async def test_estimate_gas(self, w3: MagicMock) -> None:
        """Hex results are decoded."""
        w3.provider.make_request.return_value = {"jsonrpc": "2.0", "id": 1, "result": "0x5208"}
        params = {"from": SENDER, "to": RECIPIENT}

        assert await AsyncWeb3Provider(web3=w3).estimate_gas(params) == 21000
        method, args = w3.provider.make_request.await_args.args
        assert method == "eth_estimateGas"
        assert args == [params]

    @pytest.mark.asyncio
    async def test_send_transaction(self, w3: MagicMock) -> None:
        tx_hash = "0x" + "12" * 32
        w3.provider.make_request.return_value = {"jsonrpc": "2.0", "id": 1, "result": tx_hash}

        assert await AsyncWeb3Provider(web3=w3).send_transaction({"from": SENDER}) == tx_hash

    @pytest.mark.asyncio
    async def test_error_response(self, w3: MagicMock) -> None:
        """A JSON-RPC error member becomes a ProviderError."""
        w3.provider.make_request.return_value = {
            "jsonrpc": "2.0",
            "id": 1,
            "error": {"code": -32000, "message": "nonce too low"},
        }

        with pytest.raises(ProviderError) as exc_info:
            await AsyncWeb3Provider(web3=w3).send_transaction({"from": SENDER})

        assert exc_info.value.rpc_code == -32000
        assert exc_info.value.rpc_message == "nonce too low"
        assert exc_info.value.method == "eth_sendTransaction"

    @pytest.mark.asyncio
    async def test_close(self, w3: MagicMock) -> None:
        await AsyncWeb3Provider(web3=w3).close()

        w3.provider.disconnect.assert_awaited_once()
