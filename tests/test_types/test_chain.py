"""Tests for chain descriptors and the built-in registry."""

import pytest

from txsubmit.chains import CELO, MAINNET, NETWORKS, OPTIMISM, Network, get_chain
from txsubmit.constants import TRANSACTION_REQUEST
from txsubmit.types.chain import ETHER, Chain, NativeCurrency, define_chain


class TestChain:
    """Tests for Chain."""

    def test_describe(self) -> None:
        assert OPTIMISM.describe() == "Optimism (id: 10)"

    def test_default_currency(self) -> None:
        assert Chain(id=5, name="Test").native_currency == ETHER

    def test_formatter_capability(self) -> None:
        """Chains either have a formatter for a category or they do not."""
        assert MAINNET.get_formatter(TRANSACTION_REQUEST) is None
        assert CELO.get_formatter(TRANSACTION_REQUEST) is not None

    def test_define_chain_from_base(self) -> None:
        forked = define_chain(MAINNET, id=1337, name="Fork")

        assert forked.id == 1337
        assert forked.native_currency == MAINNET.native_currency

    def test_define_chain_new(self) -> None:
        chain = define_chain(id=99, name="Custom", native_currency=NativeCurrency("Token", "TKN"))

        assert chain.native_currency.symbol == "TKN"


class TestRegistry:
    """Tests for the built-in chain registry."""

    def test_every_network_registered(self) -> None:
        assert set(NETWORKS) == set(Network)

    @pytest.mark.parametrize("name,chain_id", [("mainnet", 1), ("optimism", 10), ("base", 8453), ("celo", 42220)])
    def test_get_chain(self, name: str, chain_id: int) -> None:
        assert get_chain(name).id == chain_id

    def test_get_chain_enum(self) -> None:
        assert get_chain(Network.BASE_SEPOLIA).id == 84532

    def test_unknown(self) -> None:
        with pytest.raises(ValueError):
            get_chain("nope")
