"""Built-in chain descriptors, keyed by ``Network``."""

from enum import Enum
from typing import Dict, Union

from txsubmit.actions.format import format_celo_transaction_request
from txsubmit.constants import TRANSACTION_REQUEST
from txsubmit.types.chain import Chain, NativeCurrency

__all__ = [
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
]


class Network(str, Enum):
    MAINNET = "mainnet"
    OPTIMISM = "optimism"
    BASE = "base"
    BASE_SEPOLIA = "base-sepolia"
    CELO = "celo"
    LOCALHOST = "localhost"
    FOUNDRY = "foundry"


MAINNET = Chain(
    id=1,
    name="Ethereum",
    network=Network.MAINNET.value,
    rpc_urls=("https://cloudflare-eth.com",),
)
OPTIMISM = Chain(
    id=10,
    name="Optimism",
    network=Network.OPTIMISM.value,
    rpc_urls=("https://mainnet.optimism.io",),
)
BASE = Chain(
    id=8453,
    name="Base",
    network=Network.BASE.value,
    rpc_urls=("https://mainnet.base.org",),
)
BASE_SEPOLIA = Chain(
    id=84532,
    name="Base Sepolia",
    network=Network.BASE_SEPOLIA.value,
    rpc_urls=("https://sepolia.base.org",),
)
CELO = Chain(
    id=42220,
    name="Celo",
    native_currency=NativeCurrency(name="Celo", symbol="CELO", decimals=18),
    network=Network.CELO.value,
    rpc_urls=("https://forno.celo.org",),
    formatters={TRANSACTION_REQUEST: format_celo_transaction_request},
)
LOCALHOST = Chain(
    id=1337,
    name="Localhost",
    network=Network.LOCALHOST.value,
    rpc_urls=("http://127.0.0.1:8545",),
)
FOUNDRY = Chain(
    id=31337,
    name="Foundry",
    network=Network.FOUNDRY.value,
    rpc_urls=("http://127.0.0.1:8545",),
)

NETWORKS: Dict[Network, Chain] = {
    Network.MAINNET: MAINNET,
    Network.OPTIMISM: OPTIMISM,
    Network.BASE: BASE,
    Network.BASE_SEPOLIA: BASE_SEPOLIA,
    Network.CELO: CELO,
    Network.LOCALHOST: LOCALHOST,
    Network.FOUNDRY: FOUNDRY,
}


def get_chain(network: Union[Network, str]) -> Chain:
    return NETWORKS[Network(network)]
