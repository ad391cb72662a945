"""
Shared constants and fixtures for txsubmit tests.

Every node fixture is built from explicit setup values; no state is shared
between tests.
"""

import pytest

from txsubmit.providers.mock import MockProvider
from txsubmit.types.request import TransactionRequest
from txsubmit.utils.units import parse_ether, parse_gwei


# =============================================================================
# Test Constants
# =============================================================================

SENDER = "0xf39fd6e51aad88f6f4ce6ab8827279cfffb92266"
RECIPIENT = "0x70997970c51812dc3a010c7d01b50e0d17dc79c8"

INITIAL_BALANCE = parse_ether(10_000)
BASE_FEE = parse_gwei(10)

VERSION_LINE = "Version: txsubmit@0.1.0"


# =============================================================================
# Fixtures
# =============================================================================


async def make_node(
    chain_id: int = 1,
    base_fee_per_gas: int = BASE_FEE,
    balance: int = INITIAL_BALANCE,
) -> MockProvider:
    """Build a mock node with funded accounts and one block at ``base_fee_per_gas``."""
    provider = MockProvider(chain_id=chain_id)
    provider.set_balance(SENDER, balance)
    provider.set_balance(RECIPIENT, balance)
    provider.set_next_block_base_fee_per_gas(base_fee_per_gas)
    await provider.mine()
    return provider


@pytest.fixture
async def node() -> MockProvider:
    """Mock node on chain 1 with a 10 gwei base fee and 10000 ETH accounts."""
    return await make_node()


@pytest.fixture
def transfer() -> TransactionRequest:
    """1 ETH transfer with every other field left to the resolver."""
    return TransactionRequest(from_=SENDER, to=RECIPIENT, value=parse_ether(1))
