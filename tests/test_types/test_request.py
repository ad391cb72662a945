"""
Tests for the transaction request model.

Tests cover:
- Construction-time validation
- Caller-style dict input
- Supplied field tracking and copies
- Intrinsic gas
"""

import pytest

from txsubmit.chains import OPTIMISM
from txsubmit.errors import FeeModelConflictError, InvalidAddressError, InvalidAmountError, ValidationError
from txsubmit.types.request import TransactionRequest, intrinsic_gas
from txsubmit.utils.units import parse_ether, parse_gwei

from tests.conftest import RECIPIENT, SENDER


class TestConstruction:
    """Tests for request validation."""

    def test_minimal(self) -> None:
        request = TransactionRequest(from_=SENDER)

        assert request.to is None
        assert request.assert_chain is True
        assert request.extra == {}

    def test_bad_from(self) -> None:
        with pytest.raises(InvalidAddressError):
            TransactionRequest(from_="0x123")

    def test_bad_to(self) -> None:
        with pytest.raises(InvalidAddressError):
            TransactionRequest(from_=SENDER, to="not-an-address")

    def test_negative_value(self) -> None:
        with pytest.raises(InvalidAmountError):
            TransactionRequest(from_=SENDER, value=-1)

    def test_fee_models_mixed(self) -> None:
        """Legacy and EIP-1559 fields cannot be combined."""
        with pytest.raises(FeeModelConflictError):
            TransactionRequest(from_=SENDER, gas_price=1, max_fee_per_gas=1)

    def test_bad_data(self) -> None:
        with pytest.raises(ValidationError):
            TransactionRequest(from_=SENDER, data="xyz")

    def test_fee_above_uint256_allowed(self) -> None:
        """Fee ceilings surface later as transaction errors."""
        request = TransactionRequest(from_=SENDER, max_fee_per_gas=2**256)

        assert request.max_fee_per_gas == 2**256


class TestFromDict:
    """Tests for TransactionRequest.from_dict."""

    def test_rpc_names(self) -> None:
        """JSON-RPC names map to attributes."""
        request = TransactionRequest.from_dict(
            {
                "from": SENDER,
                "to": RECIPIENT,
                "value": parse_ether(1),
                "maxFeePerGas": parse_gwei(20),
                "maxPriorityFeePerGas": parse_gwei(2),
                "assertChain": False,
                "chain": OPTIMISM,
            }
        )

        assert request.from_ == SENDER
        assert request.max_fee_per_gas == parse_gwei(20)
        assert request.max_priority_fee_per_gas == parse_gwei(2)
        assert request.assert_chain is False
        assert request.chain is OPTIMISM

    def test_attribute_names(self) -> None:
        request = TransactionRequest.from_dict({"from_": SENDER, "gas_price": 5})

        assert request.gas_price == 5

    def test_unknown_keys_to_extra(self) -> None:
        request = TransactionRequest.from_dict({"from": SENDER, "feeCurrency": RECIPIENT})

        assert request.extra == {"feeCurrency": RECIPIENT}

    def test_from_required(self) -> None:
        with pytest.raises(ValidationError):
            TransactionRequest.from_dict({"to": RECIPIENT})


class TestSuppliedFields:
    """Tests for supplied field tracking."""

    def test_rpc_keys(self) -> None:
        request = TransactionRequest(from_=SENDER, gas=21000, gas_price=7)

        assert request.supplied_fields() == {"from": SENDER, "gas": 21000, "gasPrice": 7}

    def test_is_legacy(self) -> None:
        assert TransactionRequest(from_=SENDER, gas_price=1).is_legacy
        assert not TransactionRequest(from_=SENDER, max_fee_per_gas=1).is_legacy

    def test_copy_is_independent(self) -> None:
        """Filling a copy leaves the original untouched."""
        request = TransactionRequest(from_=SENDER, extra={"a": 1})
        copy = request.copy()

        copy.nonce = 3
        copy.extra["b"] = 2

        assert request.nonce is None
        assert request.extra == {"a": 1}


class TestIntrinsicGas:
    """Tests for intrinsic_gas."""

    def test_transfer(self) -> None:
        assert intrinsic_gas(TransactionRequest(from_=SENDER, to=RECIPIENT)) == 21000

    def test_contract_creation(self) -> None:
        assert intrinsic_gas(TransactionRequest(from_=SENDER)) == 53000

    def test_calldata(self) -> None:
        """Zero bytes cost 4 gas and non-zero bytes 16."""
        request = TransactionRequest(from_=SENDER, to=RECIPIENT, data=b"\x00\x00\x01")

        assert intrinsic_gas(request) == 21000 + 4 + 4 + 16
