"""Tests for input validation helpers."""

import pytest

from txsubmit.errors import InvalidAddressError, InvalidAmountError, ValidationError
from txsubmit.utils.validation import validate_address, validate_data, validate_uint

from tests.conftest import SENDER


class TestValidateAddress:
    """Tests for validate_address."""

    def test_valid_unchanged(self) -> None:
        """Addresses are returned exactly as given."""
        mixed = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"

        assert validate_address(mixed) == mixed
        assert validate_address(SENDER) == SENDER

    @pytest.mark.parametrize("address", ["", None, "0x123", "f39fd6e51aad88f6f4ce6ab8827279cfffb92266", 42])
    def test_invalid(self, address) -> None:
        with pytest.raises(InvalidAddressError) as exc_info:
            validate_address(address, "to")

        assert exc_info.value.details["field"] == "to"


class TestValidateUint:
    """Tests for validate_uint."""

    def test_none(self) -> None:
        assert validate_uint(None, "gas") is None

    def test_no_upper_bound(self) -> None:
        """Ceilings are enforced elsewhere."""
        assert validate_uint(2**300, "max_fee_per_gas") == 2**300

    @pytest.mark.parametrize("value", [-1, 1.5, "10", True])
    def test_invalid(self, value) -> None:
        with pytest.raises(InvalidAmountError):
            validate_uint(value, "value")


class TestValidateData:
    """Tests for validate_data."""

    def test_bytes(self) -> None:
        assert validate_data(b"\x00\xff") == "0x00ff"

    def test_hex_lowercased(self) -> None:
        assert validate_data("0xABCD") == "0xabcd"

    def test_empty(self) -> None:
        assert validate_data("0x") == "0x"

    @pytest.mark.parametrize("data", ["abcd", "0xabc", "0xzz", 12])
    def test_invalid(self, data) -> None:
        with pytest.raises(ValidationError):
            validate_data(data)
