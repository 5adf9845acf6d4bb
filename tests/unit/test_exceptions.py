"""
Unit tests for custom exceptions.
Testing all exception classes and their attributes.
"""

from memesim.core.exceptions.market import (
    ConfigurationError,
    EmptyHoldingError,
    InsufficientFundsError,
    InvalidAmountError,
    LedgerError,
    MemesimException,
    UnknownAssetError,
    ValidationError,
)


class TestMemesimException:
    """Tests for MemesimException base class."""

    def test_should_create_base_exception_with_message(self) -> None:
        """Test creating base exception with message."""
        exc = MemesimException("Test error message")
        assert str(exc) == "Test error message"
        assert isinstance(exc, Exception)


class TestInvalidAmountError:
    """Tests for InvalidAmountError."""

    def test_should_keep_raw_amount(self) -> None:
        """Test that the rejected input is preserved."""
        exc = InvalidAmountError("abc")
        assert exc.amount == "abc"
        assert "'abc'" in str(exc)
        assert isinstance(exc, ValidationError)
        assert isinstance(exc, MemesimException)


class TestInsufficientFundsError:
    """Tests for InsufficientFundsError."""

    def test_should_format_required_and_available(self) -> None:
        """Test message and attributes."""
        exc = InsufficientFundsError(required=1500.0, available=1000.0, ticker="$CLAWD")
        assert exc.required == 1500.0
        assert exc.available == 1000.0
        assert exc.ticker == "$CLAWD"
        assert "required=1500.00" in str(exc)
        assert "available=1000.00" in str(exc)
        assert isinstance(exc, LedgerError)


class TestEmptyHoldingError:
    """Tests for EmptyHoldingError."""

    def test_should_include_asset_id(self) -> None:
        exc = EmptyHoldingError("clawnch")
        assert exc.asset_id == "clawnch"
        assert "clawnch" in str(exc)
        assert isinstance(exc, LedgerError)


class TestUnknownAssetError:
    """Tests for UnknownAssetError."""

    def test_should_include_asset_id(self) -> None:
        exc = UnknownAssetError("dogecoin")
        assert exc.asset_id == "dogecoin"
        assert str(exc) == "Unknown asset: dogecoin"
        assert isinstance(exc, MemesimException)
        assert not isinstance(exc, LedgerError)


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_should_be_simulator_exception(self) -> None:
        exc = ConfigurationError("history_window must be positive, got 0")
        assert isinstance(exc, MemesimException)
        assert "history_window" in str(exc)
