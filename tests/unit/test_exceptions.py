"""Unit tests for custom exception classes."""

import pytest

from sudobility_configs import get_chain_info
from sudobility_configs.exceptions import ChainConfigError, ChainNotFoundError


class TestExceptionCatching:
    """Test that exceptions can be caught as their base types."""

    def test_catch_chain_not_found_as_value_error(self):
        """Test that ChainNotFoundError can be caught as ValueError."""
        with pytest.raises(ValueError):
            raise ChainNotFoundError("test")

    def test_catch_chain_not_found_as_chain_config_error(self):
        """Test that ChainNotFoundError can be caught as ChainConfigError."""
        with pytest.raises(ChainConfigError):
            raise ChainNotFoundError("test")

    def test_lookup_failure_is_catchable_as_value_error(self):
        """Test that a failed registry lookup surfaces as ValueError."""
        with pytest.raises(ValueError):
            get_chain_info("not-a-chain")


class TestExceptionCreation:
    """Test creating exceptions with various message types."""

    def test_exceptions_accept_string_messages(self):
        """Test that all exceptions accept string messages."""
        for exc_class in (ChainConfigError, ChainNotFoundError):
            exc = exc_class("test message")
            assert str(exc) == "test message"

    def test_exceptions_accept_empty_messages(self):
        """Test that exceptions can be created with empty messages."""
        for exc_class in (ChainConfigError, ChainNotFoundError):
            exc = exc_class("")
            assert isinstance(exc, exc_class)

    def test_not_found_message_names_the_chain(self):
        """Test that the lookup error message includes the bad identifier."""
        with pytest.raises(ChainNotFoundError, match="not-a-chain"):
            get_chain_info("not-a-chain")
