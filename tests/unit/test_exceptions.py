"""Tests for the exceptions module."""

from quote_arb.exceptions import (
    ConfigError,
    ProtocolError,
    QuoteArbError,
    RpcError,
    RpcTimeoutError,
)


def test_base_exception():
    """Test the base exception class."""
    error = QuoteArbError("Test error")
    assert str(error) == "Test error"
    assert error.details == {}

    error_with_details = QuoteArbError("Test error", {"key": "value"})
    assert error_with_details.details == {"key": "value"}


def test_config_error():
    error = ConfigError("Config error", {"config_file": "test.yaml"})
    assert str(error) == "Config error"
    assert error.details["config_file"] == "test.yaml"
    assert isinstance(error, QuoteArbError)


def test_rpc_error():
    error = RpcError("call reverted", endpoint="https://polygon-rpc.com", reason="revert")
    assert str(error) == "call reverted"
    assert error.endpoint == "https://polygon-rpc.com"
    assert error.reason == "revert"
    assert isinstance(error, QuoteArbError)


def test_rpc_timeout_error():
    error = RpcTimeoutError("timed out", endpoint="https://polygon-rpc.com")
    assert error.reason == "timeout"
    assert error.endpoint == "https://polygon-rpc.com"
    assert isinstance(error, RpcError)


def test_protocol_error():
    error = ProtocolError("short response", venue="QuickSwap", expected=2, actual=1)
    assert str(error) == "short response"
    assert error.venue == "QuickSwap"
    assert error.expected == 2
    assert error.actual == 1
    assert isinstance(error, QuoteArbError)
    assert not isinstance(error, RpcError)
