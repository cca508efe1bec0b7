"""
Exception hierarchy for the router quote arbitrage checker.

Every failure aborts the current evaluation cycle. The types only
distinguish where the failure came from so callers can decide what to do.
"""

from typing import Any, Dict, Optional


class QuoteArbError(Exception):
    """Base exception for all quote arbitrage errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class ConfigError(QuoteArbError):
    """Raised when config is unreadable, invalid or missing required fields."""

    pass


class RpcError(QuoteArbError):
    """Raised when an RPC round-trip cannot be completed (or the call reverts)."""

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        reason: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.endpoint = endpoint
        self.reason = reason


class RpcTimeoutError(RpcError):
    """Raised when an RPC call exceeds the configured timeout."""

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, endpoint=endpoint, reason="timeout", details=details)


class ProtocolError(QuoteArbError):
    """Raised when a venue answers with an unexpected response shape."""

    def __init__(
        self,
        message: str,
        venue: Optional[str] = None,
        expected: Optional[Any] = None,
        actual: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.venue = venue
        self.expected = expected
        self.actual = actual
