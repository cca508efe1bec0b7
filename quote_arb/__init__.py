"""
Cross-DEX router quote arbitrage checker.

Queries two Uniswap V2 style routers for the same token path, normalizes
their quotes and decides whether buying on one and selling on the other
clears a fixed transaction cost and a minimum profit threshold.
"""

PROJECT_NAME = "quote-arb"
VERSION = "0.1.0"

from quote_arb.evaluator import classify, evaluate
from quote_arb.exceptions import (
    ConfigError,
    ProtocolError,
    QuoteArbError,
    RpcError,
    RpcTimeoutError,
)
from quote_arb.quotes import fetch_quote, fetch_quote_pair, fetch_quote_pair_async
from quote_arb.types import NoOpportunity, Opportunity, Quote, Venue
from quote_arb.units import normalize

__all__ = [
    "PROJECT_NAME",
    "VERSION",
    "classify",
    "evaluate",
    "fetch_quote",
    "fetch_quote_pair",
    "fetch_quote_pair_async",
    "normalize",
    "ConfigError",
    "ProtocolError",
    "QuoteArbError",
    "RpcError",
    "RpcTimeoutError",
    "NoOpportunity",
    "Opportunity",
    "Quote",
    "Venue",
]
