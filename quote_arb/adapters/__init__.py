"""
Venue adapters for different router types.
"""

from .router import UNISWAP_V2_ROUTER_ABI, RouterQuoteSource

__all__ = ["RouterQuoteSource", "UNISWAP_V2_ROUTER_ABI"]
