"""
Core data types for two-venue router quote arbitrage.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .units import normalize

TokenPath = Tuple[str, ...]


@dataclass(frozen=True)
class Venue:
    """
    A swap-router contract representing one DEX.

    Attributes:
        name: Human-readable DEX name (e.g., "QuickSwap")
        router: Checksum address of the router contract
    """

    name: str
    router: str


@dataclass(frozen=True)
class Token:
    """ERC20 token as configured: symbol, checksum address and decimals."""

    symbol: str
    address: str
    decimals: int


@dataclass(frozen=True)
class Quote:
    """
    A venue's predicted output for swapping amount_in along a path.

    Attributes:
        venue: Venue that produced the quote
        path: Token path that was priced
        amount_in: Input amount in smallest units
        amount_out: Output amount in smallest units (last path position)
        in_decimals: Decimals of the input token
        out_decimals: Decimals of the output token
    """

    venue: Venue
    path: TokenPath
    amount_in: int
    amount_out: int
    in_decimals: int
    out_decimals: int

    @property
    def normalized_in(self) -> float:
        return normalize(self.amount_in, self.in_decimals)

    @property
    def normalized_out(self) -> float:
        return normalize(self.amount_out, self.out_decimals)

    @property
    def unit_price(self) -> float:
        """Output token received per one unit of input token."""
        normalized_in = self.normalized_in
        if normalized_in == 0:
            return 0.0
        return self.normalized_out / normalized_in


@dataclass(frozen=True)
class Opportunity:
    """Profit strictly exceeds the configured threshold."""

    profit: float
    threshold: float
    is_opportunity = True


@dataclass(frozen=True)
class NoOpportunity:
    """Profit is at or below the configured threshold."""

    profit: float
    threshold: float
    is_opportunity = False


Classification = Union[Opportunity, NoOpportunity]


@dataclass
class CycleReport:
    """
    Everything observed and decided during one evaluation cycle.

    Attributes:
        block_number: Block height observed at the start of the cycle
        quote_a: Quote from the first configured venue
        quote_b: Quote from the second configured venue
        profit: Net profit in output token units
        classification: Opportunity or NoOpportunity
        buy_venue: Name of the venue with the lower price
        sell_venue: Name of the venue with the higher price
    """

    block_number: Optional[int]
    quote_a: Quote
    quote_b: Quote
    profit: float
    classification: Classification
    buy_venue: str
    sell_venue: str

    @property
    def price_a(self) -> float:
        return self.quote_a.unit_price

    @property
    def price_b(self) -> float:
        return self.quote_b.unit_price

    def to_dict(self) -> dict:
        """Flat dict for JSON output."""
        return {
            "block": self.block_number,
            "prices": {
                self.quote_a.venue.name: self.price_a,
                self.quote_b.venue.name: self.price_b,
            },
            "buy_venue": self.buy_venue,
            "sell_venue": self.sell_venue,
            "profit": self.profit,
            "threshold": self.classification.threshold,
            "opportunity": self.classification.is_opportunity,
        }
