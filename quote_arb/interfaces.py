"""
Venue capability used by the quote fetcher.

Any transport that can price a token path (web3 router contract, a mock in
tests, another chain client) implements this one-method protocol.
"""

from typing import Protocol, Sequence, runtime_checkable

from .types import TokenPath, Venue


@runtime_checkable
class QuoteSource(Protocol):
    """Protocol for a venue that returns predicted swap amounts."""

    venue: Venue

    def get_amounts_out(self, amount_in: int, path: TokenPath) -> Sequence[int]:
        """
        Predict amounts for swapping amount_in along path.

        Raises:
            RpcError: If the call cannot be completed or reverts
            ProtocolError: If the venue returns no usable data
        """
        ...
