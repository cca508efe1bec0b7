"""
Quote fetching: ask a venue to price a token path and normalize the answer.

Each call is a single round-trip with no retries and no caching. Retry
policy, if any, belongs to whoever schedules the cycles.
"""

import asyncio
from typing import Sequence, Tuple

from .exceptions import ProtocolError
from .interfaces import QuoteSource
from .types import Quote, TokenPath
from .utils import get_logger

logger = get_logger(__name__)


def _validate_amounts(amounts: Sequence[int], path: TokenPath, venue_name: str) -> None:
    """Check the router response has one integer amount per path position."""
    if amounts is None or isinstance(amounts, (str, bytes)):
        raise ProtocolError(
            f"{venue_name} returned a malformed amounts sequence: {amounts!r}",
            venue=venue_name,
            expected=len(path),
            actual=None,
        )

    if len(amounts) < len(path):
        raise ProtocolError(
            f"{venue_name} returned {len(amounts)} amounts for a "
            f"{len(path)}-token path",
            venue=venue_name,
            expected=len(path),
            actual=len(amounts),
        )

    out = amounts[len(path) - 1]
    if isinstance(out, bool) or not isinstance(out, int) or out < 0:
        raise ProtocolError(
            f"{venue_name} returned a non-uint output amount: {out!r}",
            venue=venue_name,
        )


def fetch_quote(
    source: QuoteSource,
    amount_in: int,
    path: TokenPath,
    in_decimals: int,
    out_decimals: int,
) -> Quote:
    """
    Price amount_in along path at one venue.

    Args:
        source: Venue capability to query
        amount_in: Input amount in smallest units
        path: Token path, at least two addresses
        in_decimals: Decimals of path[0]
        out_decimals: Decimals of path[-1]

    Returns:
        Quote with the amount at the final path position as amount_out

    Raises:
        RpcError: If the call cannot be completed (propagated from source)
        ProtocolError: If the response is shorter than the path
        ValueError: If path has fewer than two tokens
    """
    if len(path) < 2:
        raise ValueError(f"Token path needs at least 2 tokens, got {len(path)}")

    venue = source.venue
    amounts = source.get_amounts_out(amount_in, tuple(path))
    _validate_amounts(amounts, path, venue.name)

    quote = Quote(
        venue=venue,
        path=tuple(path),
        amount_in=amount_in,
        amount_out=int(amounts[len(path) - 1]),
        in_decimals=in_decimals,
        out_decimals=out_decimals,
    )
    logger.debug(
        f"{venue.name}: {quote.normalized_in} in -> {quote.normalized_out} out "
        f"(unit price {quote.unit_price:.6f})"
    )
    return quote


def fetch_quote_pair(
    source_a: QuoteSource,
    source_b: QuoteSource,
    amount_in: int,
    path: TokenPath,
    in_decimals: int,
    out_decimals: int,
) -> Tuple[Quote, Quote]:
    """
    Fetch quotes from both venues one after the other.

    The first failure propagates; the second venue is not queried.
    """
    quote_a = fetch_quote(source_a, amount_in, path, in_decimals, out_decimals)
    quote_b = fetch_quote(source_b, amount_in, path, in_decimals, out_decimals)
    return quote_a, quote_b


async def fetch_quote_pair_async(
    source_a: QuoteSource,
    source_b: QuoteSource,
    amount_in: int,
    path: TokenPath,
    in_decimals: int,
    out_decimals: int,
) -> Tuple[Quote, Quote]:
    """
    Fetch quotes from both venues concurrently.

    The blocking RPC calls run in the default thread pool so the event loop
    is not blocked. The first exception raised by either fetch propagates and
    no partial result is returned.
    """
    loop = asyncio.get_running_loop()

    task_a = loop.run_in_executor(
        None, fetch_quote, source_a, amount_in, path, in_decimals, out_decimals
    )
    task_b = loop.run_in_executor(
        None, fetch_quote, source_b, amount_in, path, in_decimals, out_decimals
    )

    quote_a, quote_b = await asyncio.gather(task_a, task_b)
    return quote_a, quote_b
