"""
Token amount conversions between on-chain smallest units and human amounts.

Prices are plain floats. Values above 2**53 lose their low-order bits,
which is accepted for price comparison purposes.
"""

from decimal import Decimal


def normalize(raw_amount: int, decimals: int) -> float:
    """
    Convert a raw on-chain amount into a human-scale float.

    Args:
        raw_amount: Amount in the token's smallest unit (uint256)
        decimals: Token decimal precision

    Returns:
        raw_amount / 10**decimals as a float
    """
    return raw_amount / 10**decimals


def to_raw(amount: float, decimals: int) -> int:
    """Convert a human amount into smallest units, rounded to the nearest unit."""
    return int((Decimal(str(amount)) * (Decimal(10) ** decimals)).to_integral_value())
