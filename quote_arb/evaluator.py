"""
Profit evaluation and opportunity classification.

Both functions are pure: no I/O, no state, identical output for identical
input. Arithmetic is plain float, matching the quotes they consume.
"""

from typing import Tuple

from .types import Classification, NoOpportunity, Opportunity


def evaluate(price_a: float, price_b: float, trade_size: float, gas_cost: float) -> float:
    """
    Net profit of buying at the lower price and selling at the higher one.

    Formula:
        revenue = max(price_a, price_b) * trade_size
        cost = min(price_a, price_b) * trade_size + gas_cost
        profit = revenue - cost

    Computed as spread * trade_size - gas_cost, which is the same quantity
    but keeps equal prices at exactly -gas_cost in float arithmetic.

    Args:
        price_a: Unit price at the first venue (output token per input token)
        price_b: Unit price at the second venue
        trade_size: Quantity of input token traded
        gas_cost: Fixed transaction cost in output token units

    Returns:
        Signed profit in output token units
    """
    buy_price = min(price_a, price_b)
    sell_price = max(price_a, price_b)

    spread = sell_price - buy_price

    return spread * trade_size - gas_cost


def pick_direction(price_a: float, price_b: float) -> Tuple[str, str]:
    """
    Which side to buy on and which to sell on.

    Returns:
        ("a", "b") if price_a is the cheaper side, otherwise ("b", "a").
        Equal prices report ("a", "b").
    """
    if price_b < price_a:
        return "b", "a"
    return "a", "b"


def classify(profit: float, threshold: float) -> Classification:
    """
    Classify profit against the minimum profit threshold.

    Strict comparison: a profit equal to the threshold is not an opportunity.
    """
    if profit > threshold:
        return Opportunity(profit=profit, threshold=threshold)
    return NoOpportunity(profit=profit, threshold=threshold)
