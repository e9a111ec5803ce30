"""Price-based components of the value score.

Price vs average:
    score = 50 + percent below average, clamped to 0-100
    (50% below -> 100, at average -> 50, 50% above -> 0)

Price vs history:
    at or below the all-time low -> 100
    between low and (recency weighted) average -> 50-100
    above average -> 50 minus the percent overage, floored at 0
"""

from seatsniper.scoring.calculator import round_half_up, to_score
from seatsniper.scoring.models import HistoricalPrice

NEUTRAL_PRICE_SCORE = 50

# Each older snapshot counts this much less than the one after it
HISTORY_DECAY = 0.9


def price_delta_percent(price: float, average_price: float) -> float:
    """Signed percent difference from the average (negative = cheaper)."""
    if average_price <= 0:
        return 0.0
    return (price - average_price) / average_price * 100


def analyze_price(price: float, average_price: float) -> int:
    """Score a price against the current market average."""
    if average_price <= 0:
        return NEUTRAL_PRICE_SCORE
    return to_score(50 - price_delta_percent(price, average_price))


def weighted_average_price(history: list[HistoricalPrice]) -> float:
    """Average of snapshot averages, most recent weighted highest."""
    if not history:
        return 0.0

    ordered = sorted(history, key=lambda point: point.date, reverse=True)
    weight_sum = 0.0
    value_sum = 0.0
    for index, point in enumerate(ordered):
        weight = HISTORY_DECAY**index
        weight_sum += weight
        value_sum += point.average_price * weight

    return value_sum / weight_sum


def lowest_price(history: list[HistoricalPrice]) -> float:
    """Lowest price ever recorded."""
    if not history:
        return 0.0
    return min(point.lowest_price for point in history)


def analyze_historical(price: float, history: list[HistoricalPrice]) -> int:
    """Score a price against section price history."""
    if not history:
        return NEUTRAL_PRICE_SCORE

    average = weighted_average_price(history)
    low = lowest_price(history)

    if price <= low:
        return 100

    if price >= average:
        if average <= 0:
            return 0
        overage = (price - average) / average
        return max(0, round_half_up(50 - overage * 100))

    spread = average - low
    if spread == 0:
        return 75

    # 0 = at average, 1 = at the low
    position = (average - price) / spread
    return to_score(50 + position * 50)


def is_historical_low(
    price: float,
    history: list[HistoricalPrice],
    tolerance: float = 0.05,
) -> bool:
    """Is the price at or within tolerance of the all-time low?"""
    if not history:
        return False
    return price <= lowest_price(history) * (1 + tolerance)


def is_price_outlier(price: float, average_price: float, threshold: float = 0.25) -> bool:
    """Is the price at least threshold below the average?"""
    if average_price <= 0:
        return False
    return (average_price - price) / average_price >= threshold
