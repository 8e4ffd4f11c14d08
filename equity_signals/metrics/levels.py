"""Support and resistance detection from local extrema"""

from typing import Literal, Optional, Sequence

ExtremumKind = Literal["min", "max"]


def find_local_extrema(prices: Sequence[float], kind: ExtremumKind) -> list[float]:
    """
    Find local minima or maxima of a price series

    A value at index i (1 <= i <= len - 2) is a minimum when strictly below
    both neighbours and a maximum when strictly above both. The first and
    last samples are never flagged.

    Args:
        prices: Clean daily price series
        kind: "min" for support levels, "max" for resistance levels

    Returns:
        Distinct extremum values in ascending order
    """
    if kind not in ("min", "max"):
        raise ValueError(f"Unknown extremum kind: {kind!r}")

    levels = set()
    for i in range(1, len(prices) - 1):
        previous, current, following = prices[i - 1], prices[i], prices[i + 1]
        if kind == "min" and current < previous and current < following:
            levels.add(current)
        elif kind == "max" and current > previous and current > following:
            levels.add(current)

    return sorted(levels)


def find_support_levels(prices: Sequence[float]) -> list[float]:
    """Local minima of the series, ascending"""
    return find_local_extrema(prices, "min")


def find_resistance_levels(prices: Sequence[float]) -> list[float]:
    """Local maxima of the series, ascending"""
    return find_local_extrema(prices, "max")


def nearest_support(levels: Sequence[float], price: float) -> Optional[float]:
    """Highest level strictly below price, None if there is none"""
    below = [level for level in levels if level < price]
    return max(below) if below else None


def nearest_resistance(levels: Sequence[float], price: float) -> Optional[float]:
    """Lowest level strictly above price, None if there is none"""
    above = [level for level in levels if level > price]
    return min(above) if above else None
