"""VWAP and average volume calculations"""

from typing import Optional, Sequence

from ..errors import MalformedDataError


def calculate_vwap(prices: Sequence[float], volumes: Sequence[float]) -> Optional[float]:
    """
    Calculate Volume-Weighted Average Price over the entire series

    VWAP = sum(price_i * volume_i) / sum(volume_i)

    Args:
        prices: Clean price series
        volumes: Volumes aligned 1:1 with prices

    Returns:
        VWAP value within [min(prices), max(prices)], or None if the series
        is empty or total volume is zero

    Raises:
        MalformedDataError: If prices and volumes differ in length
    """
    if len(prices) != len(volumes):
        raise MalformedDataError(
            f"VWAP requires aligned series: {len(prices)} prices, {len(volumes)} volumes",
            series_name="vwap",
        )

    total_volume = sum(volumes)
    if total_volume <= 0:
        return None

    total_value = sum(price * volume for price, volume in zip(prices, volumes))
    # Rounding can push the ratio one ulp past the extreme prices
    return min(max(total_value / total_volume, min(prices)), max(prices))


def calculate_average_volume(volumes: Sequence[float], window: int = 5) -> float:
    """
    Calculate the mean of the last `window` volume samples

    With fewer than `window` samples the mean is taken over all of them.

    Args:
        volumes: Clean volume series
        window: Number of trailing samples (default 5)

    Returns:
        Average volume, 0.0 for an empty series
    """
    if not volumes:
        return 0.0

    recent_volumes = volumes[-window:]
    return sum(recent_volumes) / len(recent_volumes)
