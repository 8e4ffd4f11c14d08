"""EMA (Exponential Moving Average) and MACD calculations"""

from dataclasses import dataclass
from typing import Optional, Sequence

from ..data.normalizer import is_valid_number


@dataclass(frozen=True)
class MACDResult:
    """Latest MACD line and its signal line"""
    macd_line: float
    signal_line: float

    @property
    def histogram(self) -> float:
        return self.macd_line - self.signal_line


@dataclass(frozen=True)
class MACDSeries:
    """MACD and signal line at every sample, for chart display"""
    macd: tuple[float, ...]
    signal: tuple[float, ...]


def smoothing_constant(period: int) -> float:
    """k = 2 / (period + 1)"""
    return 2.0 / (period + 1)


def _first_valid(prices: Sequence[float]) -> Optional[int]:
    for i, price in enumerate(prices):
        if is_valid_number(price):
            return i
    return None


def calculate_ema(prices: Sequence[float], period: int) -> float:
    """
    Calculate the final EMA value of a series

    EMA = EMA_prev + (price - EMA_prev) * k, seeded with the first sample.
    Invalid samples (None, NaN, inf) are skipped and the EMA carried forward.

    Args:
        prices: Price series in chronological order
        period: EMA period

    Returns:
        Final EMA value, 0.0 if the series has no valid sample
    """
    start = _first_valid(prices)
    if start is None:
        return 0.0

    k = smoothing_constant(period)
    ema = prices[start]
    for price in prices[start + 1:]:
        if is_valid_number(price):
            ema += (price - ema) * k

    return ema


def calculate_ema_series(prices: Sequence[float], period: int) -> list[float]:
    """
    Calculate the running EMA at every sample

    Same recurrence as calculate_ema. Samples before the first valid price
    repeat the seed so the output stays index-aligned with the input.

    Args:
        prices: Price series in chronological order
        period: EMA period

    Returns:
        List of EMA values, same length as prices (empty if no valid sample)
    """
    start = _first_valid(prices)
    if start is None:
        return []

    k = smoothing_constant(period)
    ema = prices[start]
    values = [ema] * (start + 1)
    for price in prices[start + 1:]:
        if is_valid_number(price):
            ema += (price - ema) * k
        values.append(ema)

    return values


def calculate_macd(prices: Sequence[float], fast_period: int = 12,
                   slow_period: int = 26, signal_period: int = 9) -> MACDResult:
    """
    Calculate the latest MACD line and signal line

    Both EMAs are seeded at the first valid sample and updated over the
    rest of the series, skipping invalid samples.
    MACD values (EMA_fast - EMA_slow) are collected from index
    slow_period - 1 onward; the signal line is the EMA of that collection.

    Args:
        prices: Clean daily price series
        fast_period: Fast EMA period (default 12)
        slow_period: Slow EMA period (default 26)
        signal_period: Signal EMA period (default 9)

    Returns:
        MACDResult, (0.0, 0.0) with fewer than slow_period samples or no
        valid sample
    """
    if len(prices) < slow_period:
        return MACDResult(macd_line=0.0, signal_line=0.0)

    start = _first_valid(prices)
    if start is None:
        return MACDResult(macd_line=0.0, signal_line=0.0)

    k_fast = smoothing_constant(fast_period)
    k_slow = smoothing_constant(slow_period)
    ema_fast = prices[start]
    ema_slow = prices[start]
    macd_values = []
    if start >= slow_period - 1:
        macd_values.append(0.0)

    for i in range(start + 1, len(prices)):
        price = prices[i]
        if not is_valid_number(price):
            continue
        ema_fast += (price - ema_fast) * k_fast
        ema_slow += (price - ema_slow) * k_slow
        if i >= slow_period - 1:
            macd_values.append(ema_fast - ema_slow)

    if not macd_values:
        return MACDResult(macd_line=0.0, signal_line=0.0)

    return MACDResult(
        macd_line=macd_values[-1],
        signal_line=calculate_ema(macd_values, signal_period),
    )


def calculate_macd_series(prices: Sequence[float], fast_period: int = 12,
                          slow_period: int = 26, signal_period: int = 9) -> MACDSeries:
    """
    Calculate MACD and signal values at every sample for charting

    The signal line is the EMA of the MACD values from index
    slow_period - 1 onward, as in calculate_macd, and reads 0.0 before
    that. For a clean series the last values equal calculate_macd.

    Args:
        prices: Daily price series
        fast_period: Fast EMA period (default 12)
        slow_period: Slow EMA period (default 26)
        signal_period: Signal EMA period (default 9)

    Returns:
        MACDSeries with both sequences index-aligned to prices
    """
    ema_fast = calculate_ema_series(prices, fast_period)
    ema_slow = calculate_ema_series(prices, slow_period)
    macd = [fast - slow for fast, slow in zip(ema_fast, ema_slow)]
    warmup = min(slow_period - 1, len(macd))
    signal = [0.0] * warmup + calculate_ema_series(macd[warmup:], signal_period)
    return MACDSeries(macd=tuple(macd), signal=tuple(signal))
