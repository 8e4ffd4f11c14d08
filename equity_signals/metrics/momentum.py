"""RSI (Relative Strength Index) calculation"""

from typing import Sequence

NEUTRAL_RSI = 50.0


def calculate_rsi(prices: Sequence[float], period: int = 14) -> float:
    """
    Calculate RSI over the first `period` samples of the series

    The window is fixed at the start of the series rather than trailing the
    latest sample. Gains and losses are summed over indices 1..period-1 and
    each is averaged over `period`.

    RS = avg_gain / avg_loss
    RSI = 100 - 100 / (1 + RS)

    Args:
        prices: Clean price series in chronological order
        period: Window length (default 14)

    Returns:
        RSI in [0, 100]; 50.0 if fewer than `period` samples. A window
        without losses (including a flat one) saturates at 100.0.
    """
    if len(prices) < period:
        return NEUTRAL_RSI

    gains = 0.0
    losses = 0.0
    for i in range(1, period):
        difference = prices[i] - prices[i - 1]
        if difference >= 0:
            gains += difference
        else:
            losses -= difference

    average_gain = gains / period
    average_loss = losses / period

    # RS = +inf
    if average_loss == 0:
        return 100.0

    relative_strength = average_gain / average_loss
    return 100.0 - (100.0 / (1.0 + relative_strength))
