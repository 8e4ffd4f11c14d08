"""Rule set selection and change-of-signal detection"""

from datetime import datetime
from typing import Optional

from ..config.defaults import DefaultConfig, get_default_config
from ..models.metrics import IndicatorSnapshot
from ..models.signal import Signal
from ..utils.time import MarketMode, get_market_mode
from .intraday import evaluate_intraday
from .long_term import evaluate_long_term


def evaluate_signal(snapshot: IndicatorSnapshot, now: datetime,
                    config: Optional[DefaultConfig] = None) -> tuple[MarketMode, Signal]:
    """
    Evaluate a snapshot with the rule set that applies at `now`.

    Returns:
        Tuple of (mode used, signal)
    """
    config = config or get_default_config()
    mode = get_market_mode(now, config.market_clock)

    if mode is MarketMode.INTRADAY:
        return mode, evaluate_intraday(snapshot, config.intraday)
    return mode, evaluate_long_term(snapshot, config.long_term)


def is_new_signal(signal: Signal, last_signal: Optional[Signal]) -> bool:
    """
    Whether a signal deserves a fresh alert.

    HOLD never alerts; BUY/SELL alert when there was no previous alert or
    the previous one had a different type.
    """
    if not signal.is_actionable:
        return False
    return last_signal is None or last_signal.signal_type is not signal.signal_type
