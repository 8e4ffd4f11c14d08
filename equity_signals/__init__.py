"""
Equity Signals - Indicator and Trading Signal Engine

Derives technical indicators (trend, momentum, volume, support/resistance)
from intraday and daily price/volume series of an equity and classifies
them into BUY/SELL/HOLD recommendations with target and stop-loss levels.
"""

from .metrics.snapshot import build_snapshot
from .signals.intraday import evaluate_intraday
from .signals.long_term import evaluate_long_term
from .utils.time import is_intraday_active

__version__ = "0.1.0"
__author__ = "Equity Signals Team"

__all__ = [
    "build_snapshot",
    "evaluate_intraday",
    "evaluate_long_term",
    "is_intraday_active",
]
