"""
Signal evaluation module.

Rule-based classifiers that turn an IndicatorSnapshot into a BUY/SELL/HOLD
Signal, plus the selection of which rule set applies at a given time.
"""

from .intraday import evaluate_intraday
from .long_term import evaluate_long_term
from .selection import evaluate_signal, is_new_signal

__all__ = [
    "evaluate_intraday",
    "evaluate_long_term",
    "evaluate_signal",
    "is_new_signal",
]
