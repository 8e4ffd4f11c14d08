"""Indicator calculation engine for technical analysis"""

from .levels import (
    find_local_extrema,
    find_resistance_levels,
    find_support_levels,
    nearest_resistance,
    nearest_support,
)
from .momentum import calculate_rsi
from .snapshot import SnapshotBuilder, build_snapshot
from .trend import calculate_ema, calculate_ema_series, calculate_macd, calculate_macd_series
from .volume import calculate_average_volume, calculate_vwap

__all__ = [
    "SnapshotBuilder",
    "build_snapshot",
    "calculate_rsi",
    "calculate_ema",
    "calculate_ema_series",
    "calculate_macd",
    "calculate_macd_series",
    "calculate_vwap",
    "calculate_average_volume",
    "find_local_extrema",
    "find_support_levels",
    "find_resistance_levels",
    "nearest_support",
    "nearest_resistance",
]
