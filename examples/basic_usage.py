#!/usr/bin/env python3
"""
Basic Usage Example - Equity Signal Engine

Runs one evaluation cycle during market hours and one after the close
with simulated price/volume data, printing the resulting signals.

Run: python examples/basic_usage.py
"""

import json
import math
from datetime import datetime
from zoneinfo import ZoneInfo

from equity_signals.data.normalizer import clean_series
from equity_signals.engine import SignalEngine
from equity_signals.logging import configure_logging

IST = ZoneInfo("Asia/Kolkata")


def simulated_intraday(base: float, count: int = 60):
    """One-minute bars drifting upward with a volume spike on the last bar."""
    prices = [base + 0.05 * i + 0.3 * math.sin(i / 3) for i in range(count)]
    volumes = [1000.0 + 50 * (i % 7) for i in range(count)]
    volumes[-1] = 6000.0
    # A feed gap, dropped during cleaning
    prices[10] = None
    return clean_series(prices, volumes)


def simulated_daily(base: float, count: int = 250):
    """Daily closes with a slow uptrend and periodic swings."""
    prices = [base * (1 + 0.001 * i) + 20 * math.sin(i / 8) for i in range(count)]
    volumes = [2_000_000.0] * count
    return clean_series(prices, volumes)


def main():
    configure_logging(level="INFO")
    engine = SignalEngine()

    intraday = simulated_intraday(2450.0)
    daily = simulated_daily(2200.0)

    for label, now in [
        ("market hours", datetime(2024, 3, 12, 11, 30, tzinfo=IST)),
        ("after close", datetime(2024, 3, 12, 18, 0, tzinfo=IST)),
    ]:
        result = engine.run("RELIANCE.NS", intraday, daily, now=now, previous_close=2440.0)
        print(f"\n--- {label} ({result.mode.value}) ---")
        print(json.dumps(result.signal.to_dict(), indent=2, ensure_ascii=False))
        print(f"next refresh in {result.refresh_seconds}s")


if __name__ == "__main__":
    main()
