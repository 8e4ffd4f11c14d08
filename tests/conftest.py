"""Pytest configuration and shared fixtures."""

import pytest

from equity_signals.data.models import PriceVolumeSeries
from equity_signals.models.metrics import IndicatorSnapshot


@pytest.fixture
def intraday_series() -> PriceVolumeSeries:
    """20 rising five-minute samples with a volume spike on the last one."""
    prices = [100.0 + i for i in range(20)]
    volumes = [1000.0] * 19 + [5000.0]
    return PriceVolumeSeries(prices=prices, volumes=volumes)


@pytest.fixture
def daily_series() -> PriceVolumeSeries:
    """60 daily samples oscillating around an upward drift."""
    offsets = [0.0, 3.0, 1.0, 4.0, 2.0]
    prices = [1000.0 + i * 2 + offsets[i % 5] for i in range(60)]
    volumes = [250000.0] * 60
    return PriceVolumeSeries(prices=prices, volumes=volumes)


@pytest.fixture
def buy_snapshot() -> IndicatorSnapshot:
    """Snapshot satisfying every intraday BUY rule."""
    return IndicatorSnapshot(
        symbol="RELIANCE.NS",
        price=105.0,
        vwap=100.0,
        rsi=30.0,
        volume=200.0,
        average_volume_5=100.0,
        ema9=10.0,
        ema21=9.0,
    )
