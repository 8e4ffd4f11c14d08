"""Tests for EMA and MACD calculations"""

import math

import pytest
from equity_signals.metrics.trend import (
    MACDResult,
    calculate_ema,
    calculate_ema_series,
    calculate_macd,
    calculate_macd_series,
    smoothing_constant,
)


class TestEMACalculation:
    """Test scalar EMA reducer"""

    def test_smoothing_constant(self):
        assert smoothing_constant(9) == 0.2
        assert smoothing_constant(1) == 1.0

    @pytest.mark.parametrize("period", [1, 9, 21, 50, 200])
    def test_ema_constant_series(self, period):
        """Constant series returns the constant exactly"""
        assert calculate_ema([123.45] * 40, period) == 123.45

    def test_ema_basic(self):
        """EMA of two samples with k = 0.5"""
        assert calculate_ema([1.0, 2.0], 3) == 1.5

    def test_ema_period_one_tracks_last_price(self):
        assert calculate_ema([10.0, 20.0, 30.0], 1) == 30.0

    def test_ema_empty(self):
        assert calculate_ema([], 9) == 0.0

    def test_ema_single_sample(self):
        assert calculate_ema([42.0], 9) == 42.0

    def test_ema_skips_invalid_samples(self):
        """None and NaN samples carry the EMA forward unchanged"""
        assert calculate_ema([10.0, None, 20.0], 3) == 15.0
        assert calculate_ema([10.0, float("nan"), 20.0], 3) == 15.0
        assert calculate_ema([10.0, 20.0, None], 3) == 15.0

    def test_ema_seeds_with_first_valid_sample(self):
        assert calculate_ema([None, 10.0, 20.0], 3) == 15.0

    def test_ema_all_invalid(self):
        assert calculate_ema([None, float("nan")], 3) == 0.0


class TestEMASeries:
    """Test running EMA series"""

    def test_ema_series_values(self):
        assert calculate_ema_series([1.0, 2.0, 3.0], 3) == [1.0, 1.5, 2.25]

    def test_ema_series_last_matches_scalar(self):
        prices = [100.0, 101.5, 99.0, 102.0, 104.5, 103.0]
        assert calculate_ema_series(prices, 4)[-1] == calculate_ema(prices, 4)

    def test_ema_series_alignment_with_gaps(self):
        series = calculate_ema_series([None, 10.0, None, 20.0], 3)
        assert series == [10.0, 10.0, 10.0, 15.0]

    def test_ema_series_empty(self):
        assert calculate_ema_series([], 3) == []


class TestMACDCalculation:
    """Test MACD line and signal line"""

    def test_macd_insufficient_data(self):
        """Fewer than 26 samples return (0, 0)"""
        result = calculate_macd([100.0 + i for i in range(25)])
        assert result == MACDResult(macd_line=0.0, signal_line=0.0)

    def test_macd_constant_series(self):
        result = calculate_macd([100.0] * 40)
        assert result.macd_line == 0.0
        assert result.signal_line == 0.0

    def test_macd_minimum_length(self):
        """With exactly 26 samples there is one MACD value, equal to its signal"""
        result = calculate_macd([100.0 + i for i in range(26)])
        assert result.macd_line > 0
        assert result.signal_line == result.macd_line
        assert result.histogram == 0.0

    def test_macd_uptrend(self):
        """Fast EMA leads the slow one in a steady uptrend"""
        result = calculate_macd([100.0 + i for i in range(80)])
        assert result.macd_line > result.signal_line > 0

    def test_macd_downtrend(self):
        result = calculate_macd([200.0 - i for i in range(80)])
        assert result.macd_line < result.signal_line < 0

    def test_macd_matches_manual_recurrence(self):
        """MACD line is EMA12 - EMA26 at the last sample"""
        prices = [100.0 + (i % 7) * 1.5 for i in range(40)]
        result = calculate_macd(prices)
        expected = calculate_ema(prices, 12) - calculate_ema(prices, 26)
        assert result.macd_line == pytest.approx(expected)

    def test_macd_finite(self):
        result = calculate_macd([100.0 + math.sin(i) for i in range(120)])
        assert math.isfinite(result.macd_line)
        assert math.isfinite(result.signal_line)

    def test_macd_leading_invalid_sample(self):
        """EMAs are seeded at the first valid sample, like calculate_ema"""
        prices = [100.0 + i for i in range(30)]
        result = calculate_macd([None] + prices)

        assert math.isfinite(result.macd_line)
        assert result.macd_line == pytest.approx(
            calculate_ema(prices, 12) - calculate_ema(prices, 26)
        )

    def test_macd_no_valid_sample(self):
        result = calculate_macd([None] * 30)
        assert result == MACDResult(macd_line=0.0, signal_line=0.0)


class TestMACDSeries:
    """Test chart MACD series"""

    def test_macd_series_alignment(self):
        prices = [100.0 + i for i in range(30)]
        series = calculate_macd_series(prices)
        assert len(series.macd) == len(prices)
        assert len(series.signal) == len(prices)
        assert series.macd[0] == 0.0

    def test_macd_series_empty(self):
        series = calculate_macd_series([])
        assert series.macd == ()
        assert series.signal == ()

    def test_macd_series_last_values_match_scalar(self):
        prices = [100.0 + (i % 9) * 1.3 - i * 0.2 for i in range(60)]
        series = calculate_macd_series(prices)
        result = calculate_macd(prices)

        assert series.macd[-1] == pytest.approx(result.macd_line)
        assert series.signal[-1] == pytest.approx(result.signal_line)

    def test_macd_series_signal_warmup(self):
        """Signal reads 0.0 until the slow EMA window is filled"""
        prices = [100.0 + i for i in range(30)]
        series = calculate_macd_series(prices)

        assert series.signal[:25] == (0.0,) * 25
        assert series.signal[25] == series.macd[25]

    def test_macd_series_short_input(self):
        series = calculate_macd_series([100.0, 101.0, 102.0])
        assert len(series.signal) == 3
        assert series.signal == (0.0, 0.0, 0.0)
