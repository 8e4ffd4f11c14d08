"""
Tests for market clock utilities.

Verifies weekday/session gating in the market time zone, conversion of
aware timestamps and the refresh cadence derived from it.
"""

from datetime import datetime, timezone
from unittest.mock import patch
from zoneinfo import ZoneInfo

import pytest
from equity_signals.config.defaults import MarketClockParams
from equity_signals.utils.time import (
    MarketMode,
    get_market_mode,
    get_market_time,
    get_refresh_interval,
    is_intraday_active,
    to_market_time,
)

IST = ZoneInfo("Asia/Kolkata")


class TestIsIntradayActive:
    """Test session gating with local (naive) timestamps."""

    def test_saturday_morning(self):
        assert is_intraday_active(datetime(2024, 1, 6, 10, 0)) is False

    def test_sunday_morning(self):
        assert is_intraday_active(datetime(2024, 1, 7, 10, 0)) is False

    def test_tuesday_at_open(self):
        assert is_intraday_active(datetime(2024, 1, 2, 9, 15)) is True

    def test_tuesday_after_close(self):
        assert is_intraday_active(datetime(2024, 1, 2, 15, 31)) is False

    @pytest.mark.parametrize("hour, minute, expected", [
        (9, 14, False),
        (9, 15, True),
        (12, 0, True),
        (15, 30, True),
        (15, 31, False),
        (0, 0, False),
    ])
    def test_session_boundaries(self, hour, minute, expected):
        assert is_intraday_active(datetime(2024, 1, 3, hour, minute)) is expected

    def test_seconds_ignored_at_close(self):
        assert is_intraday_active(datetime(2024, 1, 2, 15, 30, 59)) is True

    def test_custom_session(self):
        params = MarketClockParams(timezone="America/New_York", session_open=930, session_close=1600)
        assert is_intraday_active(datetime(2024, 1, 2, 9, 30), params) is True
        assert is_intraday_active(datetime(2024, 1, 2, 9, 20), params) is False


class TestAwareTimestamps:
    """Aware timestamps are converted to the market time zone."""

    def test_utc_converted_to_ist_open(self):
        # 03:45 UTC == 09:15 IST
        now = datetime(2024, 1, 2, 3, 45, tzinfo=timezone.utc)
        assert is_intraday_active(now) is True

    def test_utc_converted_to_ist_after_close(self):
        # 10:01 UTC == 15:31 IST
        now = datetime(2024, 1, 2, 10, 1, tzinfo=timezone.utc)
        assert is_intraday_active(now) is False

    def test_weekday_taken_in_market_zone(self):
        # Friday 22:00 UTC is already Saturday in IST
        now = datetime(2024, 1, 5, 22, 0, tzinfo=timezone.utc)
        assert to_market_time(now).weekday() == 5
        assert is_intraday_active(now) is False

    def test_naive_timestamp_unchanged(self):
        now = datetime(2024, 1, 2, 10, 0)
        assert to_market_time(now) == now


class TestMarketModeAndRefresh:
    """Mode selection and polling cadence."""

    def test_mode_during_session(self):
        assert get_market_mode(datetime(2024, 1, 2, 11, 0)) is MarketMode.INTRADAY

    def test_mode_outside_session(self):
        assert get_market_mode(datetime(2024, 1, 2, 18, 0)) is MarketMode.LONG_TERM

    def test_refresh_intervals(self):
        assert get_refresh_interval(datetime(2024, 1, 2, 11, 0)) == 300
        assert get_refresh_interval(datetime(2024, 1, 6, 11, 0)) == 3600


class TestGetMarketTime:
    """Wall-clock helper."""

    def test_uses_market_time_zone(self):
        with patch('equity_signals.utils.time.datetime') as mock_datetime:
            mock_now = datetime(2024, 1, 2, 10, 0, tzinfo=IST)
            mock_datetime.now.return_value = mock_now

            assert get_market_time() == mock_now
            mock_datetime.now.assert_called_once_with(IST)
