"""
Error classification tests.

Covers the error hierarchy and how malformed input surfaces to callers.
"""

import pytest

from equity_signals.data.models import PriceVolumeSeries
from equity_signals.errors import (
    ConfigurationError,
    DataQualityError,
    MalformedDataError,
    MetricsCalculationError,
    MissingDataError,
    SystemFailureError,
)
from equity_signals.metrics.snapshot import build_snapshot


class TestErrorClassification:
    """Test error classification system."""

    def test_data_quality_error_hierarchy(self):
        base_error = DataQualityError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        missing_error = MissingDataError("missing data", data_type="series")
        assert isinstance(missing_error, DataQualityError)
        assert missing_error.data_type == "series"

        malformed_error = MalformedDataError("bad sample", series_name="intraday", index=3)
        assert isinstance(malformed_error, DataQualityError)
        assert malformed_error.series_name == "intraday"
        assert malformed_error.index == 3

    def test_system_failure_error_hierarchy(self):
        metrics_error = MetricsCalculationError("calculation failed", metric_name="snapshot")
        assert isinstance(metrics_error, SystemFailureError)
        assert metrics_error.recoverable is False
        assert metrics_error.metric_name == "snapshot"

        config_error = ConfigurationError("bad config", symbol="TCS.NS", errors=["x"])
        assert config_error.recoverable is False
        assert config_error.errors == ["x"]

    def test_context_preserved(self):
        error = MalformedDataError("mismatch", context={"prices": 3, "volumes": 2})
        assert error.context == {"prices": 3, "volumes": 2}


class TestSnapshotErrorHandling:
    """Malformed input is reported, never coerced."""

    def test_mismatch_reports_lengths(self):
        intraday = PriceVolumeSeries(prices=[1.0, 2.0, 3.0], volumes=[1.0, 2.0])
        with pytest.raises(MalformedDataError) as exc_info:
            build_snapshot(intraday, PriceVolumeSeries.empty())
        assert exc_info.value.context == {"prices": 3, "volumes": 2}

    def test_non_numeric_value_rejected(self):
        intraday = PriceVolumeSeries(prices=["100"], volumes=[1.0])
        with pytest.raises(MalformedDataError):
            build_snapshot(intraday, PriceVolumeSeries.empty())
