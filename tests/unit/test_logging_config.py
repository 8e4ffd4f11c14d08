"""Unit tests for logging helpers."""

from unittest.mock import Mock

from equity_signals.logging.config import (
    configure_logging,
    get_signal_logger,
    log_rule_decision,
    log_signal,
)
from equity_signals.models.signal import Signal, SignalType


class TestLoggingHelpers:
    """Structured decision and signal logging."""

    def test_configure_logging_json(self):
        configure_logging(level="DEBUG", format_json=True)
        logger = get_signal_logger(__name__)
        logger.info("Logging configured", check=True)

    def test_rule_decision_fields(self):
        logger = Mock()
        bound = logger.bind.return_value

        log_rule_decision(logger, "intraday.sell.vwap", False, "TCS.NS", "Price below VWAP")

        logger.bind.assert_called_once_with(
            rule_name="intraday.sell.vwap",
            rule_result="FAIL",
            symbol="TCS.NS",
            reason="Price below VWAP",
        )
        bound.debug.assert_called_once_with("Rule evaluated")

    def test_signal_fields(self):
        logger = Mock()
        signal = Signal(signal_type=SignalType.BUY, price=100.0, entry_price=100.0,
                        target=102.0, stop_loss=99.0, reasons=("a",))

        log_signal(logger, "TCS.NS", "long_term", signal)

        kwargs = logger.info.call_args.kwargs
        assert kwargs["signal_type"] == "BUY"
        assert kwargs["mode"] == "long_term"
        assert kwargs["reason_count"] == 1
