"""
Main signal engine coordinator.

Orchestrates one evaluation cycle for a symbol: configuration lookup,
indicator snapshot construction, rule set selection and signal evaluation.
The engine keeps no state between cycles.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import structlog

from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader, config_from_dict
from .config.validation import ConfigValidator
from .data.models import PriceVolumeSeries
from .errors import ConfigurationError, DataQualityError, MissingDataError
from .logging.config import get_signal_logger, log_signal
from .metrics.snapshot import SnapshotBuilder
from .models.metrics import IndicatorSnapshot
from .models.signal import Signal
from .signals.selection import evaluate_signal, is_new_signal
from .utils.time import MarketMode, get_market_time, get_refresh_interval

logger = structlog.get_logger(__name__)
signal_logger = get_signal_logger(__name__)


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of one evaluation cycle"""
    symbol: str
    mode: MarketMode
    snapshot: IndicatorSnapshot
    signal: Signal
    evaluated_at: datetime
    refresh_seconds: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "symbol": self.symbol,
            "mode": self.mode.value,
            "snapshot": self.snapshot.to_dict(),
            "signal": self.signal.to_dict(),
            "evaluated_at": self.evaluated_at.isoformat(),
            "refresh_seconds": self.refresh_seconds,
        }


class SignalEngine:
    """
    Coordinator for indicator computation and signal evaluation.

    Pipeline per call:
    Cleaned Series → IndicatorSnapshot → Market Clock → Rule Set → Signal
    """

    def __init__(self, config_dir: Optional[Path] = None,
                 overrides: Optional[dict[str, Any]] = None) -> None:
        """
        Initialize the signal engine.

        Args:
            config_dir: Directory holding symbols.yaml
            overrides: Call-time parameter overrides applied to every symbol

        Raises:
            ConfigurationError: If the overrides fail validation
        """
        self.logger = logger
        self.config_loader = ConfigLoader.create(config_dir)
        self.overrides = overrides or {}

        validation_errors = ConfigValidator.validate_config(self.overrides)
        if validation_errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in validation_errors]
            self.logger.error("Engine override validation failed", errors=error_msgs)
            raise ConfigurationError("Invalid engine overrides", errors=error_msgs)

        self.logger.info("Signal engine initialized", config_dir=str(self.config_loader.config_dir))

    def get_config(self, symbol: str) -> DefaultConfig:
        """
        Resolve the configuration that applies to a symbol.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        merged = self.config_loader.merge_config(symbol, self.overrides)
        validation_errors = ConfigValidator.validate_config(merged)
        if validation_errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in validation_errors]
            self.logger.error("Symbol configuration invalid", symbol=symbol, errors=error_msgs)
            raise ConfigurationError(
                f"Invalid configuration for {symbol}", symbol=symbol, errors=error_msgs
            )
        return config_from_dict(merged)

    def build_snapshot(self, symbol: str, intraday: PriceVolumeSeries,
                       long_term: PriceVolumeSeries, price: Optional[float] = None,
                       previous_close: Optional[float] = None) -> IndicatorSnapshot:
        """Build the indicator snapshot for a symbol with its configured periods."""
        config = self.get_config(symbol)
        return SnapshotBuilder(config.indicators).build(
            intraday, long_term, symbol=symbol, price=price, previous_close=previous_close
        )

    def evaluate(self, snapshot: IndicatorSnapshot,
                 now: Optional[datetime] = None) -> tuple[MarketMode, Signal]:
        """Evaluate a snapshot with the rule set that applies at `now`."""
        config = self.get_config(snapshot.symbol)
        if now is None:
            now = get_market_time(config.market_clock)

        mode, signal = evaluate_signal(snapshot, now, config)
        log_signal(signal_logger, snapshot.symbol, mode.value, signal)
        return mode, signal

    def run(
        self,
        symbol: str,
        intraday: Optional[PriceVolumeSeries],
        long_term: Optional[PriceVolumeSeries],
        now: Optional[datetime] = None,
        price: Optional[float] = None,
        previous_close: Optional[float] = None,
    ) -> EvaluationResult:
        """
        Run one full evaluation cycle.

        Args:
            symbol: Symbol being evaluated
            intraday: Cleaned intraday series
            long_term: Cleaned daily series
            now: Evaluation time; wall clock in the market time zone if omitted
            price: Current market price, defaults to the latest intraday price
            previous_close: Close of the prior session

        Returns:
            EvaluationResult with snapshot, signal and suggested refresh interval

        Raises:
            MissingDataError: If neither series was supplied
            MalformedDataError: If a series breaks the cleaned-series contract
        """
        if intraday is None and long_term is None:
            raise MissingDataError(f"No series supplied for {symbol}", data_type="series")

        config = self.get_config(symbol)
        if now is None:
            now = get_market_time(config.market_clock)

        try:
            snapshot = SnapshotBuilder(config.indicators).build(
                intraday or PriceVolumeSeries.empty(),
                long_term or PriceVolumeSeries.empty(),
                symbol=symbol,
                price=price,
                previous_close=previous_close,
            )
        except DataQualityError as e:
            self.logger.warning(
                "Data quality issue during snapshot build",
                symbol=symbol,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        mode, signal = evaluate_signal(snapshot, now, config)
        log_signal(signal_logger, symbol, mode.value, signal)

        return EvaluationResult(
            symbol=symbol,
            mode=mode,
            snapshot=snapshot,
            signal=signal,
            evaluated_at=now,
            refresh_seconds=get_refresh_interval(now, config.market_clock),
        )

    @staticmethod
    def should_alert(signal: Signal, last_signal: Optional[Signal]) -> bool:
        """Whether a signal differs enough from the last alerted one to alert again."""
        return is_new_signal(signal, last_signal)
