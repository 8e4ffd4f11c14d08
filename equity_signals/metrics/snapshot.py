"""Indicator snapshot builder coordinating all indicator calculations"""

from typing import Optional

from ..config.defaults import IndicatorParams
from ..data.models import PriceVolumeSeries
from ..data.normalizer import is_valid_number
from ..errors import MalformedDataError, MetricsCalculationError
from ..logging.config import get_logger
from ..models.metrics import IndicatorSnapshot
from .levels import find_resistance_levels, find_support_levels
from .momentum import calculate_rsi
from .trend import calculate_ema, calculate_macd
from .volume import calculate_average_volume, calculate_vwap

logger = get_logger(__name__)


def validate_series(series: PriceVolumeSeries, name: str) -> None:
    """
    Check the cleaned-series precondition of the snapshot builder.

    Raises:
        MalformedDataError: On mismatched lengths, a non-finite value or a
            negative volume
    """
    if len(series.prices) != len(series.volumes):
        raise MalformedDataError(
            f"{name} series length mismatch: {len(series.prices)} prices, "
            f"{len(series.volumes)} volumes",
            series_name=name,
            context={"prices": len(series.prices), "volumes": len(series.volumes)},
        )

    for label, values in (("price", series.prices), ("volume", series.volumes)):
        for index, value in enumerate(values):
            if not is_valid_number(value):
                raise MalformedDataError(
                    f"{name} series has invalid {label} {value!r} at index {index}; "
                    "clean the series before building a snapshot",
                    series_name=name,
                    index=index,
                )

    for index, volume in enumerate(series.volumes):
        if volume < 0:
            raise MalformedDataError(
                f"{name} series has negative volume {volume!r} at index {index}",
                series_name=name,
                index=index,
            )


def validate_price_inputs(price: Optional[float], previous_close: Optional[float]) -> None:
    """
    Check caller-supplied prices; None means "not supplied" for both.

    Raises:
        MalformedDataError: If a supplied price is not a finite number
    """
    for name, value in (("price", price), ("previous_close", previous_close)):
        if value is not None and not is_valid_number(value):
            raise MalformedDataError(
                f"{name} must be a finite number, got {value!r}",
                series_name=name,
            )


class SnapshotBuilder:
    """
    Builds IndicatorSnapshots from an intraday and a daily series.

    Intraday series feed RSI, VWAP, EMA9/21 and volume statistics; the daily
    series feeds EMA50/200, MACD and support/resistance. Short series never
    raise: each indicator falls back to its documented neutral value.
    """

    def __init__(self, params: Optional[IndicatorParams] = None):
        self.params = params or IndicatorParams()

    def build(self, intraday: PriceVolumeSeries, long_term: PriceVolumeSeries,
              symbol: str = "", price: Optional[float] = None,
              previous_close: Optional[float] = None) -> IndicatorSnapshot:
        """
        Build a snapshot from two cleaned series

        Args:
            intraday: Cleaned intraday series
            long_term: Cleaned daily series
            symbol: Symbol the series belong to
            price: Current market price; defaults to the latest intraday
                price, then the latest daily price, then 0.0
            previous_close: Close of the prior session, if any

        Returns:
            IndicatorSnapshot

        Raises:
            MalformedDataError: If a series breaks the cleaned-series contract
                or a supplied price is not finite
            MetricsCalculationError: If an indicator fails unexpectedly
        """
        validate_series(intraday, "intraday")
        validate_series(long_term, "long_term")
        validate_price_inputs(price, previous_close)

        if price is None:
            price = intraday.last_price
        if price is None:
            price = long_term.last_price
        if price is None:
            price = 0.0

        params = self.params
        try:
            vwap = calculate_vwap(intraday.prices, intraday.volumes)
            macd = calculate_macd(
                long_term.prices,
                fast_period=params.macd_fast_period,
                slow_period=params.macd_slow_period,
                signal_period=params.macd_signal_period,
            )

            snapshot = IndicatorSnapshot(
                symbol=symbol,
                price=price,
                previous_close=previous_close,
                volume=intraday.last_volume,
                average_volume_5=calculate_average_volume(intraday.volumes, params.volume_window),
                rsi=calculate_rsi(intraday.prices, params.rsi_period),
                # Zero total volume leaves VWAP undefined; pinning it to price
                # keeps both VWAP rules quiet.
                vwap=price if vwap is None else vwap,
                ema9=calculate_ema(intraday.prices, params.ema_fast_period),
                ema21=calculate_ema(intraday.prices, params.ema_slow_period),
                ema50=calculate_ema(long_term.prices, params.ema_trend_period),
                ema200=calculate_ema(long_term.prices, params.ema_long_period),
                macd_line=macd.macd_line,
                macd_signal=macd.signal_line,
                support_levels=find_support_levels(long_term.prices),
                resistance_levels=find_resistance_levels(long_term.prices),
            )
        except (ArithmeticError, TypeError, ValueError) as e:
            raise MetricsCalculationError(
                f"Indicator calculation failed: {e}",
                metric_name="snapshot",
                calculation_input={
                    "symbol": symbol,
                    "intraday_count": len(intraday),
                    "long_term_count": len(long_term),
                },
            ) from e

        logger.debug(
            "Indicator snapshot built",
            symbol=symbol,
            intraday_count=len(intraday),
            long_term_count=len(long_term),
            rsi=snapshot.rsi,
            vwap_defined=vwap is not None,
        )
        return snapshot


def build_snapshot(intraday: PriceVolumeSeries, long_term: PriceVolumeSeries,
                   symbol: str = "", price: Optional[float] = None,
                   previous_close: Optional[float] = None,
                   params: Optional[IndicatorParams] = None) -> IndicatorSnapshot:
    """Build an IndicatorSnapshot with default (or given) indicator periods."""
    return SnapshotBuilder(params).build(
        intraday, long_term, symbol=symbol, price=price, previous_close=previous_close
    )
