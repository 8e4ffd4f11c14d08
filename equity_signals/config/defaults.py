"""Default configuration parameters for indicator computation and signal rules."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IndicatorParams:
    """Indicator periods used by the snapshot builder."""
    rsi_period: int = 14
    ema_fast_period: int = 9                  # Intraday short EMA
    ema_slow_period: int = 21                 # Intraday long EMA
    ema_trend_period: int = 50                # Daily medium-term EMA
    ema_long_period: int = 200                # Daily long-term EMA
    macd_fast_period: int = 12
    macd_slow_period: int = 26
    macd_signal_period: int = 9
    volume_window: int = 5                    # Samples in the average-volume window


@dataclass(frozen=True)
class IntradayParams:
    """Thresholds of the intraday rule set."""
    rsi_buy_below: float = 35.0
    rsi_sell_above: float = 65.0
    volume_multiplier: float = 1.8            # Volume spike vs 5-sample average
    target_pct: float = 0.008                 # 0.8% target
    stop_loss_pct: float = 0.004              # 0.4% stop-loss


@dataclass(frozen=True)
class LongTermParams:
    """Thresholds of the long-term rule set."""
    strong_trend_pct: float = 5.0             # EMA50/EMA200 gap for a strong trend
    consolidation_pct: float = 1.0            # EMA gap below which EMAs consolidate
    sideways_macd_spread: float = 0.1         # MACD spread below which MACD is flat
    target_pct: float = 0.02                  # 2% target
    stop_loss_pct: float = 0.01               # 1% stop-loss
    currency_symbol: str = "₹"


@dataclass(frozen=True)
class MarketClockParams:
    """Trading session parameters for intraday mode gating."""
    timezone: str = "Asia/Kolkata"
    session_open: int = 915                   # hour * 100 + minute
    session_close: int = 1530                 # inclusive
    intraday_refresh_seconds: int = 300
    long_term_refresh_seconds: int = 3600


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    indicators: IndicatorParams
    intraday: IntradayParams
    long_term: LongTermParams
    market_clock: MarketClockParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        indicators=IndicatorParams(),
        intraday=IntradayParams(),
        long_term=LongTermParams(),
        market_clock=MarketClockParams(),
    )
