"""Long-term (daily trend) signal evaluation"""

from typing import Optional

from ..config.defaults import LongTermParams
from ..logging.config import get_signal_logger
from ..metrics.levels import nearest_resistance, nearest_support
from ..models.metrics import IndicatorSnapshot
from ..models.signal import Signal, SignalType
from .rules import GT, LT, Rule, evaluate_rules, exit_levels

logger = get_signal_logger(__name__)

LONG_TERM_BUY_RULES = (
    Rule(name="long_term.buy.ema", reason="50 EMA above 200 EMA",
         attribute="ema50", op=GT, other="ema200"),
    Rule(name="long_term.buy.macd", reason="MACD bullish",
         attribute="macd_line", op=GT, other="macd_signal"),
)

LONG_TERM_SELL_RULES = (
    Rule(name="long_term.sell.ema", reason="50 EMA below 200 EMA",
         attribute="ema50", op=LT, other="ema200"),
    Rule(name="long_term.sell.macd", reason="MACD bearish",
         attribute="macd_line", op=LT, other="macd_signal"),
)


def ema_gap_pct(snapshot: IndicatorSnapshot) -> float:
    """(EMA50 - EMA200) / EMA200 in percent, 0.0 while EMA200 is zero"""
    if snapshot.ema200 == 0:
        return 0.0
    return (snapshot.ema50 - snapshot.ema200) / snapshot.ema200 * 100


def format_level(level: float, currency_symbol: str) -> str:
    """Level at full precision; whole numbers print without a decimal point"""
    level = float(level)
    if level.is_integer():
        return f"{currency_symbol}{int(level)}"
    return f"{currency_symbol}{level!r}"


def evaluate_long_term(snapshot: IndicatorSnapshot,
                       params: Optional[LongTermParams] = None) -> Signal:
    """
    Classify a snapshot with the long-term trend rule set.

    BUY needs EMA50 above EMA200 and MACD above its signal line, SELL the
    mirror image; anything else is HOLD. Nearest support below and nearest
    resistance above the price are appended as context in every branch.

    Args:
        snapshot: Indicator snapshot built from the intraday and daily series
        params: Rule thresholds, defaults when omitted

    Returns:
        Signal with 2% target / 1% stop-loss for BUY and SELL by default
    """
    params = params or LongTermParams()
    reasons: list[str] = []

    ema_diff = ema_gap_pct(snapshot)
    macd_diff = snapshot.macd_line - snapshot.macd_signal

    if len(evaluate_rules(LONG_TERM_BUY_RULES, snapshot, logger)) == len(LONG_TERM_BUY_RULES):
        signal_type = SignalType.BUY
        reasons.append(f"50 EMA above 200 EMA ({ema_diff:.2f}% difference)")
        reasons.append(f"MACD bullish ({macd_diff:.3f} spread)")
        if ema_diff > params.strong_trend_pct:
            reasons.append("Strong upward trend")
    elif len(evaluate_rules(LONG_TERM_SELL_RULES, snapshot, logger)) == len(LONG_TERM_SELL_RULES):
        signal_type = SignalType.SELL
        reasons.append(f"50 EMA below 200 EMA ({abs(ema_diff):.2f}% difference)")
        reasons.append(f"MACD bearish ({abs(macd_diff):.3f} spread)")
        if ema_diff < -params.strong_trend_pct:
            reasons.append("Strong downward trend")
    else:
        signal_type = SignalType.HOLD
        if abs(ema_diff) < params.consolidation_pct:
            reasons.append("EMAs in consolidation phase")
        if abs(macd_diff) < params.sideways_macd_spread:
            reasons.append("MACD showing sideways movement")
        reasons.append("Neutral trend - await clear signal")

    support = nearest_support(snapshot.support_levels, snapshot.price)
    if support is not None:
        reasons.append(f"Nearest support: {format_level(support, params.currency_symbol)}")

    resistance = nearest_resistance(snapshot.resistance_levels, snapshot.price)
    if resistance is not None:
        reasons.append(f"Nearest resistance: {format_level(resistance, params.currency_symbol)}")

    if signal_type is SignalType.HOLD:
        return Signal(
            signal_type=signal_type,
            price=snapshot.price,
            entry_price=snapshot.price,
            reasons=tuple(reasons),
        )

    target, stop_loss = exit_levels(
        snapshot.price,
        is_buy=signal_type is SignalType.BUY,
        target_pct=params.target_pct,
        stop_loss_pct=params.stop_loss_pct,
    )
    return Signal(
        signal_type=signal_type,
        price=snapshot.price,
        entry_price=snapshot.price,
        target=target,
        stop_loss=stop_loss,
        reasons=tuple(reasons),
    )
