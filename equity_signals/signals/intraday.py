"""
Intraday signal evaluation.

BUY requires every BUY rule to hold. SELL rules are checked afterwards and
any single one triggers SELL, overriding a BUY; triggered SELL reasons are
appended after the BUY reasons already collected.
"""

from typing import Optional

from ..config.defaults import IntradayParams
from ..logging.config import get_signal_logger
from ..models.metrics import IndicatorSnapshot
from ..models.signal import Signal, SignalType
from .rules import GT, LT, Rule, evaluate_rules, exit_levels

logger = get_signal_logger(__name__)


def intraday_buy_rules(params: IntradayParams) -> tuple[Rule, ...]:
    """BUY rules in reason order; all must hold."""
    return (
        Rule(
            name="intraday.buy.rsi",
            reason=f"RSI below {params.rsi_buy_below:g}",
            attribute="rsi",
            op=LT,
            threshold=params.rsi_buy_below,
        ),
        Rule(
            name="intraday.buy.vwap",
            reason="Price above VWAP",
            attribute="price",
            op=GT,
            other="vwap",
        ),
        Rule(
            name="intraday.buy.volume",
            reason=f"Volume > {params.volume_multiplier:g}× 5-min average",
            attribute="volume",
            op=GT,
            other="average_volume_5",
            factor=params.volume_multiplier,
        ),
        Rule(
            name="intraday.buy.ema",
            reason="EMA(9) above EMA(21)",
            attribute="ema9",
            op=GT,
            other="ema21",
        ),
    )


def intraday_sell_rules(params: IntradayParams) -> tuple[Rule, ...]:
    """SELL rules in reason order; any one triggers."""
    return (
        Rule(
            name="intraday.sell.rsi",
            reason=f"RSI above {params.rsi_sell_above:g}",
            attribute="rsi",
            op=GT,
            threshold=params.rsi_sell_above,
        ),
        Rule(
            name="intraday.sell.vwap",
            reason="Price below VWAP",
            attribute="price",
            op=LT,
            other="vwap",
        ),
        Rule(
            name="intraday.sell.ema",
            reason="EMA(9) below EMA(21)",
            attribute="ema9",
            op=LT,
            other="ema21",
        ),
    )


def evaluate_intraday(snapshot: IndicatorSnapshot,
                      params: Optional[IntradayParams] = None) -> Signal:
    """
    Classify a snapshot with the intraday rule set.

    Args:
        snapshot: Indicator snapshot built from the intraday and daily series
        params: Rule thresholds, defaults when omitted

    Returns:
        Signal with 0.8% target / 0.4% stop-loss for BUY and SELL by default
    """
    params = params or IntradayParams()
    signal_type = SignalType.HOLD
    reasons: list[str] = []

    buy_rules = intraday_buy_rules(params)
    buy_triggered = evaluate_rules(buy_rules, snapshot, logger)
    if len(buy_triggered) == len(buy_rules):
        signal_type = SignalType.BUY
        reasons.extend(rule.reason for rule in buy_triggered)

    # SELL wins over BUY when both fire; BUY reasons are kept.
    sell_triggered = evaluate_rules(intraday_sell_rules(params), snapshot, logger)
    if sell_triggered:
        signal_type = SignalType.SELL
        reasons.extend(rule.reason for rule in sell_triggered)

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
