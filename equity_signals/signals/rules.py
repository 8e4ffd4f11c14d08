"""
Declarative signal rules.

A rule compares one snapshot attribute against either a constant threshold
or another attribute scaled by a factor. Rule sets are ordered tuples, and
evaluation preserves that order so reasons come out deterministically.
"""

import operator
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from structlog.types import FilteringBoundLogger

from ..logging.config import log_rule_decision
from ..models.metrics import IndicatorSnapshot

Comparator = Callable[[float, float], bool]

GT: Comparator = operator.gt
LT: Comparator = operator.lt


@dataclass(frozen=True)
class Rule:
    """Single (predicate, reason) pair evaluated against a snapshot."""
    name: str
    reason: str
    attribute: str
    op: Comparator
    threshold: Optional[float] = None
    other: Optional[str] = None
    factor: float = 1.0

    def __post_init__(self):
        if (self.threshold is None) == (self.other is None):
            raise ValueError(f"Rule {self.name!r} needs exactly one of threshold or other")

    def reference(self, snapshot: IndicatorSnapshot) -> float:
        """Value the attribute is compared against."""
        if self.other is not None:
            return getattr(snapshot, self.other) * self.factor
        return self.threshold

    def holds(self, snapshot: IndicatorSnapshot) -> bool:
        return bool(self.op(getattr(snapshot, self.attribute), self.reference(snapshot)))


def evaluate_rules(
    rules: Sequence[Rule],
    snapshot: IndicatorSnapshot,
    logger: Optional[FilteringBoundLogger] = None,
) -> list[Rule]:
    """
    Evaluate rules in order and return the ones that hold.

    Args:
        rules: Ordered rule set
        snapshot: Snapshot to evaluate
        logger: Optional logger receiving one decision entry per rule

    Returns:
        Triggered rules, in rule-set order
    """
    triggered = []
    for rule in rules:
        passed = rule.holds(snapshot)
        if logger is not None:
            log_rule_decision(
                logger,
                rule_name=rule.name,
                passed=passed,
                symbol=snapshot.symbol,
                reason=rule.reason,
                context={
                    "value": getattr(snapshot, rule.attribute),
                    "reference": rule.reference(snapshot),
                },
            )
        if passed:
            triggered.append(rule)
    return triggered


def exit_levels(price: float, is_buy: bool, target_pct: float,
                stop_loss_pct: float) -> tuple[float, float]:
    """
    Target and stop-loss around the entry price, rounded to 2 decimals.

    BUY targets above and stops below the entry; SELL mirrors that.
    """
    if is_buy:
        target = price * (1 + target_pct)
        stop_loss = price * (1 - stop_loss_pct)
    else:
        target = price * (1 - target_pct)
        stop_loss = price * (1 + stop_loss_pct)
    return round(target, 2), round(stop_loss, 2)
