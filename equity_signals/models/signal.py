"""Trading signal value object"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

import orjson


class SignalType(str, Enum):
    """Discrete trading recommendation"""
    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"


@dataclass(frozen=True)
class Signal:
    """
    Trading recommendation derived from one indicator snapshot.

    target and stop_loss are set together for BUY/SELL and both absent for
    HOLD. reasons keep evaluation order.
    """
    signal_type: SignalType
    price: float
    entry_price: float
    target: Optional[float] = None
    stop_loss: Optional[float] = None
    reasons: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "signal_type", SignalType(self.signal_type))
        object.__setattr__(self, "reasons", tuple(self.reasons))

        if (self.target is None) != (self.stop_loss is None):
            raise ValueError("target and stop_loss must be set together")

        if self.signal_type is SignalType.HOLD and self.target is not None:
            raise ValueError("HOLD signals carry no target or stop_loss")

        if self.signal_type is not SignalType.HOLD and self.target is None:
            raise ValueError(f"{self.signal_type.value} signals require target and stop_loss")

    @property
    def is_actionable(self) -> bool:
        return self.signal_type is not SignalType.HOLD

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the presentation layer; absent exits are omitted."""
        data: dict[str, Any] = {
            "signal_type": self.signal_type.value,
            "price": self.price,
            "entry_price": self.entry_price,
            "reasons": list(self.reasons),
        }
        if self.is_actionable:
            data["target"] = self.target
            data["stop_loss"] = self.stop_loss
        return data

    def to_json(self) -> str:
        return orjson.dumps(self.to_dict()).decode("utf-8")
