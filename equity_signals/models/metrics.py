"""Data models for indicator snapshots"""

from dataclasses import asdict, dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class IndicatorSnapshot:
    """Point-in-time bundle of all indicator values for one evaluation cycle"""
    price: float
    previous_close: Optional[float] = None  # None or 0 means no prior session
    volume: float = 0.0                     # Latest intraday sample
    average_volume_5: float = 0.0           # Mean of the last 5 intraday samples
    rsi: float = 50.0
    vwap: float = 0.0
    ema9: float = 0.0
    ema21: float = 0.0
    ema50: float = 0.0
    ema200: float = 0.0
    macd_line: float = 0.0
    macd_signal: float = 0.0
    support_levels: tuple[float, ...] = field(default_factory=tuple)
    resistance_levels: tuple[float, ...] = field(default_factory=tuple)
    symbol: str = ""

    def __post_init__(self):
        object.__setattr__(self, "support_levels", tuple(self.support_levels))
        object.__setattr__(self, "resistance_levels", tuple(self.resistance_levels))

    @property
    def has_previous_close(self) -> bool:
        return bool(self.previous_close)

    @property
    def change(self) -> Optional[float]:
        """Price change against the previous close"""
        if not self.has_previous_close:
            return None
        return self.price - self.previous_close

    @property
    def change_pct(self) -> Optional[float]:
        """Percentage price change against the previous close"""
        if not self.has_previous_close:
            return None
        return (self.price - self.previous_close) / self.previous_close * 100

    def to_dict(self) -> dict[str, Any]:
        """Plain dictionary for display consumers"""
        data = asdict(self)
        data["support_levels"] = list(self.support_levels)
        data["resistance_levels"] = list(self.resistance_levels)
        data["change"] = self.change
        data["change_pct"] = self.change_pct
        return data
