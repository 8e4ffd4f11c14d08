"""
Canonical data models for price/volume series.

Series are ordered chronologically (insertion order) and immutable once
handed to the engine.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Sequence


@dataclass(frozen=True)
class Sample:
    """Raw sample as delivered by the data acquisition collaborator."""
    timestamp: Optional[datetime]  # None when built from bare sequences
    price: Optional[float]     # None or NaN when the feed has a gap
    volume: Optional[float]


@dataclass(frozen=True)
class PriceVolumeSeries:
    """Index-aligned price and volume sequences for one window."""
    prices: Sequence[float] = field(default_factory=tuple)
    volumes: Sequence[float] = field(default_factory=tuple)

    def __post_init__(self):
        """Freeze the sequences so callers cannot mutate them afterwards."""
        object.__setattr__(self, "prices", tuple(self.prices))
        object.__setattr__(self, "volumes", tuple(self.volumes))

    @classmethod
    def empty(cls) -> "PriceVolumeSeries":
        """Series with no samples."""
        return cls()

    def __len__(self) -> int:
        return len(self.prices)

    @property
    def last_price(self) -> Optional[float]:
        """Most recent price, None if the series is empty."""
        return self.prices[-1] if self.prices else None

    @property
    def last_volume(self) -> float:
        """Most recent volume, 0 if the series is empty."""
        return self.volumes[-1] if self.volumes else 0.0
