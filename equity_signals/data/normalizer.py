"""
Cleaning of raw price/volume samples.

The indicator engine requires every price and volume it receives to be a
finite number. Feeds deliver gaps as None (or NaN), so samples are filtered
pairwise here, keeping prices and volumes aligned index for index.
"""

import math
from typing import Any, Iterable, Sequence

from ..errors import MalformedDataError
from ..logging.config import get_logger
from .models import PriceVolumeSeries, Sample

logger = get_logger(__name__)


def is_valid_number(value: Any) -> bool:
    """True for finite ints and floats; bools and None are not numbers here."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def clean_samples(samples: Iterable[Sample]) -> PriceVolumeSeries:
    """
    Build a clean series from raw samples.

    Samples with a missing or non-finite price or volume, or a negative
    volume, are dropped as a whole so the two sequences stay aligned.

    Args:
        samples: Raw samples in chronological order

    Returns:
        PriceVolumeSeries containing only valid samples
    """
    prices: list[float] = []
    volumes: list[float] = []
    dropped = 0

    for sample in samples:
        if (is_valid_number(sample.price) and is_valid_number(sample.volume)
                and sample.volume >= 0):
            prices.append(float(sample.price))
            volumes.append(float(sample.volume))
        else:
            dropped += 1

    if dropped:
        logger.debug("Dropped invalid samples", dropped=dropped, kept=len(prices))

    return PriceVolumeSeries(prices=prices, volumes=volumes)


def clean_series(prices: Sequence[Any], volumes: Sequence[Any]) -> PriceVolumeSeries:
    """
    Build a clean series from parallel price and volume sequences.

    Args:
        prices: Raw prices, possibly containing None/NaN gaps
        volumes: Raw volumes, same length as prices

    Returns:
        PriceVolumeSeries containing only valid samples

    Raises:
        MalformedDataError: If the sequences differ in length
    """
    if len(prices) != len(volumes):
        raise MalformedDataError(
            f"Price/volume length mismatch: {len(prices)} prices, {len(volumes)} volumes",
            context={"prices": len(prices), "volumes": len(volumes)},
        )

    samples = (
        Sample(timestamp=None, price=price, volume=volume)
        for price, volume in zip(prices, volumes)
    )
    return clean_samples(samples)
