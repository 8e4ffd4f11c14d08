"""
Error classification for indicator computation and signal evaluation.

Data quality errors describe inputs the caller handed over in a bad shape;
system failures describe problems inside the engine or its configuration.
"""

from .data_quality import (
    DataQualityError,
    MissingDataError,
    MalformedDataError,
)
from .system_failures import (
    SystemFailureError,
    MetricsCalculationError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "MetricsCalculationError",
    "ConfigurationError",
]
