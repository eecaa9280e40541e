"""
Input validation and shared parameter types for indicator calls.
"""

from .models import MAType
from .validators import (
    MAX_PERIOD,
    Series,
    shortest_length,
    validate_ma_type,
    validate_period,
    validate_periods,
    validate_series,
)

__all__ = [
    "MAX_PERIOD",
    "MAType",
    "Series",
    "shortest_length",
    "validate_ma_type",
    "validate_period",
    "validate_periods",
    "validate_series",
]
