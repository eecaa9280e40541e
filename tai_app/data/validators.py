"""
Precondition checks run before every call across the native boundary.

Series are accepted as numpy arrays, pandas Series, lists and any other
ordered array-like of numbers, and are handed back as 1-D contiguous
float64 arrays, the only input type the TA-Lib function API accepts.
"""

from collections.abc import Mapping, Sequence, Set
from typing import Union

import numpy as np

from ..errors import InvalidParameterError
from .models import MAType

Series = Union[Sequence[float], np.ndarray]

# Largest period TA-Lib accepts for any time period parameter
MAX_PERIOD = 100_000


def validate_series(values: Series, name: str = "prices") -> np.ndarray:
    """
    Validate one input series and convert it for the native call.

    Args:
        values: Price or volume series
        name: Parameter name used in error messages

    Returns:
        The series as a contiguous float64 array

    Raises:
        InvalidParameterError: If the series is None, not array-like,
            empty, or contains non-numeric values
    """
    label = name.capitalize()

    if values is None:
        raise InvalidParameterError(
            f"{label} array cannot be None", parameter=name, value=values
        )

    if not is_array_like(values):
        raise InvalidParameterError(
            f"{label} must be an array", parameter=name, value=type(values).__name__
        )

    try:
        array = np.ascontiguousarray(values, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(
            f"{label} must contain only numbers: {e}", parameter=name
        ) from e

    if array.ndim != 1:
        raise InvalidParameterError(
            f"{label} must be a one-dimensional array",
            parameter=name, value=array.shape
        )

    if array.size == 0:
        raise InvalidParameterError(
            f"{label} array cannot be empty", parameter=name, value=values
        )

    return array


def is_array_like(values: object) -> bool:
    """
    True for numpy arrays, pandas Series, lists and other sized containers.

    Text, mappings and sets are sized but have no meaningful element order.
    """
    if isinstance(values, (str, bytes, Mapping, Set)):
        return False
    return hasattr(values, "__array__") or hasattr(values, "__len__")


def validate_period(period: int, data_size: int, name: str = "period") -> int:
    """
    Validate a lookback window against the available data.

    Args:
        period: Window length requested by the caller
        data_size: Length of the shortest relevant input series
        name: Parameter name used in error messages

    Returns:
        The period, unchanged

    Raises:
        InvalidParameterError: If the period is not a positive integer
            no larger than ``data_size``
    """
    if isinstance(period, bool) or not isinstance(period, (int, np.integer)):
        raise InvalidParameterError(
            f"Period must be an integer, got {type(period).__name__}",
            parameter=name, value=period
        )

    if period <= 0:
        raise InvalidParameterError(
            "Period must be positive", parameter=name, value=period
        )

    if period > data_size:
        raise InvalidParameterError(
            f"Period ({period}) cannot exceed data size ({data_size})",
            parameter=name, value=period,
            context={"data_size": data_size}
        )

    return int(period)


def validate_periods(data_size: int, **periods: int) -> None:
    """Validate several named periods against the same data size."""
    for name, period in periods.items():
        validate_period(period, data_size, name=name)


def shortest_length(*series: np.ndarray) -> int:
    """Length of the shortest of several validated series."""
    return min(len(values) for values in series)


def validate_ma_type(ma_type: int, name: str = "ma_type") -> int:
    """
    Validate a moving average kind.

    Raises:
        InvalidParameterError: If the value is not one of MAType
    """
    if isinstance(ma_type, bool) or not isinstance(ma_type, (int, np.integer)):
        raise InvalidParameterError(
            f"MA type must be an integer, got {type(ma_type).__name__}",
            parameter=name, value=ma_type
        )

    try:
        return int(MAType(int(ma_type)))
    except ValueError as e:
        raise InvalidParameterError(
            f"MA type must be between {int(min(MAType))} and {int(max(MAType))}, got {ma_type}",
            parameter=name, value=ma_type
        ) from e
