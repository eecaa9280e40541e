"""
Volume indicators.
"""

import numpy as np

from ..data import Series, shortest_length, validate_periods, validate_series
from ..native import check_available


def ad(high: Series, low: Series, close: Series, volume: Series) -> np.ndarray:
    """Chaikin A/D Line."""
    library = check_available()
    high = validate_series(high, "high")
    low = validate_series(low, "low")
    close = validate_series(close, "close")
    volume = validate_series(volume, "volume")

    return library.call("AD", high, low, close, volume)


def adosc(
    high: Series,
    low: Series,
    close: Series,
    volume: Series,
    fast_period: int = 3,
    slow_period: int = 10
) -> np.ndarray:
    """
    Chaikin A/D Oscillator.

    Args:
        high: High prices
        low: Low prices
        close: Close prices
        volume: Volume values
        fast_period: Fast EMA period of the A/D line (default 3)
        slow_period: Slow EMA period of the A/D line (default 10)

    Returns:
        ADOSC values
    """
    library = check_available()
    high = validate_series(high, "high")
    low = validate_series(low, "low")
    close = validate_series(close, "close")
    volume = validate_series(volume, "volume")
    validate_periods(
        shortest_length(high, low, close, volume),
        fast_period=fast_period,
        slow_period=slow_period,
    )

    return library.call(
        "ADOSC", high, low, close, volume, fastperiod=fast_period, slowperiod=slow_period
    )


def obv(close: Series, volume: Series) -> np.ndarray:
    """On Balance Volume."""
    library = check_available()
    close = validate_series(close, "close")
    volume = validate_series(volume, "volume")

    return library.call("OBV", close, volume)
