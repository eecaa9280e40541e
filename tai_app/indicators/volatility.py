"""
Volatility indicators.
"""

import numpy as np

from ..data import Series, shortest_length, validate_period, validate_series
from ..native import check_available


def _hlc(high: Series, low: Series, close: Series) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    return (
        validate_series(high, "high"),
        validate_series(low, "low"),
        validate_series(close, "close"),
    )


def atr(high: Series, low: Series, close: Series, period: int = 14) -> np.ndarray:
    """
    Average True Range.

    Args:
        high: High prices
        low: Low prices
        close: Close prices
        period: Time period (default 14)

    Returns:
        ATR values
    """
    library = check_available()
    high, low, close = _hlc(high, low, close)
    validate_period(period, shortest_length(high, low, close))

    return library.call("ATR", high, low, close, timeperiod=period)


def natr(high: Series, low: Series, close: Series, period: int = 14) -> np.ndarray:
    """
    Normalized Average True Range.

    NATR = 100 * ATR / close
    """
    library = check_available()
    high, low, close = _hlc(high, low, close)
    validate_period(period, shortest_length(high, low, close))

    return library.call("NATR", high, low, close, timeperiod=period)


def trange(high: Series, low: Series, close: Series) -> np.ndarray:
    """True Range."""
    library = check_available()
    high, low, close = _hlc(high, low, close)

    return library.call("TRANGE", high, low, close)
