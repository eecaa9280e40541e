"""
Statistical functions: dispersion, correlation and linear regression.
"""

import numpy as np

from ..data import Series, shortest_length, validate_period, validate_series
from ..native import check_available


def avgdev(prices: Series, period: int = 14) -> np.ndarray:
    """Average Deviation."""
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("AVGDEV", prices, timeperiod=period)


def beta(prices1: Series, prices2: Series, period: int = 5) -> np.ndarray:
    """
    Beta of ``prices1`` against ``prices2``.

    Args:
        prices1: Asset prices
        prices2: Benchmark prices, aligned with ``prices1``
        period: Time period (default 5)

    Returns:
        Beta values
    """
    library = check_available()
    prices1 = validate_series(prices1, "prices1")
    prices2 = validate_series(prices2, "prices2")
    validate_period(period, shortest_length(prices1, prices2))

    return library.call("BETA", prices1, prices2, timeperiod=period)


def correl(prices1: Series, prices2: Series, period: int = 30) -> np.ndarray:
    """Pearson's Correlation Coefficient (r)."""
    library = check_available()
    prices1 = validate_series(prices1, "prices1")
    prices2 = validate_series(prices2, "prices2")
    validate_period(period, shortest_length(prices1, prices2))

    return library.call("CORREL", prices1, prices2, timeperiod=period)


def linearreg(prices: Series, period: int = 14) -> np.ndarray:
    """Linear Regression."""
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("LINEARREG", prices, timeperiod=period)


def linearreg_angle(prices: Series, period: int = 14) -> np.ndarray:
    """Linear Regression Angle, in degrees."""
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("LINEARREG_ANGLE", prices, timeperiod=period)


def linearreg_intercept(prices: Series, period: int = 14) -> np.ndarray:
    """Linear Regression Intercept."""
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("LINEARREG_INTERCEPT", prices, timeperiod=period)


def linearreg_slope(prices: Series, period: int = 14) -> np.ndarray:
    """Linear Regression Slope."""
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("LINEARREG_SLOPE", prices, timeperiod=period)


def stddev(prices: Series, period: int = 5, nbdev: float = 1.0) -> np.ndarray:
    """Standard Deviation, scaled by ``nbdev``."""
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("STDDEV", prices, timeperiod=period, nbdev=nbdev)


def tsf(prices: Series, period: int = 14) -> np.ndarray:
    """Time Series Forecast."""
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("TSF", prices, timeperiod=period)


def var(prices: Series, period: int = 5, nbdev: float = 1.0) -> np.ndarray:
    """Variance."""
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("VAR", prices, timeperiod=period, nbdev=nbdev)
