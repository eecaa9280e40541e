"""
Overlap studies: moving averages, bands and trailing stops.

These indicators are plotted on the same scale as price. Each function
validates its inputs, forwards to TA-Lib and returns the native arrays
unchanged; leading values inside the lookback window are NaN.
"""

import numpy as np

from ..data import (
    MAX_PERIOD,
    MAType,
    Series,
    shortest_length,
    validate_ma_type,
    validate_period,
    validate_series,
)
from ..native import check_available
from ..native import outputs


def ma(prices: Series, period: int = 30, ma_type: int = MAType.SMA) -> np.ndarray:
    """
    Moving Average of a selectable kind.

    Args:
        prices: Price series
        period: Time period (default 30)
        ma_type: One of MAType (default SMA)

    Returns:
        Moving average values
    """
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))
    ma_type = validate_ma_type(ma_type)

    return library.call("MA", prices, timeperiod=period, matype=ma_type)


def sma(prices: Series, period: int = 30) -> np.ndarray:
    """
    Simple Moving Average.

    Args:
        prices: Price series
        period: Time period (default 30)

    Returns:
        SMA values
    """
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("SMA", prices, timeperiod=period)


def ema(prices: Series, period: int = 30) -> np.ndarray:
    """Exponential Moving Average."""
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("EMA", prices, timeperiod=period)


def wma(prices: Series, period: int = 30) -> np.ndarray:
    """Weighted Moving Average."""
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("WMA", prices, timeperiod=period)


def dema(prices: Series, period: int = 30) -> np.ndarray:
    """Double Exponential Moving Average."""
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("DEMA", prices, timeperiod=period)


def tema(prices: Series, period: int = 30) -> np.ndarray:
    """Triple Exponential Moving Average."""
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("TEMA", prices, timeperiod=period)


def trima(prices: Series, period: int = 30) -> np.ndarray:
    """Triangular Moving Average."""
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("TRIMA", prices, timeperiod=period)


def kama(prices: Series, period: int = 30) -> np.ndarray:
    """Kaufman Adaptive Moving Average."""
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("KAMA", prices, timeperiod=period)


def t3(prices: Series, period: int = 5, vfactor: float = 0.7) -> np.ndarray:
    """
    Triple Exponential Moving Average (T3).

    Args:
        prices: Price series
        period: Time period (default 5)
        vfactor: Volume factor between 0 and 1 (default 0.7)

    Returns:
        T3 values
    """
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("T3", prices, timeperiod=period, vfactor=vfactor)


def bbands(
    prices: Series,
    period: int = 5,
    nbdev_up: float = 2.0,
    nbdev_down: float = 2.0,
    ma_type: int = MAType.SMA
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Bollinger Bands.

    Args:
        prices: Price series
        period: Time period (default 5)
        nbdev_up: Deviations above the middle band (default 2.0)
        nbdev_down: Deviations below the middle band (default 2.0)
        ma_type: Middle band moving average kind (default SMA)

    Returns:
        (upper_band, middle_band, lower_band)
    """
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))
    ma_type = validate_ma_type(ma_type)

    return outputs.BBANDS.call(
        library,
        prices,
        timeperiod=period,
        nbdevup=nbdev_up,
        nbdevdn=nbdev_down,
        matype=ma_type,
    )


def accbands(
    high: Series,
    low: Series,
    close: Series,
    period: int = 20
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Acceleration Bands.

    Returns:
        (upper_band, middle_band, lower_band)
    """
    library = check_available()
    high = validate_series(high, "high")
    low = validate_series(low, "low")
    close = validate_series(close, "close")
    validate_period(period, shortest_length(high, low, close))

    return outputs.ACCBANDS.call(library, high, low, close, timeperiod=period)


def ht_trendline(prices: Series) -> np.ndarray:
    """Hilbert Transform - Instantaneous Trendline."""
    library = check_available()
    prices = validate_series(prices)

    return library.call("HT_TRENDLINE", prices)


def mama(
    prices: Series,
    fast_limit: float = 0.5,
    slow_limit: float = 0.05
) -> tuple[np.ndarray, np.ndarray]:
    """
    MESA Adaptive Moving Average.

    Args:
        prices: Price series
        fast_limit: Upper limit of the adaptive factor (default 0.5)
        slow_limit: Lower limit of the adaptive factor (default 0.05)

    Returns:
        (mama, fama)
    """
    library = check_available()
    prices = validate_series(prices)

    return outputs.MAMA.call(library, prices, fastlimit=fast_limit, slowlimit=slow_limit)


def mavp(
    prices: Series,
    periods: Series,
    min_period: int = 2,
    max_period: int = 30,
    ma_type: int = MAType.SMA
) -> np.ndarray:
    """
    Moving Average with Variable Period.

    Args:
        prices: Price series
        periods: Period to use at each position, aligned with ``prices``
        min_period: Lower clamp applied to ``periods`` (default 2)
        max_period: Upper clamp applied to ``periods`` (default 30)
        ma_type: Moving average kind (default SMA)

    Returns:
        MAVP values
    """
    library = check_available()
    prices = validate_series(prices)
    periods = validate_series(periods, "periods")
    # Clamps on the per-bar periods rather than lookback windows
    validate_period(max_period, MAX_PERIOD, "max_period")
    validate_period(min_period, max_period, "min_period")
    ma_type = validate_ma_type(ma_type)

    return library.call(
        "MAVP",
        prices,
        periods,
        minperiod=min_period,
        maxperiod=max_period,
        matype=ma_type,
    )


def midpoint(prices: Series, period: int = 14) -> np.ndarray:
    """MidPoint over period."""
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("MIDPOINT", prices, timeperiod=period)


def midprice(high: Series, low: Series, period: int = 14) -> np.ndarray:
    """Midpoint Price over period."""
    library = check_available()
    high = validate_series(high, "high")
    low = validate_series(low, "low")
    validate_period(period, shortest_length(high, low))

    return library.call("MIDPRICE", high, low, timeperiod=period)


def sar(
    high: Series,
    low: Series,
    acceleration: float = 0.02,
    maximum: float = 0.2
) -> np.ndarray:
    """
    Parabolic SAR.

    Args:
        high: High prices
        low: Low prices
        acceleration: Acceleration factor step (default 0.02)
        maximum: Acceleration factor ceiling (default 0.2)

    Returns:
        SAR values
    """
    library = check_available()
    high = validate_series(high, "high")
    low = validate_series(low, "low")

    return library.call("SAR", high, low, acceleration=acceleration, maximum=maximum)


def sarext(
    high: Series,
    low: Series,
    start_value: float = 0.0,
    offset_on_reverse: float = 0.0,
    acceleration_init: float = 0.02,
    acceleration_step: float = 0.02,
    acceleration_max: float = 0.2
) -> np.ndarray:
    """
    Parabolic SAR - Extended.

    The acceleration settings apply to both long and short positions.

    Returns:
        SAREXT values (negative while short)
    """
    library = check_available()
    high = validate_series(high, "high")
    low = validate_series(low, "low")

    return library.call(
        "SAREXT",
        high,
        low,
        startvalue=start_value,
        offsetonreverse=offset_on_reverse,
        accelerationinitlong=acceleration_init,
        accelerationlong=acceleration_step,
        accelerationmaxlong=acceleration_max,
        accelerationinitshort=acceleration_init,
        accelerationshort=acceleration_step,
        accelerationmaxshort=acceleration_max,
    )
