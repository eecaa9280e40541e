"""
Momentum indicators: oscillators, directional movement and rates of change.
"""

import numpy as np

from ..data import (
    MAType,
    Series,
    shortest_length,
    validate_ma_type,
    validate_period,
    validate_periods,
    validate_series,
)
from ..native import check_available
from ..native import outputs


def _hlc(high: Series, low: Series, close: Series) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    return (
        validate_series(high, "high"),
        validate_series(low, "low"),
        validate_series(close, "close"),
    )


def adx(high: Series, low: Series, close: Series, period: int = 14) -> np.ndarray:
    """Average Directional Movement Index."""
    library = check_available()
    high, low, close = _hlc(high, low, close)
    validate_period(period, shortest_length(high, low, close))

    return library.call("ADX", high, low, close, timeperiod=period)


def adxr(high: Series, low: Series, close: Series, period: int = 14) -> np.ndarray:
    """Average Directional Movement Index Rating."""
    library = check_available()
    high, low, close = _hlc(high, low, close)
    validate_period(period, shortest_length(high, low, close))

    return library.call("ADXR", high, low, close, timeperiod=period)


def apo(
    prices: Series,
    fast_period: int = 12,
    slow_period: int = 26,
    ma_type: int = MAType.SMA
) -> np.ndarray:
    """Absolute Price Oscillator."""
    library = check_available()
    prices = validate_series(prices)
    validate_periods(len(prices), fast_period=fast_period, slow_period=slow_period)
    ma_type = validate_ma_type(ma_type)

    return library.call(
        "APO", prices, fastperiod=fast_period, slowperiod=slow_period, matype=ma_type
    )


def aroon(high: Series, low: Series, period: int = 14) -> tuple[np.ndarray, np.ndarray]:
    """
    Aroon.

    Returns:
        (aroon_down, aroon_up)
    """
    library = check_available()
    high = validate_series(high, "high")
    low = validate_series(low, "low")
    validate_period(period, shortest_length(high, low))

    return outputs.AROON.call(library, high, low, timeperiod=period)


def aroonosc(high: Series, low: Series, period: int = 14) -> np.ndarray:
    """Aroon Oscillator."""
    library = check_available()
    high = validate_series(high, "high")
    low = validate_series(low, "low")
    validate_period(period, shortest_length(high, low))

    return library.call("AROONOSC", high, low, timeperiod=period)


def bop(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Balance Of Power."""
    library = check_available()
    open = validate_series(open, "open")
    high, low, close = _hlc(high, low, close)

    return library.call("BOP", open, high, low, close)


def cci(high: Series, low: Series, close: Series, period: int = 14) -> np.ndarray:
    """Commodity Channel Index."""
    library = check_available()
    high, low, close = _hlc(high, low, close)
    validate_period(period, shortest_length(high, low, close))

    return library.call("CCI", high, low, close, timeperiod=period)


def cmo(prices: Series, period: int = 14) -> np.ndarray:
    """Chande Momentum Oscillator."""
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("CMO", prices, timeperiod=period)


def dx(high: Series, low: Series, close: Series, period: int = 14) -> np.ndarray:
    """Directional Movement Index."""
    library = check_available()
    high, low, close = _hlc(high, low, close)
    validate_period(period, shortest_length(high, low, close))

    return library.call("DX", high, low, close, timeperiod=period)


def imi(open_prices: Series, close_prices: Series, period: int = 14) -> np.ndarray:
    """Intraday Momentum Index."""
    library = check_available()
    open_prices = validate_series(open_prices, "open_prices")
    close_prices = validate_series(close_prices, "close_prices")
    validate_period(period, shortest_length(open_prices, close_prices))

    return library.call("IMI", open_prices, close_prices, timeperiod=period)


def macd(
    prices: Series,
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Moving Average Convergence/Divergence.

    Args:
        prices: Price series
        fast_period: Fast EMA period (default 12)
        slow_period: Slow EMA period (default 26)
        signal_period: Signal line period (default 9)

    Returns:
        (macd, signal, histogram)
    """
    library = check_available()
    prices = validate_series(prices)
    validate_periods(
        len(prices),
        fast_period=fast_period,
        slow_period=slow_period,
        signal_period=signal_period,
    )

    return outputs.MACD.call(
        library,
        prices,
        fastperiod=fast_period,
        slowperiod=slow_period,
        signalperiod=signal_period,
    )


def macdext(
    prices: Series,
    fast_period: int = 12,
    fast_ma_type: int = MAType.SMA,
    slow_period: int = 26,
    slow_ma_type: int = MAType.SMA,
    signal_period: int = 9,
    signal_ma_type: int = MAType.SMA
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    MACD with controllable moving average kinds.

    Returns:
        (macd, signal, histogram)
    """
    library = check_available()
    prices = validate_series(prices)
    validate_periods(
        len(prices),
        fast_period=fast_period,
        slow_period=slow_period,
        signal_period=signal_period,
    )

    return outputs.MACDEXT.call(
        library,
        prices,
        fastperiod=fast_period,
        fastmatype=validate_ma_type(fast_ma_type, "fast_ma_type"),
        slowperiod=slow_period,
        slowmatype=validate_ma_type(slow_ma_type, "slow_ma_type"),
        signalperiod=signal_period,
        signalmatype=validate_ma_type(signal_ma_type, "signal_ma_type"),
    )


def macdfix(prices: Series, signal_period: int = 9) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    MACD with the fast and slow periods fixed at 12/26.

    Returns:
        (macd, signal, histogram)
    """
    library = check_available()
    prices = validate_series(prices)
    validate_period(signal_period, len(prices), "signal_period")

    return outputs.MACDFIX.call(library, prices, signalperiod=signal_period)


def mfi(
    high: Series,
    low: Series,
    close: Series,
    volume: Series,
    period: int = 14
) -> np.ndarray:
    """Money Flow Index."""
    library = check_available()
    high, low, close = _hlc(high, low, close)
    volume = validate_series(volume, "volume")
    validate_period(period, shortest_length(high, low, close, volume))

    return library.call("MFI", high, low, close, volume, timeperiod=period)


def minus_di(high: Series, low: Series, close: Series, period: int = 14) -> np.ndarray:
    """Minus Directional Indicator."""
    library = check_available()
    high, low, close = _hlc(high, low, close)
    validate_period(period, shortest_length(high, low, close))

    return library.call("MINUS_DI", high, low, close, timeperiod=period)


def minus_dm(high: Series, low: Series, period: int = 14) -> np.ndarray:
    """Minus Directional Movement."""
    library = check_available()
    high = validate_series(high, "high")
    low = validate_series(low, "low")
    validate_period(period, shortest_length(high, low))

    return library.call("MINUS_DM", high, low, timeperiod=period)


def mom(prices: Series, period: int = 10) -> np.ndarray:
    """Momentum."""
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("MOM", prices, timeperiod=period)


def plus_di(high: Series, low: Series, close: Series, period: int = 14) -> np.ndarray:
    """Plus Directional Indicator."""
    library = check_available()
    high, low, close = _hlc(high, low, close)
    validate_period(period, shortest_length(high, low, close))

    return library.call("PLUS_DI", high, low, close, timeperiod=period)


def plus_dm(high: Series, low: Series, period: int = 14) -> np.ndarray:
    """Plus Directional Movement."""
    library = check_available()
    high = validate_series(high, "high")
    low = validate_series(low, "low")
    validate_period(period, shortest_length(high, low))

    return library.call("PLUS_DM", high, low, timeperiod=period)


def ppo(
    prices: Series,
    fast_period: int = 12,
    slow_period: int = 26,
    ma_type: int = MAType.SMA
) -> np.ndarray:
    """Percentage Price Oscillator."""
    library = check_available()
    prices = validate_series(prices)
    validate_periods(len(prices), fast_period=fast_period, slow_period=slow_period)
    ma_type = validate_ma_type(ma_type)

    return library.call(
        "PPO", prices, fastperiod=fast_period, slowperiod=slow_period, matype=ma_type
    )


def roc(prices: Series, period: int = 10) -> np.ndarray:
    """Rate of change: ((price / prev_price) - 1) * 100."""
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("ROC", prices, timeperiod=period)


def rocp(prices: Series, period: int = 10) -> np.ndarray:
    """Rate of change percentage: (price - prev_price) / prev_price."""
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("ROCP", prices, timeperiod=period)


def rocr(prices: Series, period: int = 10) -> np.ndarray:
    """Rate of change ratio: price / prev_price."""
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("ROCR", prices, timeperiod=period)


def rocr100(prices: Series, period: int = 10) -> np.ndarray:
    """Rate of change ratio, 100 scale: (price / prev_price) * 100."""
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("ROCR100", prices, timeperiod=period)


def rsi(prices: Series, period: int = 14) -> np.ndarray:
    """
    Relative Strength Index.

    Args:
        prices: Price series
        period: Time period (default 14)

    Returns:
        RSI values between 0 and 100
    """
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("RSI", prices, timeperiod=period)


def stoch(
    high: Series,
    low: Series,
    close: Series,
    fastk_period: int = 5,
    slowk_period: int = 3,
    slowd_period: int = 3,
    slowk_ma_type: int = MAType.SMA,
    slowd_ma_type: int = MAType.SMA
) -> tuple[np.ndarray, np.ndarray]:
    """
    Stochastic Oscillator.

    Args:
        high: High prices
        low: Low prices
        close: Close prices
        fastk_period: Fast %K period (default 5)
        slowk_period: Slow %K smoothing period (default 3)
        slowd_period: Slow %D smoothing period (default 3)
        slowk_ma_type: Slow %K moving average kind (default SMA)
        slowd_ma_type: Slow %D moving average kind (default SMA)

    Returns:
        (slow_k, slow_d)
    """
    library = check_available()
    high, low, close = _hlc(high, low, close)
    validate_periods(
        shortest_length(high, low, close),
        fastk_period=fastk_period,
        slowk_period=slowk_period,
        slowd_period=slowd_period,
    )

    return outputs.STOCH.call(
        library,
        high,
        low,
        close,
        fastk_period=fastk_period,
        slowk_period=slowk_period,
        slowk_matype=validate_ma_type(slowk_ma_type, "slowk_ma_type"),
        slowd_period=slowd_period,
        slowd_matype=validate_ma_type(slowd_ma_type, "slowd_ma_type"),
    )


def stochf(
    high: Series,
    low: Series,
    close: Series,
    fastk_period: int = 5,
    fastd_period: int = 3,
    fastd_ma_type: int = MAType.SMA
) -> tuple[np.ndarray, np.ndarray]:
    """
    Stochastic Fast.

    Returns:
        (fast_k, fast_d)
    """
    library = check_available()
    high, low, close = _hlc(high, low, close)
    validate_periods(
        shortest_length(high, low, close),
        fastk_period=fastk_period,
        fastd_period=fastd_period,
    )

    return outputs.STOCHF.call(
        library,
        high,
        low,
        close,
        fastk_period=fastk_period,
        fastd_period=fastd_period,
        fastd_matype=validate_ma_type(fastd_ma_type, "fastd_ma_type"),
    )


def stochrsi(
    prices: Series,
    period: int = 14,
    fastk_period: int = 5,
    fastd_period: int = 3,
    fastd_ma_type: int = MAType.SMA
) -> tuple[np.ndarray, np.ndarray]:
    """
    Stochastic Relative Strength Index.

    Returns:
        (fast_k, fast_d)
    """
    library = check_available()
    prices = validate_series(prices)
    validate_periods(
        len(prices),
        period=period,
        fastk_period=fastk_period,
        fastd_period=fastd_period,
    )

    return outputs.STOCHRSI.call(
        library,
        prices,
        timeperiod=period,
        fastk_period=fastk_period,
        fastd_period=fastd_period,
        fastd_matype=validate_ma_type(fastd_ma_type, "fastd_ma_type"),
    )


def trix(prices: Series, period: int = 30) -> np.ndarray:
    """1-day Rate-Of-Change (ROC) of a Triple Smooth EMA."""
    library = check_available()
    prices = validate_series(prices)
    validate_period(period, len(prices))

    return library.call("TRIX", prices, timeperiod=period)


def ultosc(
    high: Series,
    low: Series,
    close: Series,
    period1: int = 7,
    period2: int = 14,
    period3: int = 28
) -> np.ndarray:
    """Ultimate Oscillator."""
    library = check_available()
    high, low, close = _hlc(high, low, close)
    validate_periods(
        shortest_length(high, low, close),
        period1=period1,
        period2=period2,
        period3=period3,
    )

    return library.call(
        "ULTOSC",
        high,
        low,
        close,
        timeperiod1=period1,
        timeperiod2=period2,
        timeperiod3=period3,
    )


def willr(high: Series, low: Series, close: Series, period: int = 14) -> np.ndarray:
    """Williams' %R."""
    library = check_available()
    high, low, close = _hlc(high, low, close)
    validate_period(period, shortest_length(high, low, close))

    return library.call("WILLR", high, low, close, timeperiod=period)
