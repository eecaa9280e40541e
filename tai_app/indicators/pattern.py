"""
Pattern recognition: TA-Lib's candlestick patterns.

Every function takes aligned open/high/low/close series and returns an
integer array: +100 (or +200 for confirmed patterns) where a bullish
pattern completes, -100 / -200 for bearish, and 0 elsewhere. A few
patterns accept ``penetration``, the fraction of the prior body the
pattern's candle must reach into.
"""

import numpy as np

from ..data import Series, validate_series
from ..native import check_available


def _ohlc(open: Series, high: Series, low: Series, close: Series) -> tuple[np.ndarray, ...]:
    return (
        validate_series(open, "open"),
        validate_series(high, "high"),
        validate_series(low, "low"),
        validate_series(close, "close"),
    )


def cdl_2crows(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Two Crows."""
    library = check_available()

    return library.call("CDL2CROWS", *_ohlc(open, high, low, close))


def cdl_3blackcrows(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Three Black Crows."""
    library = check_available()

    return library.call("CDL3BLACKCROWS", *_ohlc(open, high, low, close))


def cdl_3inside(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Three Inside Up/Down."""
    library = check_available()

    return library.call("CDL3INSIDE", *_ohlc(open, high, low, close))


def cdl_3linestrike(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Three-Line Strike."""
    library = check_available()

    return library.call("CDL3LINESTRIKE", *_ohlc(open, high, low, close))


def cdl_3outside(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Three Outside Up/Down."""
    library = check_available()

    return library.call("CDL3OUTSIDE", *_ohlc(open, high, low, close))


def cdl_3starsinsouth(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Three Stars In The South."""
    library = check_available()

    return library.call("CDL3STARSINSOUTH", *_ohlc(open, high, low, close))


def cdl_3whitesoldiers(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Three Advancing White Soldiers."""
    library = check_available()

    return library.call("CDL3WHITESOLDIERS", *_ohlc(open, high, low, close))


def cdl_abandonedbaby(
    open: Series,
    high: Series,
    low: Series,
    close: Series,
    penetration: float = 0.3
) -> np.ndarray:
    """Abandoned Baby."""
    library = check_available()

    return library.call("CDLABANDONEDBABY", *_ohlc(open, high, low, close), penetration=penetration)


def cdl_advanceblock(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Advance Block."""
    library = check_available()

    return library.call("CDLADVANCEBLOCK", *_ohlc(open, high, low, close))


def cdl_belthold(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Belt-hold."""
    library = check_available()

    return library.call("CDLBELTHOLD", *_ohlc(open, high, low, close))


def cdl_breakaway(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Breakaway."""
    library = check_available()

    return library.call("CDLBREAKAWAY", *_ohlc(open, high, low, close))


def cdl_closingmarubozu(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Closing Marubozu."""
    library = check_available()

    return library.call("CDLCLOSINGMARUBOZU", *_ohlc(open, high, low, close))


def cdl_concealbabyswall(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Concealing Baby Swallow."""
    library = check_available()

    return library.call("CDLCONCEALBABYSWALL", *_ohlc(open, high, low, close))


def cdl_counterattack(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Counterattack."""
    library = check_available()

    return library.call("CDLCOUNTERATTACK", *_ohlc(open, high, low, close))


def cdl_darkcloudcover(
    open: Series,
    high: Series,
    low: Series,
    close: Series,
    penetration: float = 0.5
) -> np.ndarray:
    """Dark Cloud Cover."""
    library = check_available()

    return library.call("CDLDARKCLOUDCOVER", *_ohlc(open, high, low, close), penetration=penetration)


def cdl_doji(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Doji."""
    library = check_available()

    return library.call("CDLDOJI", *_ohlc(open, high, low, close))


def cdl_dojistar(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Doji Star."""
    library = check_available()

    return library.call("CDLDOJISTAR", *_ohlc(open, high, low, close))


def cdl_dragonflydoji(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Dragonfly Doji."""
    library = check_available()

    return library.call("CDLDRAGONFLYDOJI", *_ohlc(open, high, low, close))


def cdl_engulfing(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Engulfing Pattern."""
    library = check_available()

    return library.call("CDLENGULFING", *_ohlc(open, high, low, close))


def cdl_eveningdojistar(
    open: Series,
    high: Series,
    low: Series,
    close: Series,
    penetration: float = 0.3
) -> np.ndarray:
    """Evening Doji Star."""
    library = check_available()

    return library.call("CDLEVENINGDOJISTAR", *_ohlc(open, high, low, close), penetration=penetration)


def cdl_eveningstar(
    open: Series,
    high: Series,
    low: Series,
    close: Series,
    penetration: float = 0.3
) -> np.ndarray:
    """Evening Star."""
    library = check_available()

    return library.call("CDLEVENINGSTAR", *_ohlc(open, high, low, close), penetration=penetration)


def cdl_gapsidesidewhite(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Up/Down-gap side-by-side white lines."""
    library = check_available()

    return library.call("CDLGAPSIDESIDEWHITE", *_ohlc(open, high, low, close))


def cdl_gravestonedoji(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Gravestone Doji."""
    library = check_available()

    return library.call("CDLGRAVESTONEDOJI", *_ohlc(open, high, low, close))


def cdl_hammer(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Hammer."""
    library = check_available()

    return library.call("CDLHAMMER", *_ohlc(open, high, low, close))


def cdl_hangingman(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Hanging Man."""
    library = check_available()

    return library.call("CDLHANGINGMAN", *_ohlc(open, high, low, close))


def cdl_harami(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Harami Pattern."""
    library = check_available()

    return library.call("CDLHARAMI", *_ohlc(open, high, low, close))


def cdl_haramicross(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Harami Cross Pattern."""
    library = check_available()

    return library.call("CDLHARAMICROSS", *_ohlc(open, high, low, close))


def cdl_highwave(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """High-Wave Candle."""
    library = check_available()

    return library.call("CDLHIGHWAVE", *_ohlc(open, high, low, close))


def cdl_hikkake(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Hikkake Pattern."""
    library = check_available()

    return library.call("CDLHIKKAKE", *_ohlc(open, high, low, close))


def cdl_hikkakemod(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Modified Hikkake Pattern."""
    library = check_available()

    return library.call("CDLHIKKAKEMOD", *_ohlc(open, high, low, close))


def cdl_homingpigeon(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Homing Pigeon."""
    library = check_available()

    return library.call("CDLHOMINGPIGEON", *_ohlc(open, high, low, close))


def cdl_identical3crows(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Identical Three Crows."""
    library = check_available()

    return library.call("CDLIDENTICAL3CROWS", *_ohlc(open, high, low, close))


def cdl_inneck(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """In-Neck Pattern."""
    library = check_available()

    return library.call("CDLINNECK", *_ohlc(open, high, low, close))


def cdl_invertedhammer(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Inverted Hammer."""
    library = check_available()

    return library.call("CDLINVERTEDHAMMER", *_ohlc(open, high, low, close))


def cdl_kicking(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Kicking."""
    library = check_available()

    return library.call("CDLKICKING", *_ohlc(open, high, low, close))


def cdl_kickingbylength(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Kicking, bull/bear decided by the longer marubozu."""
    library = check_available()

    return library.call("CDLKICKINGBYLENGTH", *_ohlc(open, high, low, close))


def cdl_ladderbottom(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Ladder Bottom."""
    library = check_available()

    return library.call("CDLLADDERBOTTOM", *_ohlc(open, high, low, close))


def cdl_longleggeddoji(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Long Legged Doji."""
    library = check_available()

    return library.call("CDLLONGLEGGEDDOJI", *_ohlc(open, high, low, close))


def cdl_longline(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Long Line Candle."""
    library = check_available()

    return library.call("CDLLONGLINE", *_ohlc(open, high, low, close))


def cdl_marubozu(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Marubozu."""
    library = check_available()

    return library.call("CDLMARUBOZU", *_ohlc(open, high, low, close))


def cdl_matchinglow(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Matching Low."""
    library = check_available()

    return library.call("CDLMATCHINGLOW", *_ohlc(open, high, low, close))


def cdl_mathold(
    open: Series,
    high: Series,
    low: Series,
    close: Series,
    penetration: float = 0.5
) -> np.ndarray:
    """Mat Hold."""
    library = check_available()

    return library.call("CDLMATHOLD", *_ohlc(open, high, low, close), penetration=penetration)


def cdl_morningdojistar(
    open: Series,
    high: Series,
    low: Series,
    close: Series,
    penetration: float = 0.3
) -> np.ndarray:
    """Morning Doji Star."""
    library = check_available()

    return library.call("CDLMORNINGDOJISTAR", *_ohlc(open, high, low, close), penetration=penetration)


def cdl_morningstar(
    open: Series,
    high: Series,
    low: Series,
    close: Series,
    penetration: float = 0.3
) -> np.ndarray:
    """Morning Star."""
    library = check_available()

    return library.call("CDLMORNINGSTAR", *_ohlc(open, high, low, close), penetration=penetration)


def cdl_onneck(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """On-Neck Pattern."""
    library = check_available()

    return library.call("CDLONNECK", *_ohlc(open, high, low, close))


def cdl_piercing(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Piercing Pattern."""
    library = check_available()

    return library.call("CDLPIERCING", *_ohlc(open, high, low, close))


def cdl_rickshawman(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Rickshaw Man."""
    library = check_available()

    return library.call("CDLRICKSHAWMAN", *_ohlc(open, high, low, close))


def cdl_risefall3methods(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Rising/Falling Three Methods."""
    library = check_available()

    return library.call("CDLRISEFALL3METHODS", *_ohlc(open, high, low, close))


def cdl_separatinglines(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Separating Lines."""
    library = check_available()

    return library.call("CDLSEPARATINGLINES", *_ohlc(open, high, low, close))


def cdl_shootingstar(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Shooting Star."""
    library = check_available()

    return library.call("CDLSHOOTINGSTAR", *_ohlc(open, high, low, close))


def cdl_shortline(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Short Line Candle."""
    library = check_available()

    return library.call("CDLSHORTLINE", *_ohlc(open, high, low, close))


def cdl_spinningtop(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Spinning Top."""
    library = check_available()

    return library.call("CDLSPINNINGTOP", *_ohlc(open, high, low, close))


def cdl_stalledpattern(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Stalled Pattern."""
    library = check_available()

    return library.call("CDLSTALLEDPATTERN", *_ohlc(open, high, low, close))


def cdl_sticksandwich(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Stick Sandwich."""
    library = check_available()

    return library.call("CDLSTICKSANDWICH", *_ohlc(open, high, low, close))


def cdl_takuri(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Takuri (Dragonfly Doji with very long lower shadow)."""
    library = check_available()

    return library.call("CDLTAKURI", *_ohlc(open, high, low, close))


def cdl_tasukigap(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Tasuki Gap."""
    library = check_available()

    return library.call("CDLTASUKIGAP", *_ohlc(open, high, low, close))


def cdl_thrusting(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Thrusting Pattern."""
    library = check_available()

    return library.call("CDLTHRUSTING", *_ohlc(open, high, low, close))


def cdl_tristar(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Tristar Pattern."""
    library = check_available()

    return library.call("CDLTRISTAR", *_ohlc(open, high, low, close))


def cdl_unique3river(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Unique 3 River."""
    library = check_available()

    return library.call("CDLUNIQUE3RIVER", *_ohlc(open, high, low, close))


def cdl_upsidegap2crows(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Upside Gap Two Crows."""
    library = check_available()

    return library.call("CDLUPSIDEGAP2CROWS", *_ohlc(open, high, low, close))


def cdl_xsidegap3methods(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Upside/Downside Gap Three Methods."""
    library = check_available()

    return library.call("CDLXSIDEGAP3METHODS", *_ohlc(open, high, low, close))
