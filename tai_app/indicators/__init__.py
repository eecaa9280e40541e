"""
Indicator functions grouped the way TA-Lib groups them.

Every function is re-exported here (and again from ``tai_app``) so all
indicators share one flat namespace.
"""

from types import FunctionType

from . import (
    cycle,
    momentum,
    overlap,
    pattern,
    price_transform,
    statistic,
    volatility,
    volume,
)
from .overlap import (
    ma,
    sma,
    ema,
    wma,
    dema,
    tema,
    trima,
    kama,
    t3,
    bbands,
    accbands,
    ht_trendline,
    mama,
    mavp,
    midpoint,
    midprice,
    sar,
    sarext,
)
from .momentum import (
    adx,
    adxr,
    apo,
    aroon,
    aroonosc,
    bop,
    cci,
    cmo,
    dx,
    imi,
    macd,
    macdext,
    macdfix,
    mfi,
    minus_di,
    minus_dm,
    mom,
    plus_di,
    plus_dm,
    ppo,
    roc,
    rocp,
    rocr,
    rocr100,
    rsi,
    stoch,
    stochf,
    stochrsi,
    trix,
    ultosc,
    willr,
)
from .volatility import (
    atr,
    natr,
    trange,
)
from .volume import (
    ad,
    adosc,
    obv,
)
from .price_transform import (
    avgprice,
    medprice,
    typprice,
    wclprice,
)
from .cycle import (
    ht_dcperiod,
    ht_dcphase,
    ht_phasor,
    ht_sine,
    ht_trendmode,
)
from .statistic import (
    avgdev,
    beta,
    correl,
    linearreg,
    linearreg_angle,
    linearreg_intercept,
    linearreg_slope,
    stddev,
    tsf,
    var,
)
from .pattern import (
    cdl_2crows,
    cdl_3blackcrows,
    cdl_3inside,
    cdl_3linestrike,
    cdl_3outside,
    cdl_3starsinsouth,
    cdl_3whitesoldiers,
    cdl_abandonedbaby,
    cdl_advanceblock,
    cdl_belthold,
    cdl_breakaway,
    cdl_closingmarubozu,
    cdl_concealbabyswall,
    cdl_counterattack,
    cdl_darkcloudcover,
    cdl_doji,
    cdl_dojistar,
    cdl_dragonflydoji,
    cdl_engulfing,
    cdl_eveningdojistar,
    cdl_eveningstar,
    cdl_gapsidesidewhite,
    cdl_gravestonedoji,
    cdl_hammer,
    cdl_hangingman,
    cdl_harami,
    cdl_haramicross,
    cdl_highwave,
    cdl_hikkake,
    cdl_hikkakemod,
    cdl_homingpigeon,
    cdl_identical3crows,
    cdl_inneck,
    cdl_invertedhammer,
    cdl_kicking,
    cdl_kickingbylength,
    cdl_ladderbottom,
    cdl_longleggeddoji,
    cdl_longline,
    cdl_marubozu,
    cdl_matchinglow,
    cdl_mathold,
    cdl_morningdojistar,
    cdl_morningstar,
    cdl_onneck,
    cdl_piercing,
    cdl_rickshawman,
    cdl_risefall3methods,
    cdl_separatinglines,
    cdl_shootingstar,
    cdl_shortline,
    cdl_spinningtop,
    cdl_stalledpattern,
    cdl_sticksandwich,
    cdl_takuri,
    cdl_tasukigap,
    cdl_thrusting,
    cdl_tristar,
    cdl_unique3river,
    cdl_upsidegap2crows,
    cdl_xsidegap3methods,
)

# Module per documentation category
GROUPS = {
    "overlap_studies": overlap,
    "momentum_indicators": momentum,
    "volatility_indicators": volatility,
    "volume_indicators": volume,
    "price_transform": price_transform,
    "cycle_indicators": cycle,
    "statistical_functions": statistic,
    "pattern_recognition": pattern,
}


def indicator_functions() -> dict[str, FunctionType]:
    """Every public indicator function, keyed by name."""
    functions = {}
    for module in GROUPS.values():
        for name, value in vars(module).items():
            if (
                isinstance(value, FunctionType)
                and not name.startswith("_")
                and value.__module__ == module.__name__
            ):
                functions[name] = value
    return functions


__all__ = [
    # overlap
    "ma",
    "sma",
    "ema",
    "wma",
    "dema",
    "tema",
    "trima",
    "kama",
    "t3",
    "bbands",
    "accbands",
    "ht_trendline",
    "mama",
    "mavp",
    "midpoint",
    "midprice",
    "sar",
    "sarext",
    # momentum
    "adx",
    "adxr",
    "apo",
    "aroon",
    "aroonosc",
    "bop",
    "cci",
    "cmo",
    "dx",
    "imi",
    "macd",
    "macdext",
    "macdfix",
    "mfi",
    "minus_di",
    "minus_dm",
    "mom",
    "plus_di",
    "plus_dm",
    "ppo",
    "roc",
    "rocp",
    "rocr",
    "rocr100",
    "rsi",
    "stoch",
    "stochf",
    "stochrsi",
    "trix",
    "ultosc",
    "willr",
    # volatility
    "atr",
    "natr",
    "trange",
    # volume
    "ad",
    "adosc",
    "obv",
    # price_transform
    "avgprice",
    "medprice",
    "typprice",
    "wclprice",
    # cycle
    "ht_dcperiod",
    "ht_dcphase",
    "ht_phasor",
    "ht_sine",
    "ht_trendmode",
    # statistic
    "avgdev",
    "beta",
    "correl",
    "linearreg",
    "linearreg_angle",
    "linearreg_intercept",
    "linearreg_slope",
    "stddev",
    "tsf",
    "var",
    # pattern
    "cdl_2crows",
    "cdl_3blackcrows",
    "cdl_3inside",
    "cdl_3linestrike",
    "cdl_3outside",
    "cdl_3starsinsouth",
    "cdl_3whitesoldiers",
    "cdl_abandonedbaby",
    "cdl_advanceblock",
    "cdl_belthold",
    "cdl_breakaway",
    "cdl_closingmarubozu",
    "cdl_concealbabyswall",
    "cdl_counterattack",
    "cdl_darkcloudcover",
    "cdl_doji",
    "cdl_dojistar",
    "cdl_dragonflydoji",
    "cdl_engulfing",
    "cdl_eveningdojistar",
    "cdl_eveningstar",
    "cdl_gapsidesidewhite",
    "cdl_gravestonedoji",
    "cdl_hammer",
    "cdl_hangingman",
    "cdl_harami",
    "cdl_haramicross",
    "cdl_highwave",
    "cdl_hikkake",
    "cdl_hikkakemod",
    "cdl_homingpigeon",
    "cdl_identical3crows",
    "cdl_inneck",
    "cdl_invertedhammer",
    "cdl_kicking",
    "cdl_kickingbylength",
    "cdl_ladderbottom",
    "cdl_longleggeddoji",
    "cdl_longline",
    "cdl_marubozu",
    "cdl_matchinglow",
    "cdl_mathold",
    "cdl_morningdojistar",
    "cdl_morningstar",
    "cdl_onneck",
    "cdl_piercing",
    "cdl_rickshawman",
    "cdl_risefall3methods",
    "cdl_separatinglines",
    "cdl_shootingstar",
    "cdl_shortline",
    "cdl_spinningtop",
    "cdl_stalledpattern",
    "cdl_sticksandwich",
    "cdl_takuri",
    "cdl_tasukigap",
    "cdl_thrusting",
    "cdl_tristar",
    "cdl_unique3river",
    "cdl_upsidegap2crows",
    "cdl_xsidegap3methods",
    # registry
    "GROUPS",
    "indicator_functions",
]
