"""
Cycle indicators based on the Hilbert Transform.

None of these take a period: the dominant cycle is measured from the
data itself, so each has a fixed lookback set by the transform.
"""

import numpy as np

from ..data import Series, validate_series
from ..native import check_available
from ..native import outputs


def ht_dcperiod(prices: Series) -> np.ndarray:
    """Hilbert Transform - Dominant Cycle Period."""
    library = check_available()
    prices = validate_series(prices)

    return library.call("HT_DCPERIOD", prices)


def ht_dcphase(prices: Series) -> np.ndarray:
    """Hilbert Transform - Dominant Cycle Phase."""
    library = check_available()
    prices = validate_series(prices)

    return library.call("HT_DCPHASE", prices)


def ht_phasor(prices: Series) -> tuple[np.ndarray, np.ndarray]:
    """
    Hilbert Transform - Phasor Components.

    Returns:
        (in_phase, quadrature)
    """
    library = check_available()
    prices = validate_series(prices)

    return outputs.HT_PHASOR.call(library, prices)


def ht_sine(prices: Series) -> tuple[np.ndarray, np.ndarray]:
    """
    Hilbert Transform - SineWave.

    Returns:
        (sine, lead_sine)
    """
    library = check_available()
    prices = validate_series(prices)

    return outputs.HT_SINE.call(library, prices)


def ht_trendmode(prices: Series) -> np.ndarray:
    """
    Hilbert Transform - Trend vs Cycle Mode.

    Returns:
        Integer array: 1 in trend mode, 0 in cycle mode
    """
    library = check_available()
    prices = validate_series(prices)

    return library.call("HT_TRENDMODE", prices)
