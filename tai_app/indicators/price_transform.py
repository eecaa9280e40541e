"""
Price transforms: single-series summaries of a bar.
"""

import numpy as np

from ..data import Series, validate_series
from ..native import check_available


def avgprice(open: Series, high: Series, low: Series, close: Series) -> np.ndarray:
    """Average Price: (open + high + low + close) / 4."""
    library = check_available()
    open = validate_series(open, "open")
    high = validate_series(high, "high")
    low = validate_series(low, "low")
    close = validate_series(close, "close")

    return library.call("AVGPRICE", open, high, low, close)


def medprice(high: Series, low: Series) -> np.ndarray:
    """Median Price: (high + low) / 2."""
    library = check_available()
    high = validate_series(high, "high")
    low = validate_series(low, "low")

    return library.call("MEDPRICE", high, low)


def typprice(high: Series, low: Series, close: Series) -> np.ndarray:
    """Typical Price: (high + low + close) / 3."""
    library = check_available()
    high = validate_series(high, "high")
    low = validate_series(low, "low")
    close = validate_series(close, "close")

    return library.call("TYPPRICE", high, low, close)


def wclprice(high: Series, low: Series, close: Series) -> np.ndarray:
    """Weighted Close Price: (high + low + 2 * close) / 4."""
    library = check_available()
    high = validate_series(high, "high")
    low = validate_series(low, "low")
    close = validate_series(close, "close")

    return library.call("WCLPRICE", high, low, close)
