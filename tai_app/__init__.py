"""
TAI App - TA-Lib technical analysis indicators

A thin facade over the TA-Lib native library. Every indicator is a plain
function taking numeric series and keyword parameters:

    import tai_app

    tai_app.sma(closes, period=20)
    upper, middle, lower = tai_app.bbands(closes, period=20)

Inputs are validated before they reach TA-Lib, and multi-output
indicators always return their arrays in a fixed order. ``tai_app.help``
looks up the documentation of any indicator. Logging is left to the host
application, see ``tai_app.logging.configure_logging``.
"""

__version__ = "0.1.0"
__author__ = "TAI Team"

from .docs import help
from .errors import (
    DocumentationFetchError,
    InvalidParameterError,
    NativeResultError,
    TAIError,
    TAINotInstalledError,
    UnknownIndicatorError,
)
from .data import MAType
from .native import available, check_available
from .indicators import *  # noqa: F401,F403
from .indicators import __all__ as _indicator_names

__all__ = [
    "__version__",
    "available",
    "check_available",
    "MAType",
    "TAIError",
    "TAINotInstalledError",
    "NativeResultError",
    "DocumentationFetchError",
    "InvalidParameterError",
    "UnknownIndicatorError",
    *_indicator_names,
]
