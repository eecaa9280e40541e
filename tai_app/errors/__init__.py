"""
Error classification for the TA-Lib facade.

Library errors describe problems with the native TA-Lib engine itself,
parameter errors describe caller misuse. Nothing here is retried: every
error propagates to the caller with no partial result.
"""

from .library import (
    TAIError,
    TAINotInstalledError,
    NativeResultError,
    DocumentationFetchError,
)
from .parameters import (
    InvalidParameterError,
    UnknownIndicatorError,
)

__all__ = [
    # Library errors
    "TAIError",
    "TAINotInstalledError",
    "NativeResultError",
    "DocumentationFetchError",
    # Parameter errors
    "InvalidParameterError",
    "UnknownIndicatorError",
]
