"""
Error classifications for the native library and external resources.

These exceptions describe failures outside the caller's control: the
TA-Lib engine is missing, it answered with an unexpected shape, or a
documentation page could not be retrieved.
"""

from typing import Optional, Dict, Any

INSTALL_HINT = "Please install it from https://ta-lib.org/"


class TAIError(Exception):
    """Base class for every error raised by the facade."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class TAINotInstalledError(TAIError):
    """The TA-Lib C library (or its Python binding) cannot be loaded."""

    def __init__(self, message: Optional[str] = None, **kwargs):
        super().__init__(
            message or f"TA-Lib C library is not installed. {INSTALL_HINT}",
            **kwargs
        )
        self.install_hint = INSTALL_HINT


class NativeResultError(TAIError):
    """A native call returned a result that does not match its output contract."""

    def __init__(self, message: str, symbol: Optional[str] = None,
                 expected_fields: Optional[tuple] = None,
                 received_fields: Optional[tuple] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.symbol = symbol
        self.expected_fields = expected_fields or ()
        self.received_fields = received_fields or ()


class DocumentationFetchError(TAIError):
    """Downloading an indicator's documentation page failed."""

    def __init__(self, message: str, url: Optional[str] = None,
                 status_code: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.url = url
        self.status_code = status_code
