"""
Caller misuse errors.

Both classes also derive from ValueError so callers that only know the
standard library hierarchy can still catch them.
"""

from typing import Optional, Any

from .library import TAIError


class InvalidParameterError(TAIError, ValueError):
    """A series or numeric parameter was rejected before reaching TA-Lib."""

    def __init__(self, message: str, parameter: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.parameter = parameter
        self.value = value


class UnknownIndicatorError(TAIError, ValueError):
    """The requested indicator key is not in the documentation table."""

    def __init__(self, indicator: Any, **kwargs):
        super().__init__(f"Unknown indicator: {indicator}", **kwargs)
        self.indicator = indicator
