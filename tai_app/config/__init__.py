"""Configuration for the documentation lookup and logging."""

from .defaults import DefaultConfig, HelpParams, LoggingParams, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "DefaultConfig",
    "HelpParams",
    "LoggingParams",
    "get_default_config",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
]
