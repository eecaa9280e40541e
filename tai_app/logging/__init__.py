"""
Logging configuration and utilities for the TA-Lib facade.
"""
from .config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
