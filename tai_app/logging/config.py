"""
Centralized logging configuration for the TA-Lib facade.

This module configures structlog on top of the standard library logger.
Library code only ever asks for loggers through ``get_logger``; output
formatting is left to the application calling ``configure_logging``.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_native_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the native boundary subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for native calls
    """
    return structlog.get_logger(name, subsystem="native")


def get_help_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the help subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for documentation lookups
    """
    return structlog.get_logger(name, subsystem="help")


def log_native_call(
    logger: FilteringBoundLogger,
    symbol: str,
    input_sizes: tuple[int, ...],
    params: Optional[dict[str, Any]] = None
) -> None:
    """
    Log one call across the native boundary.

    Args:
        logger: Structlog logger instance
        symbol: TA-Lib function name, e.g. ``"BBANDS"``
        input_sizes: Length of every input series, in call order
        params: Native keyword parameters passed along
    """
    logger.debug(
        "Forwarding indicator call",
        symbol=symbol,
        input_sizes=list(input_sizes),
        params=params or {},
    )
