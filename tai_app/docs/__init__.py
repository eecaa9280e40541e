"""
Indicator documentation: names, categories and links to the docs site.
"""

from .catalog import (
    Category,
    IndicatorCatalog,
    IndicatorInfo,
    default_catalog,
)
from .query import (
    ALL,
    BASE_URL,
    HelpFormat,
    HelpService,
    default_service,
    help,
    set_default_service,
)
from .resource import HelpResource, browser_command, build_url

__all__ = [
    "ALL",
    "BASE_URL",
    "Category",
    "HelpFormat",
    "HelpResource",
    "HelpService",
    "IndicatorCatalog",
    "IndicatorInfo",
    "browser_command",
    "build_url",
    "default_catalog",
    "default_service",
    "help",
    "set_default_service",
]
