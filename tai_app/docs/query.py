"""
The ``help`` entry point: documentation lookups for indicators.

Examples::

    print(tai_app.help("rsi"))
    # Indicator: RSI (Relative Strength Index)
    # Category:  Momentum Indicators
    # Website:   https://madbomber.github.io/sqa-tai/indicators/momentum/rsi/

    tai_app.help(category="momentum_indicators")   # {key: url}
    tai_app.help(search="moving average")          # {key: url}
    tai_app.help("all")                            # {key: url}
    tai_app.help("macd", format="uri")             # parsed URL
    tai_app.help("bbands", open=True)              # opens a browser
"""

import threading
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Optional, Union
from urllib.parse import ParseResult

from ..config.loader import ConfigLoader
from ..errors import InvalidParameterError
from .catalog import Category, IndicatorCatalog, IndicatorInfo, default_catalog, normalize_key
from .resource import HelpResource, build_url

BASE_URL = "https://madbomber.github.io/sqa-tai"

# Pseudo-key returning the whole table
ALL = "all"


class HelpFormat(str, Enum):
    """Return shapes for single-indicator lookups."""
    RESOURCE = "resource"
    URI = "uri"
    HASH = "hash"


class HelpService:
    """Answers documentation queries against an injected IndicatorCatalog."""

    def __init__(
        self,
        catalog: IndicatorCatalog,
        base_url: str = BASE_URL,
        fetch_timeout: float = 10.0,
        user_agent: str = "tai-app/0.1"
    ):
        self.catalog = catalog
        self.base_url = base_url.rstrip("/")
        self.fetch_timeout = fetch_timeout
        self.user_agent = user_agent

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "HelpService":
        """Build a service from the ``help`` section of a merged config dict."""
        params = config.get("help", {})
        data_file = params.get("data_file")

        catalog = IndicatorCatalog.load(Path(data_file)) if data_file else default_catalog()

        return cls(
            catalog,
            base_url=params.get("base_url", BASE_URL),
            fetch_timeout=params.get("fetch_timeout_seconds", 10.0),
            user_agent=params.get("user_agent", "tai-app/0.1"),
        )

    def url_for(self, info: IndicatorInfo) -> str:
        return build_url(self.base_url, info.path)

    def urls(self, infos: Iterable[IndicatorInfo]) -> dict[str, str]:
        """``{key: url}`` for a set of indicators."""
        return {info.key: self.url_for(info) for info in infos}

    def resource(self, indicator: Any) -> HelpResource:
        """Build the documentation resource of one indicator."""
        return HelpResource.from_info(
            self.catalog.get(indicator),
            self.base_url,
            fetch_timeout=self.fetch_timeout,
            user_agent=self.user_agent,
        )

    def help(
        self,
        indicator: Optional[str] = None,
        *,
        category: Optional[Union[Category, str]] = None,
        search: Optional[str] = None,
        open: bool = False,
        format: Optional[Union[HelpFormat, str]] = None
    ) -> Union[HelpResource, ParseResult, dict]:
        """
        Look up indicator documentation.

        Args:
            indicator: Indicator key, or ``"all"`` for every indicator
            category: Return every indicator of this category
            search: Return indicators whose key or name contains this text
            open: Open the page in a browser (single lookups only)
            format: ``"uri"`` for a parsed URL, ``"hash"`` for a dict,
                anything else for a HelpResource

        Returns:
            ``{key: url}`` for ``"all"``, category and search queries;
            otherwise the single indicator in the requested format

        Raises:
            UnknownIndicatorError: If the indicator key is not known
            InvalidParameterError: If nothing was asked for
        """
        if indicator is not None and normalize_key(indicator) == ALL:
            return self.urls(self.catalog)

        if category is not None:
            return self.urls(self.catalog.in_category(category))

        if search is not None:
            return self.urls(self.catalog.search(search))

        if indicator is None:
            raise InvalidParameterError(
                "Pass an indicator key, 'all', category= or search=",
                parameter="indicator"
            )

        output = self._parse_format(format)
        resource = self.resource(indicator)

        if open:
            resource.open()

        if output is HelpFormat.URI:
            return resource.uri
        if output is HelpFormat.HASH:
            return resource.to_dict()
        return resource

    @staticmethod
    def _parse_format(format: Optional[Union[HelpFormat, str]]) -> HelpFormat:
        if isinstance(format, HelpFormat):
            return format
        if isinstance(format, str):
            return HelpFormat._value2member_map_.get(format.lower(), HelpFormat.RESOURCE)
        return HelpFormat.RESOURCE


_default_service: Optional[HelpService] = None
_default_service_lock = threading.Lock()


def default_service() -> HelpService:
    """The service behind ``tai_app.help``, configured on first use."""
    global _default_service
    with _default_service_lock:
        if _default_service is None:
            _default_service = HelpService.from_config(ConfigLoader.create().load())
        return _default_service


def set_default_service(service: Optional[HelpService]) -> Optional[HelpService]:
    """
    Replace the service behind ``tai_app.help``.

    Passing None restores lazy creation from configuration.

    Returns:
        The previously installed service, if any
    """
    global _default_service
    with _default_service_lock:
        previous = _default_service
        _default_service = service
        return previous


def help(indicator: Optional[str] = None, **options: Any) -> Union[HelpResource, ParseResult, dict]:
    """Look up indicator documentation. See HelpService.help for the options."""
    return default_service().help(indicator, **options)
