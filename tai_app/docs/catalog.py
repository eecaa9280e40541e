"""
Indicator documentation table.

The table ships with the package as ``data.json`` and maps each indicator
key to its display name, category and documentation path. It is parsed
once into an immutable IndicatorCatalog; nothing here performs I/O after
construction.
"""

import threading
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Union

import orjson

from ..errors import TAIError, UnknownIndicatorError
from ..logging.config import get_help_logger

logger = get_help_logger(__name__)

DEFAULT_DATA_FILE = Path(__file__).parent / "data.json"


class Category(str, Enum):
    """Indicator groups, matching TA-Lib's function groups."""
    OVERLAP_STUDIES = "overlap_studies"
    MOMENTUM_INDICATORS = "momentum_indicators"
    VOLATILITY_INDICATORS = "volatility_indicators"
    VOLUME_INDICATORS = "volume_indicators"
    PRICE_TRANSFORM = "price_transform"
    CYCLE_INDICATORS = "cycle_indicators"
    STATISTICAL_FUNCTIONS = "statistical_functions"
    PATTERN_RECOGNITION = "pattern_recognition"

    @property
    def label(self) -> str:
        """Human readable name, e.g. ``"Momentum Indicators"``."""
        return " ".join(word.capitalize() for word in self.value.split("_"))

    @classmethod
    def find(cls, value: Union["Category", str]) -> Optional["Category"]:
        """A Category or its string value (case-insensitive); None if unknown."""
        if isinstance(value, cls):
            return value
        return cls._value2member_map_.get(str(value).strip().lower())


@dataclass(frozen=True)
class IndicatorInfo:
    """Documentation metadata for one indicator."""
    key: str
    name: str
    category: Category
    path: str


def normalize_key(indicator: Any) -> str:
    """Indicator keys are lower-case strings: ``"SMA"`` and ``"sma"`` are the same."""
    return str(indicator).strip().lower()


class IndicatorCatalog:
    """Read-only lookup of indicator documentation metadata."""

    def __init__(self, entries: Mapping[str, IndicatorInfo]):
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def from_dict(cls, raw: Mapping[str, Mapping[str, Any]]) -> "IndicatorCatalog":
        """
        Build a catalog from the raw ``{key: {name, category, path}}`` table.

        Raises:
            TAIError: If an entry is missing a field or names an unknown category
        """
        entries = {}
        for key, meta in raw.items():
            try:
                info = IndicatorInfo(
                    key=normalize_key(key),
                    name=meta["name"],
                    category=Category(meta["category"]),
                    path=meta["path"].strip("/"),
                )
            except (KeyError, TypeError, AttributeError, ValueError) as e:
                raise TAIError(
                    f"Malformed documentation entry for {key}: {e}",
                    context={"key": key, "entry": meta}
                ) from e
            entries[info.key] = info
        return cls(entries)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "IndicatorCatalog":
        """Parse a JSON documentation table (the bundled one by default)."""
        data_file = Path(path) if path else DEFAULT_DATA_FILE
        catalog = cls.from_dict(orjson.loads(data_file.read_bytes()))
        logger.debug("Loaded indicator catalog", path=str(data_file), size=len(catalog))
        return catalog

    def get(self, indicator: Any) -> IndicatorInfo:
        """
        Look up one indicator.

        Raises:
            UnknownIndicatorError: If the key is not in the table
        """
        info = self._entries.get(normalize_key(indicator))
        if info is None:
            raise UnknownIndicatorError(indicator)
        return info

    def in_category(self, category: Union[Category, str]) -> list[IndicatorInfo]:
        """All indicators of one category, in table order; empty for unknown categories."""
        category = Category.find(category)
        if category is None:
            return []
        return [info for info in self._entries.values() if info.category is category]

    def search(self, query: str) -> list[IndicatorInfo]:
        """Case-insensitive substring match against the key or the display name."""
        needle = str(query).lower()
        return [
            info for info in self._entries.values()
            if needle in info.key or needle in info.name.lower()
        ]

    def items(self):
        return self._entries.items()

    def __contains__(self, indicator: Any) -> bool:
        return normalize_key(indicator) in self._entries

    def __iter__(self) -> Iterator[IndicatorInfo]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


_default_catalog: Optional[IndicatorCatalog] = None
_default_catalog_lock = threading.Lock()


def default_catalog() -> IndicatorCatalog:
    """The bundled catalog, parsed on first use and shared afterwards."""
    global _default_catalog
    with _default_catalog_lock:
        if _default_catalog is None:
            _default_catalog = IndicatorCatalog.load()
        return _default_catalog
