"""Tests for the indicator documentation table."""

import orjson
import pytest

from tai_app.docs import Category, IndicatorCatalog, IndicatorInfo, default_catalog
from tai_app.errors import TAIError, UnknownIndicatorError
from tai_app.indicators import GROUPS, indicator_functions


class TestCategory:
    """Test the Category enum."""

    def test_eight_categories(self):
        """TA-Lib's eight function groups."""
        assert len(Category) == 8

    def test_label(self):
        """Labels are title-cased values."""
        assert Category.MOMENTUM_INDICATORS.label == "Momentum Indicators"
        assert Category.PRICE_TRANSFORM.label == "Price Transform"

    def test_find_string(self):
        """Strings match case-insensitively."""
        assert Category.find("Overlap_Studies") is Category.OVERLAP_STUDIES
        assert Category.find(Category.CYCLE_INDICATORS) is Category.CYCLE_INDICATORS

    def test_find_unknown(self):
        """Unknown categories are None."""
        assert Category.find("trend") is None


class TestBundledCatalog:
    """Test the catalog shipped in data.json."""

    def test_size(self):
        """One entry per indicator function."""
        assert len(default_catalog()) == 135

    def test_keys_match_indicator_functions(self):
        """Every indicator function has a documentation entry, and nothing else does."""
        assert {info.key for info in default_catalog()} == set(indicator_functions())

    def test_categories_match_modules(self):
        """Each entry's category is the group its function lives in."""
        functions = indicator_functions()
        for info in default_catalog():
            assert functions[info.key].__module__ == GROUPS[info.category.value].__name__

    def test_shared_instance(self):
        """The bundled catalog is parsed once."""
        assert default_catalog() is default_catalog()

    def test_get(self):
        """Entries carry name, category and path."""
        info = default_catalog().get("rsi")

        assert info == IndicatorInfo(
            key="rsi",
            name="Relative Strength Index",
            category=Category.MOMENTUM_INDICATORS,
            path="indicators/momentum/rsi",
        )

    def test_get_is_case_insensitive(self):
        """Keys are normalized to lower case."""
        assert default_catalog().get("BBANDS").key == "bbands"
        assert "Cdl_Doji" in default_catalog()

    def test_get_unknown(self):
        """Unknown keys raise UnknownIndicatorError."""
        with pytest.raises(UnknownIndicatorError, match="Unknown indicator: foo"):
            default_catalog().get("foo")

    def test_category_sizes(self):
        """Categories partition the table."""
        catalog = default_catalog()
        sizes = {category: len(catalog.in_category(category)) for category in Category}

        assert sizes[Category.PATTERN_RECOGNITION] == 61
        assert sizes[Category.MOMENTUM_INDICATORS] == 31
        assert sizes[Category.VOLATILITY_INDICATORS] == 3
        assert sum(sizes.values()) == 135

    def test_unknown_category_is_empty(self):
        """A category outside the enum matches no indicators."""
        assert default_catalog().in_category("momentum") == []

    def test_search_matches_keys(self):
        """Search looks inside keys."""
        keys = [info.key for info in default_catalog().search("rsi")]
        assert keys == ["rsi", "stochrsi", "cdl_3starsinsouth"]

    def test_search_matches_names(self):
        """Search also looks inside display names, ignoring case."""
        keys = {info.key for info in default_catalog().search("MOMENTUM")}
        assert keys == {"cmo", "imi", "mom"}

    def test_search_no_match(self):
        """No match is an empty list."""
        assert default_catalog().search("zzz") == []


class TestCatalogConstruction:
    """Test building catalogs from raw tables."""

    def test_from_dict_normalizes(self):
        """Keys are lower-cased and paths lose surrounding slashes."""
        catalog = IndicatorCatalog.from_dict({
            "SMA": {"name": "Simple", "category": "overlap_studies", "path": "/indicators/sma/"},
        })

        assert catalog.get("sma").path == "indicators/sma"

    def test_from_dict_missing_field(self):
        """A malformed entry is reported with its key."""
        with pytest.raises(TAIError, match="Malformed documentation entry for sma") as exc_info:
            IndicatorCatalog.from_dict({"sma": {"name": "Simple"}})
        assert exc_info.value.context["key"] == "sma"

    def test_from_dict_bad_category(self):
        """Unknown categories in the table are rejected."""
        with pytest.raises(TAIError):
            IndicatorCatalog.from_dict({"sma": {"name": "S", "category": "misc", "path": "p"}})

    def test_load_custom_file(self, tmp_path):
        """A table file can replace the bundled one."""
        data_file = tmp_path / "custom.json"
        data_file.write_bytes(orjson.dumps({
            "foo": {"name": "Foo", "category": "statistical_functions", "path": "x/foo"},
        }))

        catalog = IndicatorCatalog.load(data_file)

        assert len(catalog) == 1
        assert catalog.get("foo").category is Category.STATISTICAL_FUNCTIONS

    def test_read_only(self, small_catalog):
        """The entries mapping cannot be modified."""
        with pytest.raises(TypeError):
            small_catalog._entries["macd"] = None

    def test_iteration_order(self, small_catalog):
        """Iteration follows table order."""
        assert [info.key for info in small_catalog] == ["sma", "rsi", "stochrsi"]
        assert [key for key, _ in small_catalog.items()] == ["sma", "rsi", "stochrsi"]
