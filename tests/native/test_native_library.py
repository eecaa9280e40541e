"""Tests for the native library boundary and the availability gate."""

import sys
import types
from unittest.mock import Mock

import numpy as np
import pytest

from tai_app.errors import NativeResultError, TAINotInstalledError
from tai_app.native import (
    TALibLibrary,
    available,
    check_available,
    get_library,
    set_library,
)
from tai_app.native import library as library_module


@pytest.fixture
def stub_binding(monkeypatch):
    """Register an importable module that quacks like the talib binding."""
    module = types.ModuleType("stub_talib")
    module.SMA = Mock(side_effect=lambda prices, timeperiod: np.full(len(prices), float(timeperiod)))
    module.BBANDS = Mock(side_effect=lambda prices, **params: (
        np.full(len(prices), 3.0), np.full(len(prices), 2.0), np.full(len(prices), 1.0),
    ))
    module.BROKEN = Mock(return_value=np.zeros(3))

    declared = {"BBANDS": ["upperband", "middleband", "lowerband"], "BROKEN": ["a", "b"]}
    abstract = types.ModuleType("stub_talib.abstract")
    abstract.Function = lambda symbol: types.SimpleNamespace(output_names=declared[symbol])
    module.abstract = abstract

    monkeypatch.setitem(sys.modules, "stub_talib", module)
    monkeypatch.setitem(sys.modules, "stub_talib.abstract", abstract)
    return module


class TestTALibLibrary:
    """Test the talib-backed NativeLibrary."""

    def test_missing_binding_unavailable(self):
        """A binding that cannot be imported is reported, not raised."""
        library = TALibLibrary(module_name="tai_app_no_such_binding")

        assert library.is_available() is False

    def test_missing_binding_call_raises(self):
        """Calls without a binding raise TAINotInstalledError."""
        library = TALibLibrary(module_name="tai_app_no_such_binding")

        with pytest.raises(TAINotInstalledError, match="ta-lib.org"):
            library.call("SMA", np.ones(5), timeperiod=2)

    def test_import_attempted_once(self, monkeypatch):
        """The import is not retried on every check."""
        import_module = Mock(side_effect=ImportError("libta-lib.so: cannot open shared object"))
        monkeypatch.setattr(library_module.importlib, "import_module", import_module)
        library = TALibLibrary()

        assert library.is_available() is False
        assert library.is_available() is False
        import_module.assert_called_once_with("talib")

    def test_shared_object_failure_unavailable(self, monkeypatch):
        """An OSError from loading the C library counts as unavailable."""
        monkeypatch.setattr(
            library_module.importlib, "import_module", Mock(side_effect=OSError("bad ELF"))
        )
        assert TALibLibrary().is_available() is False

    def test_available_with_binding(self, stub_binding):
        """A binding exposing the checked symbol is available."""
        assert TALibLibrary(module_name="stub_talib").is_available() is True

    def test_call_forwards_keywords(self, stub_binding):
        """Inputs and keyword parameters reach the binding unchanged."""
        library = TALibLibrary(module_name="stub_talib")
        prices = np.arange(10, dtype=np.float64)

        result = library.call("SMA", prices, timeperiod=4)

        stub_binding.SMA.assert_called_once_with(prices, timeperiod=4)
        assert result[0] == 4.0

    def test_unknown_symbol(self, stub_binding):
        """An outdated binding without the function is reported as such."""
        library = TALibLibrary(module_name="stub_talib")

        with pytest.raises(TAINotInstalledError, match="does not provide IMI") as exc_info:
            library.call("IMI", np.ones(5), np.ones(5), timeperiod=2)
        assert exc_info.value.context == {"symbol": "IMI"}

    def test_call_named_keys_outputs(self, stub_binding):
        """Multi-output results are keyed by the binding's declared names."""
        library = TALibLibrary(module_name="stub_talib")

        named = library.call_named("BBANDS", np.ones(4), timeperiod=2)

        assert list(named) == ["upperband", "middleband", "lowerband"]
        assert named["lowerband"][0] == 1.0

    def test_call_named_wrong_shape(self, stub_binding):
        """A result that does not match the declared outputs is an error."""
        library = TALibLibrary(module_name="stub_talib")

        with pytest.raises(NativeResultError) as exc_info:
            library.call_named("BROKEN", np.ones(3))

        assert exc_info.value.symbol == "BROKEN"
        assert exc_info.value.expected_fields == ("a", "b")

    def test_call_logged(self, stub_binding, monkeypatch):
        """Forwarded calls are logged with their symbol and parameters."""
        logger = Mock()
        monkeypatch.setattr(library_module, "logger", logger)

        TALibLibrary(module_name="stub_talib").call("SMA", np.ones(6), timeperiod=3)

        logger.debug.assert_called_once()
        assert logger.debug.call_args.kwargs["symbol"] == "SMA"
        assert logger.debug.call_args.kwargs["params"] == {"timeperiod": 3}


class TestAvailabilityGate:
    """Test the module level library registry and the guard."""

    def test_default_library_is_talib(self):
        """Without an override the TA-Lib library is created lazily."""
        previous = set_library(None)
        try:
            assert isinstance(get_library(), TALibLibrary)
            assert get_library() is get_library()
        finally:
            set_library(previous)

    def test_set_library_returns_previous(self, fake_library):
        """set_library hands back what it replaced."""
        other = Mock()
        assert set_library(other) is fake_library
        assert set_library(fake_library) is other

    def test_available_reflects_library(self, fake_library):
        """available() asks the active library."""
        assert available() is True
        fake_library.is_loaded = False
        assert available() is False

    def test_available_never_raises(self):
        """A check that blows up reads as unavailable."""
        broken = Mock()
        broken.is_available.side_effect = RuntimeError("segfault averted")
        previous = set_library(broken)
        try:
            assert available() is False
        finally:
            set_library(previous)

    def test_check_available_returns_library(self, fake_library):
        """The guard returns the library to call."""
        assert check_available() is fake_library

    def test_check_available_raises(self, missing_library):
        """The guard raises when the library is missing."""
        with pytest.raises(TAINotInstalledError) as exc_info:
            check_available()

        assert str(exc_info.value) == (
            "TA-Lib C library is not installed. Please install it from https://ta-lib.org/"
        )
        assert exc_info.value.install_hint == "Please install it from https://ta-lib.org/"
