"""Pytest configuration and shared fixtures."""

import math
from typing import Any, Dict, List

import numpy as np
import pytest

from tai_app.docs import IndicatorCatalog, set_default_service
from tai_app.native import NativeLibrary, set_library


# Output names TA-Lib declares for its multi-output functions
NATIVE_OUTPUT_NAMES = {
    "BBANDS": ("upperband", "middleband", "lowerband"),
    "ACCBANDS": ("upperband", "middleband", "lowerband"),
    "MAMA": ("mama", "fama"),
    "MACD": ("macd", "macdsignal", "macdhist"),
    "MACDEXT": ("macd", "macdsignal", "macdhist"),
    "MACDFIX": ("macd", "macdsignal", "macdhist"),
    "STOCH": ("slowk", "slowd"),
    "STOCHF": ("fastk", "fastd"),
    "STOCHRSI": ("fastk", "fastd"),
    "AROON": ("aroondown", "aroonup"),
    "HT_PHASOR": ("inphase", "quadrature"),
    "HT_SINE": ("sine", "leadsine"),
}


class FakeNativeLibrary(NativeLibrary):
    """
    Stand-in for TA-Lib that records every forwarded call.

    Single-output calls return an array of the input length filled with
    the call number. Multi-output calls return a dict built in reverse of
    the native order, where each field holds its native position, so a
    caller that relies on dict order instead of field names gets caught.
    """

    def __init__(self, is_loaded: bool = True):
        self.is_loaded = is_loaded
        self.calls: List[Dict[str, Any]] = []

    def is_available(self) -> bool:
        return self.is_loaded

    def _record(self, symbol, inputs, params) -> int:
        self.calls.append({"symbol": symbol, "inputs": inputs, "params": params})
        return len(inputs[0]) if inputs else 0

    def call(self, symbol, *inputs, **params):
        size = self._record(symbol, inputs, params)
        return np.full(size, float(len(self.calls)))

    def call_named(self, symbol, *inputs, **params):
        size = self._record(symbol, inputs, params)
        names = NATIVE_OUTPUT_NAMES[symbol]
        return {
            name: np.full(size, float(position))
            for position, name in reversed(list(enumerate(names)))
        }

    @property
    def last_call(self) -> Dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def fake_library():
    """Install a FakeNativeLibrary for the duration of a test."""
    library = FakeNativeLibrary()
    previous = set_library(library)
    yield library
    set_library(previous)


@pytest.fixture
def missing_library():
    """Install a native library that reports itself unavailable."""
    library = FakeNativeLibrary(is_loaded=False)
    previous = set_library(library)
    yield library
    set_library(previous)


@pytest.fixture(autouse=True)
def reset_default_help_service():
    """Each test starts from the configured documentation service."""
    previous = set_default_service(None)
    yield
    set_default_service(previous)


@pytest.fixture
def prices() -> List[float]:
    """Sixty closes following a gentle sine wave around 100."""
    return [100.0 + 5.0 * math.sin(i / 5.0) + i * 0.1 for i in range(60)]


@pytest.fixture
def ohlcv(prices) -> Dict[str, List[float]]:
    """Aligned open/high/low/close/volume series built around ``prices``."""
    return {
        "open": [p - 0.5 for p in prices],
        "high": [p + 1.5 for p in prices],
        "low": [p - 1.5 for p in prices],
        "close": list(prices),
        "volume": [1000.0 + 10.0 * i for i in range(len(prices))],
    }


@pytest.fixture
def small_catalog() -> IndicatorCatalog:
    """A three-entry documentation table."""
    return IndicatorCatalog.from_dict({
        "sma": {
            "name": "Simple Moving Average",
            "category": "overlap_studies",
            "path": "indicators/overlap/sma",
        },
        "rsi": {
            "name": "Relative Strength Index",
            "category": "momentum_indicators",
            "path": "indicators/momentum/rsi",
        },
        "stochrsi": {
            "name": "Stochastic Relative Strength Index",
            "category": "momentum_indicators",
            "path": "indicators/momentum/stochrsi",
        },
    })
