"""
Native library access and the availability gate.

The facade never imports ``talib`` directly. It talks to a NativeLibrary,
which forwards calls by TA-Lib symbol name (``"SMA"``, ``"CDLDOJI"``) with
TA-Lib's own keyword names. The default implementation wraps the ``talib``
package and imports it lazily so that a missing C library is reported by
the availability check instead of failing at import time.
"""

import importlib
import threading
from abc import ABC, abstractmethod
from types import ModuleType
from typing import Any, Optional

import numpy as np

from ..errors import NativeResultError, TAINotInstalledError
from ..logging.config import get_native_logger, log_native_call

logger = get_native_logger(__name__)

# Entry point whose presence means the binding is usable
CHECK_SYMBOL = "SMA"


class NativeLibrary(ABC):
    """Interface of the native computation engine."""

    @abstractmethod
    def is_available(self) -> bool:
        """Return True if calls can be forwarded."""

    @abstractmethod
    def call(self, symbol: str, *inputs: np.ndarray, **params: Any) -> np.ndarray:
        """Call a single-output function and return its array."""

    @abstractmethod
    def call_named(self, symbol: str, *inputs: np.ndarray, **params: Any) -> dict[str, np.ndarray]:
        """Call a multi-output function and return its arrays keyed by output name."""


class TALibLibrary(NativeLibrary):
    """NativeLibrary backed by the ``talib`` Python package."""

    def __init__(self, module_name: str = "talib"):
        self.module_name = module_name
        self._module: Optional[ModuleType] = None
        self._load_attempted = False
        self._load_lock = threading.Lock()
        self._output_names: dict[str, tuple[str, ...]] = {}

    def _load(self) -> Optional[ModuleType]:
        """Import the binding once; None if it cannot be loaded."""
        with self._load_lock:
            if not self._load_attempted:
                self._load_attempted = True
                try:
                    self._module = importlib.import_module(self.module_name)
                except (ImportError, OSError) as e:
                    logger.debug(
                        "TA-Lib binding could not be loaded",
                        module=self.module_name,
                        error=str(e)
                    )
                    self._module = None
        return self._module

    def is_available(self) -> bool:
        module = self._load()
        return module is not None and callable(getattr(module, CHECK_SYMBOL, None))

    def _function(self, symbol: str) -> Any:
        module = self._load()
        if module is None:
            raise TAINotInstalledError()

        function = getattr(module, symbol, None)
        if function is None:
            raise TAINotInstalledError(
                f"Installed TA-Lib does not provide {symbol}. "
                "Please upgrade it from https://ta-lib.org/",
                context={"symbol": symbol}
            )
        return function

    def output_names(self, symbol: str) -> tuple[str, ...]:
        """Declared output names of a TA-Lib function, in native order."""
        if symbol not in self._output_names:
            self._function(symbol)
            abstract = importlib.import_module(f"{self.module_name}.abstract")
            self._output_names[symbol] = tuple(abstract.Function(symbol).output_names)
        return self._output_names[symbol]

    def call(self, symbol: str, *inputs: np.ndarray, **params: Any) -> np.ndarray:
        function = self._function(symbol)
        log_native_call(logger, symbol, tuple(len(x) for x in inputs), params)
        return function(*inputs, **params)

    def call_named(self, symbol: str, *inputs: np.ndarray, **params: Any) -> dict[str, np.ndarray]:
        names = self.output_names(symbol)
        raw = self.call(symbol, *inputs, **params)

        if not isinstance(raw, tuple) or len(raw) != len(names):
            received = len(raw) if isinstance(raw, tuple) else type(raw).__name__
            raise NativeResultError(
                f"{symbol} returned {received} outputs, expected {len(names)}",
                symbol=symbol,
                expected_fields=names,
            )

        return dict(zip(names, raw))


_library: Optional[NativeLibrary] = None
_library_lock = threading.Lock()


def get_library() -> NativeLibrary:
    """Return the active native library, creating the TA-Lib one on first use."""
    global _library
    with _library_lock:
        if _library is None:
            _library = TALibLibrary()
        return _library


def set_library(library: Optional[NativeLibrary]) -> Optional[NativeLibrary]:
    """
    Install the native library used by every indicator function.

    Passing None restores lazy creation of the default TA-Lib library.

    Returns:
        The previously installed library, if any
    """
    global _library
    with _library_lock:
        previous = _library
        _library = library
        return previous


def available() -> bool:
    """Check whether the TA-Lib native library can be used. Never raises."""
    try:
        return bool(get_library().is_available())
    except Exception as e:
        logger.debug("Availability check failed", error=str(e))
        return False


def check_available() -> NativeLibrary:
    """
    Guard run before every indicator call.

    Returns:
        The active native library

    Raises:
        TAINotInstalledError: If the native library is not available
    """
    if not available():
        raise TAINotInstalledError()
    return get_library()
