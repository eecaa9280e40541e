"""
Fixed output contracts of the multi-output TA-Lib functions.

Each adapter names the native outputs, in the order callers receive them,
so positional unpacking (``upper, middle, lower = bbands(...)``) never
depends on how the binding happens to order or label its results.
"""

from dataclasses import dataclass
from typing import Any, Mapping

import numpy as np

from ..errors import NativeResultError
from .library import NativeLibrary


@dataclass(frozen=True)
class OutputAdapter:
    """Maps the named outputs of one native function to a public tuple."""
    symbol: str
    fields: tuple[str, ...]

    def adapt(self, named: Mapping[str, np.ndarray]) -> tuple[np.ndarray, ...]:
        """Pick the declared fields out of a named native result."""
        missing = [field for field in self.fields if field not in named]
        if missing:
            raise NativeResultError(
                f"{self.symbol} result is missing {', '.join(missing)}",
                symbol=self.symbol,
                expected_fields=self.fields,
                received_fields=tuple(named),
            )
        return tuple(named[field] for field in self.fields)

    def call(self, library: NativeLibrary, *inputs: np.ndarray, **params: Any) -> tuple[np.ndarray, ...]:
        """Forward the call and return the outputs in public order."""
        return self.adapt(library.call_named(self.symbol, *inputs, **params))


BANDS_FIELDS = ("upperband", "middleband", "lowerband")
MACD_FIELDS = ("macd", "macdsignal", "macdhist")
FAST_STOCH_FIELDS = ("fastk", "fastd")

# Overlap studies
BBANDS = OutputAdapter("BBANDS", BANDS_FIELDS)
ACCBANDS = OutputAdapter("ACCBANDS", BANDS_FIELDS)
MAMA = OutputAdapter("MAMA", ("mama", "fama"))

# Momentum indicators
MACD = OutputAdapter("MACD", MACD_FIELDS)
MACDEXT = OutputAdapter("MACDEXT", MACD_FIELDS)
MACDFIX = OutputAdapter("MACDFIX", MACD_FIELDS)
STOCH = OutputAdapter("STOCH", ("slowk", "slowd"))
STOCHF = OutputAdapter("STOCHF", FAST_STOCH_FIELDS)
STOCHRSI = OutputAdapter("STOCHRSI", FAST_STOCH_FIELDS)
AROON = OutputAdapter("AROON", ("aroondown", "aroonup"))

# Cycle indicators
HT_PHASOR = OutputAdapter("HT_PHASOR", ("inphase", "quadrature"))
HT_SINE = OutputAdapter("HT_SINE", ("sine", "leadsine"))

ADAPTERS = {
    adapter.symbol: adapter
    for adapter in (
        BBANDS, ACCBANDS, MAMA,
        MACD, MACDEXT, MACDFIX, STOCH, STOCHF, STOCHRSI, AROON,
        HT_PHASOR, HT_SINE,
    )
}
