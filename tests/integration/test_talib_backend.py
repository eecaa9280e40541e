"""End-to-end tests against the real TA-Lib binding."""

import numpy as np
import pytest

talib = pytest.importorskip("talib")

import tai_app  # noqa: E402
from tai_app.errors import InvalidParameterError  # noqa: E402
from tai_app.native import TALibLibrary, set_library  # noqa: E402
from tai_app.native import outputs  # noqa: E402


@pytest.fixture(autouse=True)
def talib_library():
    previous = set_library(TALibLibrary())
    yield
    set_library(previous)


@pytest.fixture
def closes():
    rng = np.random.default_rng(7)
    return 100.0 + np.cumsum(rng.normal(0.0, 1.0, 200))


class TestTALibBackend:
    """Test indicators computed by TA-Lib itself."""

    def test_available(self):
        """The binding loads."""
        assert tai_app.available() is True

    def test_sma_matches_numpy(self, closes):
        """SMA equals a rolling mean after its lookback."""
        result = tai_app.sma(closes, period=10)

        assert np.isnan(result[:9]).all()
        expected = np.convolve(closes, np.ones(10) / 10, mode="valid")
        np.testing.assert_allclose(result[9:], expected, rtol=1e-10)

    def test_bbands_ordering(self, closes):
        """Upper band >= middle band >= lower band wherever defined."""
        upper, middle, lower = tai_app.bbands(closes, period=20)
        defined = ~np.isnan(middle)

        assert defined.sum() == len(closes) - 19
        assert (upper[defined] >= middle[defined]).all()
        assert (middle[defined] >= lower[defined]).all()

    def test_macd_histogram(self, closes):
        """histogram = macd - signal."""
        macd, signal, histogram = tai_app.macd(closes)
        defined = ~np.isnan(histogram)

        np.testing.assert_allclose(histogram[defined], (macd - signal)[defined], atol=1e-10)

    def test_rsi_bounds(self, closes):
        """RSI stays within 0-100."""
        result = tai_app.rsi(closes, period=14)
        defined = result[~np.isnan(result)]

        assert ((defined >= 0) & (defined <= 100)).all()

    def test_declared_outputs_match_adapters(self):
        """The binding's output names agree with every adapter."""
        library = TALibLibrary()
        for symbol, adapter in outputs.ADAPTERS.items():
            assert library.output_names(symbol) == adapter.fields

    def test_pattern_values(self, closes):
        """Doji marks matching bars with 100 and others with 0."""
        opens = np.roll(closes, 1)
        opens[0] = closes[0]
        highs = np.maximum(opens, closes) + 0.5
        lows = np.minimum(opens, closes) - 0.5

        result = tai_app.cdl_doji(opens, highs, lows, closes)

        assert set(np.unique(result)) <= {0, 100}

    def test_validation_still_applies(self):
        """Validation runs before TA-Lib sees the data."""
        with pytest.raises(InvalidParameterError, match="cannot exceed"):
            tai_app.sma([1.0, 2.0, 3.0], period=5)
