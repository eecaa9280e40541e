"""Unit tests for series and parameter validation."""

import numpy as np
import pytest

from tai_app.data import (
    MAX_PERIOD,
    MAType,
    shortest_length,
    validate_ma_type,
    validate_period,
    validate_periods,
    validate_series,
)
from tai_app.errors import InvalidParameterError


class ArrayBacked:
    """Column-like container exposing only the numpy array protocol."""

    def __init__(self, values):
        self._values = np.asarray(values)

    def __array__(self, dtype=None, copy=None):
        return self._values if dtype is None else self._values.astype(dtype)


class TestValidateSeries:
    """Test suite for validate_series."""

    def test_list_converted_to_float64(self):
        """Lists of ints and floats come back as float64 arrays."""
        result = validate_series([1, 2.5, 3])

        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        assert result.tolist() == [1.0, 2.5, 3.0]

    def test_tuple_accepted(self):
        """Any sequence is a series."""
        assert len(validate_series((1.0, 2.0))) == 2

    def test_result_is_contiguous(self):
        """Strided views are copied into contiguous memory."""
        view = np.arange(20, dtype=np.float64)[::2]
        result = validate_series(view)

        assert result.flags["C_CONTIGUOUS"]
        assert result.tolist() == view.tolist()

    def test_nan_values_allowed(self):
        """NaN is a number; TA-Lib handles it."""
        result = validate_series([1.0, float("nan"), 3.0])
        assert np.isnan(result[1])

    def test_none(self):
        """None is reported with the series name."""
        with pytest.raises(InvalidParameterError, match="Prices array cannot be None") as exc_info:
            validate_series(None)
        assert exc_info.value.parameter == "prices"

    def test_empty(self):
        """Empty series are rejected."""
        with pytest.raises(InvalidParameterError, match="High array cannot be empty"):
            validate_series([], "high")

    def test_empty_numpy(self):
        """Empty arrays are rejected too."""
        with pytest.raises(InvalidParameterError, match="cannot be empty"):
            validate_series(np.array([]))

    @pytest.mark.parametrize("value", [3.14, "1 2 3", b"123", {"a": 1}, {1.0, 2.0}])
    def test_not_an_array(self, value):
        """Scalars, strings, mappings and sets are not series."""
        with pytest.raises(InvalidParameterError, match="must be an array"):
            validate_series(value)

    def test_two_dimensional(self):
        """Matrices are not series."""
        with pytest.raises(InvalidParameterError, match="one-dimensional") as exc_info:
            validate_series(np.zeros((3, 2)))
        assert exc_info.value.value == (3, 2)

    def test_nested_list_is_not_one_dimensional(self):
        """Nested lists are checked after conversion."""
        with pytest.raises(InvalidParameterError, match="one-dimensional") as exc_info:
            validate_series([[1.0, 2.0], [3.0, 4.0]], "close")

        assert exc_info.value.parameter == "close"
        assert exc_info.value.value == (2, 2)

    def test_numpy_scalar_is_not_a_series(self):
        """A numpy scalar converts to a 0-d array and is rejected."""
        with pytest.raises(InvalidParameterError, match="one-dimensional"):
            validate_series(np.float64(3.0))

    def test_array_protocol_accepted(self):
        """Objects exposing __array__, such as pandas Series, are series."""
        result = validate_series(ArrayBacked([4, 5, 6]))

        assert result.dtype == np.float64
        assert result.tolist() == [4.0, 5.0, 6.0]

    def test_sized_iterable_accepted(self):
        """Sized containers such as range are series."""
        assert validate_series(range(1, 4)).tolist() == [1.0, 2.0, 3.0]

    def test_non_numeric(self):
        """Non-numeric elements are rejected."""
        with pytest.raises(InvalidParameterError, match="only numbers"):
            validate_series([1.0, None, "x"])

    def test_is_value_error(self):
        """Callers catching ValueError still see validation failures."""
        with pytest.raises(ValueError):
            validate_series([])


class TestValidatePeriod:
    """Test suite for validate_period."""

    def test_valid(self):
        """A period within the data is returned as int."""
        assert validate_period(np.int64(5), 10) == 5
        assert type(validate_period(np.int64(5), 10)) is int

    def test_equal_to_size(self):
        """The whole series can be one window."""
        assert validate_period(10, 10) == 10

    @pytest.mark.parametrize("period", [0, -1])
    def test_not_positive(self, period):
        """Zero and negative periods are rejected."""
        with pytest.raises(InvalidParameterError, match="Period must be positive"):
            validate_period(period, 10)

    def test_too_long(self):
        """Periods longer than the data are rejected with both numbers."""
        with pytest.raises(InvalidParameterError) as exc_info:
            validate_period(11, 10, "fast_period")

        assert str(exc_info.value) == "Period (11) cannot exceed data size (10)"
        assert exc_info.value.parameter == "fast_period"
        assert exc_info.value.context == {"data_size": 10}

    @pytest.mark.parametrize("period", [2.0, "5", None, True])
    def test_not_integer(self, period):
        """Floats, strings, None and booleans are not periods."""
        with pytest.raises(InvalidParameterError, match="must be an integer"):
            validate_period(period, 10)

    def test_validate_periods_names_first_failure(self):
        """validate_periods reports the first offending name."""
        with pytest.raises(InvalidParameterError) as exc_info:
            validate_periods(10, fast_period=3, slow_period=30, signal_period=0)
        assert exc_info.value.parameter == "slow_period"

    def test_max_period(self):
        """TA-Lib's own ceiling."""
        assert MAX_PERIOD == 100_000


class TestHelpers:
    """Test suite for shortest_length and validate_ma_type."""

    def test_shortest_length(self):
        """The shortest of several series bounds the period."""
        assert shortest_length(np.ones(5), np.ones(3), np.ones(9)) == 3

    def test_ma_type_enum_and_int(self):
        """MAType members and plain ints are both accepted."""
        assert validate_ma_type(MAType.T3) == 8
        assert validate_ma_type(2) == MAType.WMA

    @pytest.mark.parametrize("value", [-1, 9, 1.0, False])
    def test_ma_type_rejected(self, value):
        """Values outside 0-8 or of the wrong type are rejected."""
        with pytest.raises(InvalidParameterError):
            validate_ma_type(value)

    def test_ma_type_values(self):
        """The enum mirrors TA-Lib's MA_Type numbering."""
        assert [member.name for member in MAType] == [
            "SMA", "EMA", "WMA", "DEMA", "TEMA", "TRIMA", "KAMA", "MAMA", "T3",
        ]
        assert [int(member) for member in MAType] == list(range(9))
