"""
Tests for densematrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via MatrixError)
    - Diagnostic attributes on InvalidDimensionError, IndexOutOfRangeError,
      DimensionMismatchError
    - Default attribute values (None for optional attributes)
"""

import pytest

from densematrix.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    MatrixError,
    PrecisionWarning,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via MatrixError."""

    def test_validation_error_is_matrix_error(self):
        with pytest.raises(MatrixError):
            raise ValidationError("bad input")

    @pytest.mark.parametrize("exc", [
        InvalidDimensionError("rows: got 0"),
        IndexOutOfRangeError("row: index 5"),
        DimensionMismatchError("add: 2x2 and 3x3"),
    ])
    def test_contract_errors_are_validation_errors(self, exc):
        with pytest.raises(ValidationError):
            raise exc

    def test_index_out_of_range_is_index_error(self):
        """Plain-Python callers catching IndexError still work."""
        with pytest.raises(IndexError):
            raise IndexOutOfRangeError("out of range")

    def test_kinds_are_distinguishable(self):
        err = DimensionMismatchError("mismatch")
        assert not isinstance(err, InvalidDimensionError)
        assert not isinstance(err, IndexOutOfRangeError)
        assert not isinstance(InvalidDimensionError("x"), IndexOutOfRangeError)

    def test_precision_warning_is_user_warning(self):
        assert issubclass(PrecisionWarning, UserWarning)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestInvalidDimensionError:

    def test_all_attributes(self):
        err = InvalidDimensionError("rows must be positive", rows=0, columns=5)
        assert str(err) == "rows must be positive"
        assert err.rows == 0
        assert err.columns == 5

    def test_defaults_are_none(self):
        err = InvalidDimensionError("bad size")
        assert err.rows is None
        assert err.columns is None


class TestIndexOutOfRangeError:

    def test_all_attributes(self):
        err = IndexOutOfRangeError("outside", row=2, column=2, shape=(2, 2))
        assert err.row == 2
        assert err.column == 2
        assert err.shape == (2, 2)

    def test_defaults_are_none(self):
        err = IndexOutOfRangeError("outside")
        assert err.row is None
        assert err.column is None
        assert err.shape is None


class TestDimensionMismatchError:

    def test_all_attributes(self):
        err = DimensionMismatchError(
            "multiply: 3 != 4",
            operation="multiply",
            expected=3,
            actual=4,
        )
        assert str(err) == "multiply: 3 != 4"
        assert err.operation == "multiply"
        assert err.expected == 3
        assert err.actual == 4

    def test_catchable_with_attributes(self):
        with pytest.raises(DimensionMismatchError) as exc_info:
            raise DimensionMismatchError(
                "add", operation="add", expected=(2, 2), actual=(3, 3)
            )
        assert exc_info.value.expected == (2, 2)
        assert exc_info.value.actual == (3, 3)
