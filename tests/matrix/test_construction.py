"""
Tests for Matrix construction and factories.
"""

import numpy as np
import pytest

import densematrix
from densematrix import InvalidDimensionError, Matrix, PrecisionWarning, ValidationError


class TestConstructor:

    @pytest.mark.parametrize("rows, cols", [(1, 1), (2, 3), (5, 1), (1, 7)])
    def test_zero_filled(self, rows, cols):
        m = Matrix(rows, cols)
        assert m.shape == (rows, cols)
        assert m.row_count == rows
        assert m.column_count == cols
        np.testing.assert_array_equal(m.to_array(), np.zeros((rows, cols)))

    @pytest.mark.parametrize("rows, cols", [(0, 5), (-1, 3), (3, 0), (2, -2), (0, 0)])
    def test_non_positive_rejected(self, rows, cols):
        with pytest.raises(InvalidDimensionError):
            Matrix(rows, cols)

    def test_non_integer_rejected(self):
        with pytest.raises(InvalidDimensionError):
            Matrix(2.5, 3)

    def test_storage_is_float32(self):
        assert Matrix(2, 2).to_array().dtype == np.float32


class TestZero:

    @pytest.mark.parametrize("rows, cols", [(1, 1), (3, 4), (10, 2)])
    def test_every_entry_zero(self, rows, cols):
        m = Matrix.zero(rows, cols)
        assert all(m.get(r, c) == 0.0 for r in range(rows) for c in range(cols))

    def test_equals_constructor(self):
        assert Matrix.zero(2, 3) == Matrix(2, 3)

    def test_invalid(self):
        with pytest.raises(InvalidDimensionError):
            Matrix.zero(0, 1)


class TestUnit:

    @pytest.mark.parametrize("n", [1, 2, 3, 6])
    def test_identity(self, n):
        m = Matrix.unit(n)
        assert m.shape == (n, n)
        for r in range(n):
            for c in range(n):
                assert m.get(r, c) == (1.0 if r == c else 0.0)

    @pytest.mark.parametrize("n", [0, -3])
    def test_invalid_size(self, n):
        with pytest.raises(InvalidDimensionError):
            Matrix.unit(n)


class TestRandom:

    def test_shape_and_range(self):
        m = Matrix.random(20, 30)
        data = m.to_array()
        assert m.shape == (20, 30)
        assert np.all(data >= -1.0)
        assert np.all(data < 1.0)

    def test_entries_independent(self):
        data = Matrix.random(10, 10).to_array()
        assert len(np.unique(data)) > 90

    def test_rapid_succession_uncorrelated(self):
        first = Matrix.random(5, 5)
        second = Matrix.random(5, 5)
        assert first != second

    def test_reproducible_with_seed(self):
        densematrix.seed(99)
        first = Matrix.random(3, 3)
        densematrix.seed(99)
        second = Matrix.random(3, 3)
        assert first == second

    @pytest.mark.parametrize("rows, cols", [(0, 2), (2, -1)])
    def test_invalid(self, rows, cols):
        with pytest.raises(InvalidDimensionError):
            Matrix.random(rows, cols)


class TestFromArray:

    def test_nested_lists(self):
        m = Matrix.from_array([[1, 2, 3], [4, 5, 6]])
        assert m.shape == (2, 3)
        assert m.get(1, 2) == 6.0

    def test_input_not_aliased(self):
        source = np.array([[1.0, 2.0]], dtype=np.float32)
        m = Matrix.from_array(source)
        source[0, 0] = 42.0
        assert m.get(0, 0) == 1.0

    def test_values_rounded_to_float32(self):
        m = Matrix.from_array([[0.1]])
        assert m.get(0, 0) == float(np.float32(0.1))

    def test_not_2d(self):
        with pytest.raises(InvalidDimensionError):
            Matrix.from_array([1.0, 2.0])

    def test_empty(self):
        with pytest.raises(InvalidDimensionError):
            Matrix.from_array([[]])

    def test_non_numeric(self):
        with pytest.raises(ValidationError):
            Matrix.from_array([["a", "b"]])

    def test_bool_values(self):
        m = Matrix.from_array([[True, False], [False, True]])
        assert m == Matrix.unit(2)

    def test_overflow_warns(self):
        with pytest.warns(PrecisionWarning):
            m = Matrix.from_array([[1e40]])
        assert m.get(0, 0) == float("inf")
