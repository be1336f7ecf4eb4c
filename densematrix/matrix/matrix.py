"""
Matrix: dense, fixed-shape grid of float32 entries.

Two APIs are layered on the one type:

    Destructive (mutate in place, return None or the prior value):
        set, set_row, set_column, fill, scale, add, randomise

    Pure (leave operands untouched, return a new Matrix):
        copy, transpose, plus, minus, negate, times,
        and the operators + - * @ and unary -

Every Matrix owns its store outright. Nothing that leaves this module
is a view of it: rows, columns, to_array() and iteration all hand out
copies, and every pure operation allocates a fresh store.
"""

from __future__ import annotations

from typing import Any, Iterator, TextIO

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core import rng
from densematrix.core.exceptions import ValidationError
from densematrix.core.precision import DTYPE, FP32, is_close
from densematrix.core.validation import (
    check_array_2d,
    check_column_index,
    check_dimension,
    check_inner_dimensions,
    check_position,
    check_row_index,
    check_same_shape,
    check_scalar,
    check_shape,
    check_values,
    is_scalar,
)
from densematrix.matrix import _format
from densematrix.matrix._kernels import combine_hash, matmul_ascending


class Matrix:
    """
    Dense real matrix with float32 entries.

    Shape is fixed at construction; contents are mutable. Indices are
    zero-based and must lie in [0, row_count) / [0, column_count);
    negative indices are rejected rather than counted from the end.

    Construction:
        Matrix(rows, columns)        zero-filled
        Matrix.zero(rows, columns)   same as above
        Matrix.unit(n)               n x n identity
        Matrix.random(rows, columns) entries uniform on [-1, 1)
        Matrix.from_array(values)    copy of a 2D array-like

    Examples:
        >>> a = Matrix.from_array([[1, 2], [3, 4]])
        >>> b = Matrix.from_array([[5, 6], [7, 8]])
        >>> (a * b).tolist()
        [[19.0, 22.0], [43.0, 50.0]]
        >>> a[1, 0]
        3.0
    """

    __slots__ = ("_data",)

    # numpy must not treat a Matrix as an array operand: np.float32(2) * m
    # has to reach Matrix.__rmul__.
    __array_ufunc__ = None

    def __init__(self, rows: int, columns: int):
        """
        Create a zero-filled matrix.

        Args:
            rows: Number of rows. Must be a positive integer.
            columns: Number of columns. Must be a positive integer.

        Raises:
            InvalidDimensionError: If either count is not a positive integer
        """
        shape = check_shape(rows, columns)
        self._data: NDArray[np.float32] = np.zeros(shape, dtype=DTYPE)

    @classmethod
    def _wrap(cls, data: NDArray[np.float32]) -> Matrix:
        """Adopt an already validated, exclusively owned float32 array."""
        m = cls.__new__(cls)
        m._data = data
        return m

    # --- Factories ---

    @classmethod
    def zero(cls, rows: int, columns: int) -> Matrix:
        """Zero matrix; identical to Matrix(rows, columns)."""
        return cls(rows, columns)

    @classmethod
    def unit(cls, size: int) -> Matrix:
        """
        Identity matrix: 1.0 on the diagonal, 0.0 elsewhere.

        Raises:
            InvalidDimensionError: If size is not a positive integer
        """
        n = check_dimension(size, "size")
        return cls._wrap(np.eye(n, dtype=DTYPE))

    @classmethod
    def random(cls, rows: int, columns: int) -> Matrix:
        """
        Matrix with every entry drawn independently and uniformly from
        [-1.0, 1.0).

        Raises:
            InvalidDimensionError: If either count is not a positive integer
        """
        return cls._wrap(rng.uniform(check_shape(rows, columns)))

    @classmethod
    def from_array(cls, values: ArrayLike) -> Matrix:
        """
        Build a matrix from nested sequences or a 2D array.

        The input is copied and converted to float32. Finite values
        beyond the float32 range are stored as inf with a
        PrecisionWarning.

        Args:
            values: 2D array-like of real numbers (bools count as 0 and 1),
                rows first

        Raises:
            ValidationError: If values are non-numeric or rows are ragged
            InvalidDimensionError: If values are not 2D or an axis is empty
        """
        return cls._wrap(check_array_2d(values, "values"))

    # --- Shape ---

    @property
    def row_count(self) -> int:
        return self._data.shape[0]

    @property
    def column_count(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(row_count, column_count)."""
        return self._data.shape[0], self._data.shape[1]

    # --- Element access ---

    def get(self, row: int, col: int) -> float:
        """
        Value of the entry at (row, col).

        Raises:
            IndexOutOfRangeError: If the position is outside the matrix
        """
        r, c = check_position(row, col, self.shape)
        return float(self._data[r, c])

    def set(self, row: int, col: int, value: float) -> float:
        """
        Overwrite the entry at (row, col).

        Returns:
            The value the entry held before the write

        Raises:
            IndexOutOfRangeError: If the position is outside the matrix
            ValidationError: If value is not a real number
        """
        r, c = check_position(row, col, self.shape)
        new_value = check_scalar(value, "value")
        old_value = float(self._data[r, c])
        self._data[r, c] = new_value
        return old_value

    def get_row(self, row: int) -> NDArray[np.float32]:
        """
        Snapshot of one row, left to right.

        Raises:
            IndexOutOfRangeError: If row is outside [0, row_count)
        """
        r = check_row_index(row, self.shape)
        return self._data[r, :].copy()

    def get_column(self, col: int) -> NDArray[np.float32]:
        """
        Snapshot of one column, top to bottom.

        Raises:
            IndexOutOfRangeError: If col is outside [0, column_count)
        """
        c = check_column_index(col, self.shape)
        return self._data[:, c].copy()

    def set_row(self, row: int, values: ArrayLike) -> NDArray[np.float32]:
        """
        Overwrite one row.

        Args:
            row: Index of the row to overwrite
            values: Exactly column_count real numbers

        Returns:
            Snapshot of the row as it was before the write

        Raises:
            IndexOutOfRangeError: If row is outside [0, row_count)
            DimensionMismatchError: If values does not hold column_count numbers
        """
        r = check_row_index(row, self.shape)
        new_values = check_values(values, self.column_count, "values", "set_row")
        old_values = self._data[r, :].copy()
        self._data[r, :] = new_values
        return old_values

    def set_column(self, col: int, values: ArrayLike) -> NDArray[np.float32]:
        """
        Overwrite one column.

        Args:
            col: Index of the column to overwrite
            values: Exactly row_count real numbers

        Returns:
            Snapshot of the column as it was before the write

        Raises:
            IndexOutOfRangeError: If col is outside [0, column_count)
            DimensionMismatchError: If values does not hold row_count numbers
        """
        c = check_column_index(col, self.shape)
        new_values = check_values(values, self.row_count, "values", "set_column")
        old_values = self._data[:, c].copy()
        self._data[:, c] = new_values
        return old_values

    def __getitem__(self, key: int | tuple[int, int]) -> float | NDArray[np.float32]:
        # m[r, c] -> entry, m[r] -> row snapshot
        if isinstance(key, tuple):
            if len(key) != 2:
                raise TypeError(
                    f"matrix index must be (row, col) or row, got {len(key)} indices"
                )
            return self.get(*key)
        return self.get_row(key)

    def __setitem__(self, key: int | tuple[int, int], value: Any) -> None:
        if isinstance(key, tuple):
            if len(key) != 2:
                raise TypeError(
                    f"matrix index must be (row, col) or row, got {len(key)} indices"
                )
            self.set(key[0], key[1], value)
        else:
            self.set_row(key, value)

    def __iter__(self) -> Iterator[NDArray[np.float32]]:
        """Row snapshots, top to bottom."""
        for r in range(self.row_count):
            yield self._data[r, :].copy()

    # --- Bulk mutation ---

    def fill(self, n: float) -> None:
        """Set every entry to n."""
        self._data.fill(check_scalar(n, "n"))

    def randomise(self) -> None:
        """Overwrite every entry with a fresh uniform draw from [-1.0, 1.0)."""
        self._data[...] = rng.uniform(self.shape)

    def randomize(self) -> None:
        """Alias of randomise()."""
        self.randomise()

    def scale(self, k: float) -> None:
        """Multiply every entry by the scalar k, in place."""
        self._data *= check_scalar(k, "k")

    def add(self, other: Matrix) -> None:
        """
        Add another matrix of the same shape to this one, in place.

        Raises:
            DimensionMismatchError: If the shapes differ. Nothing is
                modified in that case.
        """
        other = _check_matrix(other, "other")
        check_same_shape(self.shape, other.shape, "add")
        self._data += other._data

    # --- Derived values ---

    def copy(self) -> Matrix:
        """Deep copy with an independent store."""
        return Matrix._wrap(self._data.copy())

    def transpose(self) -> Matrix:
        """New matrix with rows and columns swapped; self is unchanged."""
        return Matrix._wrap(self._data.T.copy())

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def plus(self, other: Matrix) -> Matrix:
        """
        Sum of two matrices of equal shape.

        Raises:
            DimensionMismatchError: If the shapes differ
        """
        result = self.copy()
        result.add(other)
        return result

    def minus(self, other: Matrix) -> Matrix:
        """
        Difference self - other, computed as self + (-other).

        Raises:
            DimensionMismatchError: If the shapes differ
        """
        return self.plus(_check_matrix(other, "other").negate())

    def negate(self) -> Matrix:
        """Matrix scaled by -1."""
        return self.times(-1)

    def times(self, other: Matrix | float) -> Matrix:
        """
        Product with a matrix or a scalar.

        A scalar scales a copy of self. A matrix gives the matrix product
        self * other, with each entry accumulated over the shared index
        in ascending order.

        Raises:
            DimensionMismatchError: If self.column_count != other.row_count
            ValidationError: If other is neither a Matrix nor a real number
        """
        if isinstance(other, Matrix):
            check_inner_dimensions(self.shape, other.shape)
            return Matrix._wrap(matmul_ascending(self._data, other._data))
        k = check_scalar(other, "other")
        result = self.copy()
        result.scale(k)
        return result

    # --- Operators ---

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.minus(other)

    def __neg__(self) -> Matrix:
        return self.negate()

    def __mul__(self, other: Any) -> Matrix:
        if not (isinstance(other, Matrix) or is_scalar(other)):
            return NotImplemented
        return self.times(other)

    def __rmul__(self, other: Any) -> Matrix:
        # scalar * matrix; matrix * matrix never reaches here
        if not is_scalar(other):
            return NotImplemented
        return self.times(other)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.times(other)

    # --- Equality and hashing ---

    def equals(self, other: Any) -> bool:
        """
        Exact structural equality.

        True iff other is a Matrix of the same shape whose entries are all
        equal under IEEE comparison: no tolerance, NaN never equals NaN,
        -0.0 equals 0.0.
        """
        if not isinstance(other, Matrix):
            return False
        return bool(np.array_equal(self._data, other._data))

    def __eq__(self, other: Any) -> bool:
        return self.equals(other)

    def __ne__(self, other: Any) -> bool:
        return not self.equals(other)

    def hash_code(self) -> int:
        """
        Deterministic signed 32-bit hash of shape-ordered contents.

        Seed 23, then h = h * 31 + entry_hash per entry in row-major
        order with 32-bit wraparound. Equal matrices hash equally. Stable
        across processes (no dependence on PYTHONHASHSEED).
        """
        return combine_hash(self._data)

    def __hash__(self) -> int:
        # Contents are mutable: a matrix mutated while it is a dict key or
        # set member will not be found again.
        return self.hash_code()

    def is_close(
        self,
        other: Matrix,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Approximate equality for results of float32 arithmetic.

        Args:
            other: Matrix to compare against
            rtol: Relative tolerance (default: float32 tier)
            atol: Absolute tolerance (default: float32 tier)

        Returns:
            False if the shapes differ, otherwise whether every entry
            satisfies |self - other| <= atol + rtol * |other|
        """
        other = _check_matrix(other, "other")
        if self.shape != other.shape:
            return False
        return is_close(
            self._data,
            other._data,
            rtol=FP32.rtol if rtol is None else rtol,
            atol=FP32.atol if atol is None else atol,
        )

    # --- Conversion and display ---

    def to_array(self) -> NDArray[np.float32]:
        """Copy of the entries as a (row_count, column_count) float32 array."""
        return self._data.copy()

    def tolist(self) -> list[list[float]]:
        return self._data.tolist()

    def __str__(self) -> str:
        return _format.format_table(self._data)

    def __repr__(self) -> str:
        return _format.format_repr(self._data)

    def print(self, file: TextIO | None = None) -> None:
        """Write str(self) and a line terminator to stdout (or file)."""
        _format.print_matrix(self, file=file)


def _check_matrix(value: Any, name: str) -> Matrix:
    if not isinstance(value, Matrix):
        raise ValidationError(
            f"{name}: expected Matrix, got {type(value).__name__}"
        )
    return value
