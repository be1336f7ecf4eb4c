"""
Input validation utilities for densematrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Every mutating Matrix method
runs its validators before touching the store, so a failed call never
leaves a partial write behind.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No Python-style negative indexing
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numbers
import operator
import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    PrecisionWarning,
    ValidationError,
)
from densematrix.core.precision import FLOAT32_MAX, to_float32


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a row count, column count or identity size.

    Args:
        value: Requested size
        name: Parameter name for error messages

    Returns:
        The size as a plain int

    Raises:
        InvalidDimensionError: If value is not a positive integer
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidDimensionError(
            f"{name}: expected a positive integer, got {type(value).__name__} {value!r}"
        )
    size = int(value)
    if size <= 0:
        raise InvalidDimensionError(
            f"{name}: matrix must have a positive number of rows and columns, got {size}"
        )
    return size


def check_shape(rows: Any, columns: Any) -> tuple[int, int]:
    """
    Verify a (rows, columns) pair.

    Raises:
        InvalidDimensionError: If either count is not a positive integer.
            The exception carries both requested values.
    """
    try:
        return check_dimension(rows, "rows"), check_dimension(columns, "columns")
    except InvalidDimensionError as e:
        raise InvalidDimensionError(str(e), rows=rows, columns=columns) from None


def _as_index(value: Any, name: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"{name}: indices must be integers, got {type(value).__name__}"
        ) from None


def check_row_index(row: Any, shape: tuple[int, int]) -> int:
    """
    Verify a row index against a matrix shape.

    Raises:
        TypeError: If row is not an integer
        IndexOutOfRangeError: If row is outside [0, row_count)
    """
    index = _as_index(row, "row")
    if not 0 <= index < shape[0]:
        raise IndexOutOfRangeError(
            f"row: index {index} out of range for matrix with {shape[0]} rows",
            row=index,
            shape=shape,
        )
    return index


def check_column_index(column: Any, shape: tuple[int, int]) -> int:
    """
    Verify a column index against a matrix shape.

    Raises:
        TypeError: If column is not an integer
        IndexOutOfRangeError: If column is outside [0, column_count)
    """
    index = _as_index(column, "column")
    if not 0 <= index < shape[1]:
        raise IndexOutOfRangeError(
            f"column: index {index} out of range for matrix with {shape[1]} columns",
            column=index,
            shape=shape,
        )
    return index


def check_position(row: Any, column: Any, shape: tuple[int, int]) -> tuple[int, int]:
    """
    Verify a (row, column) position against a matrix shape.

    Raises:
        TypeError: If either index is not an integer
        IndexOutOfRangeError: If the position is outside the matrix
    """
    r = _as_index(row, "row")
    c = _as_index(column, "column")
    if not (0 <= r < shape[0] and 0 <= c < shape[1]):
        raise IndexOutOfRangeError(
            f"position ({r}, {c}) must be within matrix dimensions "
            f"{shape[0]}x{shape[1]}",
            row=r,
            column=c,
            shape=shape,
        )
    return r, c


def is_scalar(value: Any) -> bool:
    """True for real numbers (Python or numpy), which act as scalars."""
    return isinstance(value, numbers.Real)


def check_scalar(value: Any, name: str, stacklevel: int = 3) -> np.float32:
    """
    Verify a scalar operand and convert it to float32.

    Finite values beyond the float32 range, including integers too large
    for a Python float, become +/-inf with a PrecisionWarning.

    Args:
        value: Scalar to validate
        name: Parameter name for error and warning messages
        stacklevel: Passed to warnings.warn so the warning points at
                    the public call site

    Raises:
        ValidationError: If value is not a real number
    """
    if not is_scalar(value):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    try:
        as_float = float(value)
    except OverflowError:
        as_float = float("inf") if value > 0 else float("-inf")
        overflowed = True
    else:
        overflowed = math.isfinite(as_float) and abs(as_float) > FLOAT32_MAX
    if overflowed:
        warnings.warn(
            f"{name}: value exceeds the float32 range and was stored as "
            f"{'inf' if as_float > 0 else '-inf'}",
            PrecisionWarning,
            stacklevel=stacklevel,
        )
    with np.errstate(over='ignore'):
        return np.float32(as_float)


def _check_numeric(values: ArrayLike, name: str) -> NDArray[Any]:
    """Convert to ndarray and reject anything that is not bool, int or float."""
    try:
        result = np.asarray(values)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types, "
            f"ragged rows or non-numeric data"
        )

    if not (result.dtype == np.bool_
            or np.issubdtype(result.dtype, np.integer)
            or np.issubdtype(result.dtype, np.floating)):
        raise ValidationError(
            f"{name}: non-real dtype {result.dtype}, expected bool, integer or float data"
        )

    return result


def check_values(
    values: ArrayLike,
    length: int,
    name: str,
    operation: str,
) -> NDArray[np.float32]:
    """
    Validate a row or column of replacement values.

    Args:
        values: 1-D array-like of numbers
        length: Required number of values
        name: Parameter name for error messages
        operation: Calling operation, recorded on the exception

    Returns:
        New float32 array of the given length

    Raises:
        ValidationError: If values are not numeric
        DimensionMismatchError: If values are not 1-D or have the wrong length
    """
    array = _check_numeric(values, name)
    if array.ndim != 1:
        raise DimensionMismatchError(
            f"{name}: expected 1D sequence, got {array.ndim}D with shape {array.shape}",
            operation=operation,
            expected=length,
            actual=array.shape,
        )
    if array.shape[0] != length:
        raise DimensionMismatchError(
            f"{name}: {operation} requires {length} values, got {array.shape[0]}",
            operation=operation,
            expected=length,
            actual=array.shape[0],
        )
    return to_float32(array, name, stacklevel=4)


def check_array_2d(values: ArrayLike, name: str) -> NDArray[np.float32]:
    """
    Validate the nested values a matrix is built from.

    Returns:
        New C-ordered float32 array of shape (rows, columns)

    Raises:
        ValidationError: If values are not numeric (or rows are ragged)
        InvalidDimensionError: If values are not 2D or have an empty axis
    """
    array = _check_numeric(values, name)
    if array.ndim != 2:
        raise InvalidDimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )
    rows, columns = array.shape
    if rows == 0 or columns == 0:
        raise InvalidDimensionError(
            f"{name}: matrix must have a positive number of rows and columns, "
            f"got shape {array.shape}",
            rows=rows,
            columns=columns,
        )
    return to_float32(array, name, stacklevel=4)


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        DimensionMismatchError: If the shapes differ in either dimension
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: operands must be of equal dimension, "
            f"got {left[0]}x{left[1]} and {right[0]}x{right[1]}",
            operation=operation,
            expected=left,
            actual=right,
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, int],
) -> None:
    """
    Verify two operands can be multiplied.

    Raises:
        DimensionMismatchError: If the left column count differs from the
            right row count
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"multiply: number of columns in left matrix ({left[1]}) must equal "
            f"number of rows in right matrix ({right[0]})",
            operation="multiply",
            expected=left[1],
            actual=right[0],
        )
