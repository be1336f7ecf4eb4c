"""
Exception hierarchy for densematrix.

All exceptions inherit from MatrixError to allow catching any
library-specific error. The three contract violations a caller can
trigger (bad dimensions, bad index, incompatible operand) each have
their own class so they can be told apart.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Errors are raised before any entry is mutated
"""


class MatrixError(Exception):
    """Base exception for all densematrix errors."""
    pass


class ValidationError(MatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, e.g.
    non-numeric values or a scalar that is not a real number.
    """
    pass


class InvalidDimensionError(ValidationError):
    """
    A requested row count, column count or identity size is not a
    positive integer.

    Attributes:
        rows: Requested number of rows, if known
        columns: Requested number of columns, if known
    """

    def __init__(
        self,
        message: str,
        rows: object | None = None,
        columns: object | None = None,
    ):
        super().__init__(message)
        self.rows = rows
        self.columns = columns


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    An element, row or column index lies outside the matrix.

    Also an IndexError, so code written against plain sequences keeps
    working.

    Attributes:
        row: Offending row index, or None for a column-only access
        column: Offending column index, or None for a row-only access
        shape: (row_count, column_count) of the matrix that was indexed
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        column: int | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.column = column
        self.shape = shape


class DimensionMismatchError(ValidationError):
    """
    Operand shape is incompatible with the requested operation.

    Raised by add, subtract, multiply, set_row and set_column.

    Attributes:
        operation: Name of the operation that rejected the operand
        expected: Shape or length that was required
        actual: Shape or length that was supplied
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.expected = expected
        self.actual = actual


class PrecisionWarning(UserWarning):
    """Input values could not be represented in float32 storage."""
    pass
