"""
densematrix: small dense float32 matrices for Python.

A foundational numeric building block for client code such as small
neural-network or linear-algebra experiments. Shapes are fixed at
construction, contents are mutable, and every arithmetic operator
returns a new, independently stored matrix.

Submodules:
    matrix: The Matrix type and its text output
    core: Exceptions, validation, precision constants, random source
"""

__version__ = "0.1.0"

from densematrix.core import (
    MatrixError,
    ValidationError,
    InvalidDimensionError,
    IndexOutOfRangeError,
    DimensionMismatchError,
    PrecisionWarning,
    seed,
)
from densematrix.matrix import Matrix, print_matrix

__all__ = [
    "__version__",
    "Matrix",
    "print_matrix",
    "seed",
    "MatrixError",
    "ValidationError",
    "InvalidDimensionError",
    "IndexOutOfRangeError",
    "DimensionMismatchError",
    "PrecisionWarning",
]
