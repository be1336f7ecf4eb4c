"""
Core infrastructure for densematrix.

This module provides shared abstractions and utilities used by the
matrix package.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Storage dtype, tolerances, float32 conversion
    rng: Shared random number source
"""

from densematrix.core.exceptions import (
    MatrixError,
    ValidationError,
    InvalidDimensionError,
    IndexOutOfRangeError,
    DimensionMismatchError,
    PrecisionWarning,
)
from densematrix.core.rng import seed

__all__ = [
    # Exceptions
    "MatrixError",
    "ValidationError",
    "InvalidDimensionError",
    "IndexOutOfRangeError",
    "DimensionMismatchError",
    "PrecisionWarning",
    # Random source
    "seed",
]
