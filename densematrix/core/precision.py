"""
Numerical precision constants and utilities.

Every matrix stores its entries as IEEE-754 single precision. This module
is the single source of truth for the storage dtype, the tolerances used
by approximate comparison, and the conversion of user input into float32.
"""

import warnings
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.exceptions import PrecisionWarning


# Storage dtype for all matrix entries
DTYPE = np.float32

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7

# Largest finite float32
FLOAT32_MAX: float = float(np.finfo(np.float32).max)

# Half-open range of randomized entries: [RANDOM_LOW, RANDOM_HIGH)
RANDOM_LOW: float = -1.0
RANDOM_HIGH: float = 1.0


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Single-precision storage: relative error of a few ulps is expected
# after a handful of arithmetic steps.
FP32 = ToleranceTier(
    rtol=1e-5,
    atol=1e-6,
    name='fp32',
    description='float32 storage, a few ulps of accumulated rounding',
)


def to_float32(
    values: ArrayLike,
    name: str,
    stacklevel: int = 3,
) -> NDArray[np.float32]:
    """
    Convert array-like input to a fresh float32 array.

    Finite values whose magnitude exceeds the float32 range become
    +/-inf; a PrecisionWarning names how many entries were affected.

    Args:
        values: Input already validated as numeric
        name: Parameter name for warning messages
        stacklevel: Passed to warnings.warn so the warning points at
                    the public call site

    Returns:
        New float32 array (never a view of the input)
    """
    source = np.asarray(values)
    if np.issubdtype(source.dtype, np.floating) and source.dtype.itemsize > 4:
        finite = np.isfinite(source)
        n_overflow = int(np.sum(np.abs(source[finite]) > FLOAT32_MAX))
        if n_overflow:
            warnings.warn(
                f"{name}: {n_overflow} value(s) exceed the float32 range "
                f"and were stored as inf",
                PrecisionWarning,
                stacklevel=stacklevel,
            )
    with np.errstate(over='ignore'):
        return np.array(source, dtype=DTYPE, order='C', copy=True)


def is_close(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    rtol: float = FP32.rtol,
    atol: float = FP32.atol,
) -> bool:
    """
    Check whether two equally shaped arrays are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|, element-wise, and
    requires it to hold everywhere. NaN is never close to anything;
    infinities are close only to the same infinity.

    Args:
        a: First array
        b: Second array
        rtol: Relative tolerance
        atol: Absolute tolerance
    """
    return bool(np.allclose(
        np.asarray(a, dtype=np.float64),
        np.asarray(b, dtype=np.float64),
        rtol=rtol,
        atol=atol,
    ))
