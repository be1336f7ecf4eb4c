"""
Array kernels behind Matrix arithmetic and hashing.

These take and return plain float32 ndarrays and never see a Matrix, so
they can be tested in isolation. Results are always freshly allocated.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from densematrix.core.precision import DTYPE


HASH_SEED = 23
HASH_MULTIPLIER = 31

_MASK_32 = 0xFFFFFFFF


def matmul_ascending(a: NDArray[np.float32], b: NDArray[np.float32]) -> NDArray[np.float32]:
    """
    Matrix product with a fixed accumulation order.

    Entry (i, j) is sum_k a[i, k] * b[k, j], accumulated for k = 0, 1, ...
    with every product and every partial sum rounded to float32. BLAS
    matmul is free to reorder or fuse these steps, which makes results
    differ in the last bits between platforms; this loop does not.

    Args:
        a: Left operand, shape (m, n)
        b: Right operand, shape (n, p)

    Returns:
        Product, shape (m, p)
    """
    m, n = a.shape
    p = b.shape[1]
    product = np.zeros((m, p), dtype=DTYPE)
    for k in range(n):
        # rank-1 update: column k of a times row k of b
        product += a[:, k, np.newaxis] * b[np.newaxis, k, :]
    return product


def entry_hashes(data: NDArray[np.float32]) -> NDArray[np.int32]:
    """
    Hash code of every entry, in row-major order.

    The hash of a float32 is its bit pattern read as int32, after
    mapping -0.0 onto 0.0 and every NaN onto the canonical NaN so that
    values comparing equal hash equally.
    """
    canonical = np.where(data == 0, DTYPE(0.0), data)
    canonical = np.where(np.isnan(canonical), DTYPE(np.nan), canonical)
    return np.ascontiguousarray(canonical, dtype=DTYPE).view(np.int32).ravel()


def combine_hash(data: NDArray[np.float32]) -> int:
    """
    Fold entry hashes into one signed 32-bit value.

    h = HASH_SEED, then h = h * HASH_MULTIPLIER + entry_hash for each
    entry in row-major order, wrapping on overflow.
    """
    h = HASH_SEED
    for entry in entry_hashes(data).tolist():
        h = (h * HASH_MULTIPLIER + entry) & _MASK_32
    return h - (1 << 32) if h & 0x80000000 else h
