"""
Shared random number source.

All randomized matrices draw from one module-level numpy Generator that
advances continuously, so matrices created in quick succession never
share a sequence. seed() replaces it for reproducible runs.
"""

import numpy as np
from numpy.typing import NDArray

from densematrix.core.precision import DTYPE, RANDOM_HIGH, RANDOM_LOW


_generator: np.random.Generator = np.random.default_rng()


def seed(value: int | None = None) -> None:
    """
    Reseed the shared generator.

    Args:
        value: Seed for numpy.random.default_rng. None draws fresh
               entropy from the OS.
    """
    global _generator
    _generator = np.random.default_rng(value)


def get_generator() -> np.random.Generator:
    """Return the shared generator."""
    return _generator


def uniform(shape: tuple[int, int]) -> NDArray[np.float32]:
    """
    Draw a fresh C-ordered float32 array uniform on [RANDOM_LOW, RANDOM_HIGH).

    Each cell gets its own draw, filled in row-major order. The draw is
    made in [0, 1) at float32 and mapped affinely; the largest float32
    below 1 maps to a value strictly below RANDOM_HIGH.
    """
    unit = _generator.random(shape, dtype=DTYPE)
    span = DTYPE(RANDOM_HIGH - RANDOM_LOW)
    return unit * span + DTYPE(RANDOM_LOW)
