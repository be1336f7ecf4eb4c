"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

import densematrix
from densematrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(autouse=True)
def seeded_matrix_rng():
    """Reseed the package's shared generator so Matrix.random is reproducible."""
    densematrix.seed(1234)
    yield
    densematrix.seed(None)


@pytest.fixture
def a():
    """[[1, 2], [3, 4]]"""
    return Matrix.from_array([[1.0, 2.0], [3.0, 4.0]])


@pytest.fixture
def b():
    """[[5, 6], [7, 8]]"""
    return Matrix.from_array([[5.0, 6.0], [7.0, 8.0]])


@pytest.fixture
def dyadic_matrix(rng):
    """
    3x4 matrix of small multiples of 1/8.

    Sums, differences and power-of-two scalings of these values are
    exact in float32, so arithmetic identities hold under exact equality.
    """
    return Matrix.from_array(rng.integers(-64, 64, size=(3, 4)) / 8.0)
