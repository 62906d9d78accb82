"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from toygemm import Mat


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_mat(rng):
    """Factory for integer matrices with small random entries."""
    def make(rows, cols):
        return Mat[rows, cols](*rng.integers(-9, 10, size=(rows, cols)))
    return make


@pytest.fixture
def tall_mat():
    """4x3 matrix whose Gram matrix A @ A.T is known."""
    return Mat[4, 3](
        (1, 2, 3),
        (4, 5, 6),
        (7, 8, 9),
        (10, 11, 12),
    )
