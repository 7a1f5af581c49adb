"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylibmat import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_matrix(rng):
    """Factory building an owning Matrix filled with standard normals."""
    def make(rows, cols=None):
        cols = rows if cols is None else cols
        return Matrix.from_array(rng.standard_normal((rows, cols)))
    return make


@pytest.fixture
def counting_matrix():
    """Factory building a Matrix whose (i, j) entry is 10*i + j."""
    def make(rows, cols):
        i, j = np.indices((rows, cols))
        return Matrix.from_array(10.0 * i + j)
    return make
