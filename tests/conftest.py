"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from lingebra import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def sample_matrix():
    """3x4 matrix used throughout the access tests."""
    return Matrix.new([
        [0.0, 1.0, 2.0, 3.0],
        [1.0, 0.0, 1.0, 0.0],
        [5.0, 5.0, 5.0, 5.0],
    ])


@pytest.fixture
def square_matrix():
    """3x3 matrix with distinct entries."""
    return Matrix.new([
        [1.0, 2.0, 3.0],
        [4.0, 5.0, 6.0],
        [7.0, 8.0, 9.0],
    ])


@pytest.fixture
def random_square(rng):
    """Random 5x5 matrix."""
    return Matrix.new(rng.standard_normal((5, 5)))
