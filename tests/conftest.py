"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_3x3():
    """Non-singular 3x3 matrix with determinant -306."""
    return [[6.0, 1.0, 1.0],
            [4.0, -2.0, 5.0],
            [2.0, 8.0, 7.0]]


@pytest.fixture
def random_square_pair(rng):
    """Two random 3x3 matrices of equal order."""
    return rng.standard_normal((3, 3)), rng.standard_normal((3, 3))


@pytest.fixture
def linear_data(rng):
    """Noisy samples of y = 2x + 1."""
    x = np.linspace(0.0, 10.0, 50)
    y = 2.0 * x + 1.0 + rng.standard_normal(50) * 0.5
    return x, y
