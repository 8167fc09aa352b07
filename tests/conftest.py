"""
pytest configuration and shared fixtures.
"""

import math

import pytest
import numpy as np

from pymat4 import Matrix4, Vector3


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_matrix(rng):
    """Factory for matrices with standard normal elements."""
    def make():
        return Matrix4(rng.standard_normal(16))
    return make


@pytest.fixture
def unit_axis(rng):
    """Random unit-length rotation axis."""
    v = rng.standard_normal(3)
    v /= np.linalg.norm(v)
    return Vector3(*v)


@pytest.fixture
def rotate90():
    """Rotation by +90 degrees about z."""
    return Matrix4(0, 1, 0, 0, -1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1)


@pytest.fixture
def rotate_neg90():
    """Rotation by -90 degrees about z."""
    return Matrix4(0, -1, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1)


@pytest.fixture
def quarter_turn():
    return math.pi / 2
