"""
pytest configuration and fixtures for curvedtext tests
"""
import numpy as np
import pytest

from curvedtext.model.geometry_primitives import Point

# Matches the number of runs each property was checked with originally
N_SAMPLES = 100


@pytest.fixture
def rng():
    """Seeded generator so property sweeps are reproducible"""
    return np.random.default_rng(20240601)


@pytest.fixture
def center():
    return Point(100.0, 100.0)


def sample_radii(rng, n=N_SAMPLES):
    return rng.integers(50, 201, size=n)


def sample_angles(rng, n=N_SAMPLES):
    return rng.integers(0, 361, size=n)
