"""
Fixtures for resampling tests.

movie_sample mimics the genre comparison the engine was built for:
200 Action ratings with mean 5.28 and 200 Comedy ratings with mean 5.97,
both with standard deviation 1.5, interleaved in one observation list.
"""

import numpy as np
import pytest

from pyresampling.resampling import TwoSampleDesign


def _standardized(rng, n, mean, sd):
    z = rng.standard_normal(n)
    z = (z - z.mean()) / z.std(ddof=1)
    return mean + sd * z


@pytest.fixture
def movie_observations():
    """400 (genre, rating) pairs, alternating genres."""
    rng = np.random.default_rng(2024)
    action = _standardized(rng, 200, 5.28, 1.5)
    comedy = _standardized(rng, 200, 5.97, 1.5)
    pairs = []
    for a, c in zip(action, comedy):
        pairs.append(("Action", float(a)))
        pairs.append(("Comedy", float(c)))
    return pairs


@pytest.fixture
def movie_sample(movie_observations):
    return TwoSampleDesign.from_observations(
        movie_observations, "Action", "Comedy",
    )


@pytest.fixture
def small_sample(small_groups):
    x, y = small_groups
    return TwoSampleDesign.from_groups(x, y)
