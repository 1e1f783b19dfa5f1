"""
Tests for the permutation null distribution.

Validates count preservation, use of every observation once per
replicate, reproducibility, the relabeling symmetry and the CPU backend.
"""

import numpy as np
import pytest

from pyresampling.core.exceptions import InsufficientDataError
from pyresampling.resampling import (
    ResamplingDesign,
    TwoSampleDesign,
    observed_statistic,
    permutation_null_distribution,
)
from pyresampling.resampling.backends.cpu import (
    CPUPermutationBackend,
    permute_membership,
)


def size_of_a(x, y):
    return float(len(x))


def pooled_sum(x, y):
    return float(np.sum(x) + np.sum(y))


class TestPermutationNullDistribution:

    def test_length(self, movie_sample):
        null = permutation_null_distribution(movie_sample, 300, seed=1)
        assert null.shape == (300,)

    def test_seed_reproducibility(self, movie_sample):
        n1 = permutation_null_distribution(movie_sample, 500, seed=42)
        n2 = permutation_null_distribution(movie_sample, 500, seed=42)
        np.testing.assert_array_equal(n1, n2)

    def test_different_seeds_differ(self, movie_sample):
        n1 = permutation_null_distribution(movie_sample, 500, seed=42)
        n2 = permutation_null_distribution(movie_sample, 500, seed=99)
        assert not np.allclose(n1, n2)

    def test_same_output_for_any_n_jobs(self, movie_sample):
        serial = permutation_null_distribution(movie_sample, 1000, seed=5, n_jobs=1)
        threaded = permutation_null_distribution(movie_sample, 1000, seed=5, n_jobs=3)
        np.testing.assert_array_equal(serial, threaded)

    def test_label_counts_preserved(self):
        sample = TwoSampleDesign.from_groups(np.arange(11.0), np.arange(4.0))
        null = permutation_null_distribution(sample, 400, seed=3, statistic=size_of_a)
        assert np.all(null == 11.0)

    def test_every_observation_used_once(self, small_sample):
        total = float(np.sum(small_sample.values))
        null = permutation_null_distribution(small_sample, 200, seed=3, statistic=pooled_sum)
        np.testing.assert_allclose(null, total, rtol=1e-12)

    def test_centered_on_zero(self, movie_sample):
        null = permutation_null_distribution(movie_sample, 2000, seed=12)
        assert np.mean(null) == pytest.approx(0.0, abs=0.02)

    def test_n_reps_zero(self, movie_sample):
        with pytest.raises(InsufficientDataError):
            permutation_null_distribution(movie_sample, 0, seed=1)

    def test_swapped_groups_negate(self, movie_sample):
        forward = permutation_null_distribution(movie_sample, 500, seed=21)
        backward = permutation_null_distribution(movie_sample.swapped(), 500, seed=21)
        np.testing.assert_array_equal(backward, -forward)


class TestPermuteMembership:

    def test_counts_preserved_every_iteration(self, rng):
        is_a = np.array([True] * 6 + [False] * 9)
        for _ in range(200):
            mask = permute_membership(is_a, rng)
            assert mask.sum() == 6
            assert len(mask) == 15

    def test_input_untouched(self, rng):
        is_a = np.array([True, True, False, False, False])
        permute_membership(is_a, rng)
        np.testing.assert_array_equal(is_a, [True, True, False, False, False])


class TestCPUPermutationBackend:

    def test_result_envelope(self, movie_sample):
        design = ResamplingDesign.for_resampling(movie_sample, n_reps=300, seed=1)
        result = CPUPermutationBackend().solve(design)

        assert result.backend_name == 'cpu_permutation'
        assert result.params.kind == 'permutation'
        assert result.params.replicates.shape == (300,)
        assert result.params.observed == observed_statistic(movie_sample)
        assert result.info['n_blocks'] == 2
        assert 'replicates' in result.timing
