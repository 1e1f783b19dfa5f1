"""
Tests for deterministic random streams.

Validates:
    - Block layout depends only on n_reps
    - Same seed, same draws; different seeds, different draws
    - Output is independent of the number of worker threads
    - Generator and SeedSequence roots
    - NumPy's global RNG is never touched
"""

import numpy as np
import pytest

from pyresampling.core.compute.streams import (
    BLOCK_SIZE,
    as_seed_sequence,
    block_sizes,
    check_seed,
    resolve_n_jobs,
    run_blocks,
    spawn_generators,
    split_seed,
)
from pyresampling.core.exceptions import InvalidParameterError


def uniform_draw(rng, size):
    return rng.random(size)


class TestBlockSizes:

    def test_exact_multiple(self):
        assert block_sizes(2 * BLOCK_SIZE) == [BLOCK_SIZE, BLOCK_SIZE]

    def test_remainder(self):
        assert block_sizes(1000) == [256, 256, 256, 232]

    def test_single_replicate(self):
        assert block_sizes(1) == [1]

    def test_sizes_sum_to_total(self):
        assert sum(block_sizes(5000)) == 5000


class TestSeeds:

    @pytest.mark.parametrize("seed", [-1, 1.5, "42", True])
    def test_invalid_seed(self, seed):
        with pytest.raises(InvalidParameterError, match="seed"):
            check_seed(seed)

    @pytest.mark.parametrize("seed", [None, 0, 42, np.int64(7)])
    def test_valid_seed(self, seed):
        check_seed(seed)

    def test_as_seed_sequence_int(self):
        assert as_seed_sequence(5).entropy == 5

    def test_as_seed_sequence_passthrough(self):
        ss = np.random.SeedSequence(3)
        assert as_seed_sequence(ss) is ss

    def test_split_seed_int_deterministic(self):
        a = [np.random.default_rng(s).random() for s in split_seed(42, 2)]
        b = [np.random.default_rng(s).random() for s in split_seed(42, 2)]
        assert a == b
        assert a[0] != a[1]

    def test_split_seed_generator(self):
        children = split_seed(np.random.default_rng(1), 3)
        assert len(children) == 3
        assert all(isinstance(c, np.random.Generator) for c in children)

    def test_spawn_generators_independent(self):
        g1, g2 = spawn_generators(0, 2)
        assert g1.random() != g2.random()


class TestRunBlocks:

    def test_shape(self):
        out = run_blocks(uniform_draw, 1000, seed=1)
        assert out.shape == (1000,)

    def test_same_seed_identical(self):
        a = run_blocks(uniform_draw, 600, seed=7)
        b = run_blocks(uniform_draw, 600, seed=7)
        np.testing.assert_array_equal(a, b)

    def test_different_seed_differs(self):
        a = run_blocks(uniform_draw, 600, seed=7)
        b = run_blocks(uniform_draw, 600, seed=8)
        assert not np.array_equal(a, b)

    @pytest.mark.parametrize("n_jobs", [2, 3, -1])
    def test_independent_of_n_jobs(self, n_jobs):
        serial = run_blocks(uniform_draw, 1500, seed=11, n_jobs=1)
        parallel = run_blocks(uniform_draw, 1500, seed=11, n_jobs=n_jobs)
        np.testing.assert_array_equal(serial, parallel)

    def test_generator_root_reproducible(self):
        a = run_blocks(uniform_draw, 300, seed=np.random.default_rng(5))
        b = run_blocks(uniform_draw, 300, seed=np.random.default_rng(5))
        np.testing.assert_array_equal(a, b)

    def test_worker_error_propagates(self):
        def failing(rng, size):
            raise ZeroDivisionError("boom")
        with pytest.raises(ZeroDivisionError):
            run_blocks(failing, 1000, seed=1, n_jobs=2)

    def test_global_rng_untouched(self):
        np.random.seed(123)
        before = np.random.get_state()[1].copy()
        run_blocks(uniform_draw, 500, seed=3, n_jobs=2)
        after = np.random.get_state()[1]
        np.testing.assert_array_equal(before, after)


class TestResolveNJobs:

    def test_all_cores(self):
        assert resolve_n_jobs(-1) >= 1

    def test_explicit(self):
        assert resolve_n_jobs(4) == 4
