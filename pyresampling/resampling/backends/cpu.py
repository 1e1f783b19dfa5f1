"""
CPU backends for bootstrap and permutation resampling.

CPUBootstrapBackend: resamples each group with replacement within the group.
CPUPermutationBackend: reassigns group membership across the pooled sample.

Both evaluate replicates in fixed-size blocks with one spawned Generator
per block (see pyresampling.core.compute.streams), optionally on a
thread pool.
"""

from __future__ import annotations

from typing import Callable

import numpy as np
from numpy.typing import NDArray

from pyresampling.core.compute.streams import block_sizes, resolve_n_jobs, run_blocks
from pyresampling.core.compute.timing import Timer
from pyresampling.core.result import Result
from pyresampling.resampling._common import DistributionParams
from pyresampling.resampling._statistics import statistic_name
from pyresampling.resampling.design import ResamplingDesign


def resample_within_groups(
    x: NDArray,
    y: NDArray,
    rng: np.random.Generator,
) -> tuple[NDArray, NDArray]:
    """One bootstrap resample: each group drawn with replacement to its own size."""
    x_idx = rng.choice(len(x), size=len(x), replace=True)
    y_idx = rng.choice(len(y), size=len(y), replace=True)
    return x[x_idx], y[y_idx]


def permute_membership(
    is_a: NDArray[np.bool_],
    rng: np.random.Generator,
) -> NDArray[np.bool_]:
    """
    One permutation resample of the group-membership mask.

    Every observation is used exactly once and the number of True
    entries (group A's size) is unchanged.
    """
    return rng.permutation(is_a)


def _non_finite_warning(replicates: NDArray, kind: str) -> tuple[str, ...]:
    n_bad = int(np.sum(~np.isfinite(replicates)))
    if n_bad == 0:
        return ()
    return (
        f"{n_bad} of {len(replicates)} {kind} replicates are not finite; "
        f"check the statistic function",
    )


class CPUBootstrapBackend:
    """
    CPU backend for the two-sample bootstrap.

    Group sizes are taken from the original sample and held fixed for
    every replicate.
    """

    @property
    def name(self) -> str:
        return 'cpu_bootstrap'

    def solve(self, design: ResamplingDesign) -> Result[DistributionParams]:
        """Run the bootstrap and return Result[DistributionParams]."""
        timer = Timer()
        timer.start()

        sample = design.sample
        statistic = design.statistic
        x = sample.x
        y = sample.y

        with timer.section('observed_stat'):
            observed = float(statistic(x, y))

        draw = _bootstrap_block(x, y, statistic)
        with timer.section('replicates'):
            replicates = run_blocks(draw, design.n_reps, design.seed, design.n_jobs)

        timer.stop()

        params = DistributionParams(
            observed=observed,
            replicates=replicates,
            n_reps=design.n_reps,
            kind='bootstrap',
        )

        return Result(
            params=params,
            info={
                'n_a': len(x),
                'n_b': len(y),
                'statistic': statistic_name(statistic),
                'n_blocks': len(block_sizes(design.n_reps)),
                'n_jobs': resolve_n_jobs(design.n_jobs),
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=_non_finite_warning(replicates, 'bootstrap'),
        )


class CPUPermutationBackend:
    """
    CPU backend for the permutation null distribution.

    Shuffles which observations carry which label; values never move,
    and per-group counts are preserved.
    """

    @property
    def name(self) -> str:
        return 'cpu_permutation'

    def solve(self, design: ResamplingDesign) -> Result[DistributionParams]:
        """Run the permutation resampling and return Result[DistributionParams]."""
        timer = Timer()
        timer.start()

        sample = design.sample
        statistic = design.statistic

        with timer.section('observed_stat'):
            observed = float(statistic(sample.x, sample.y))

        draw = _permutation_block(sample.values, sample.is_a, statistic)
        with timer.section('replicates'):
            replicates = run_blocks(draw, design.n_reps, design.seed, design.n_jobs)

        timer.stop()

        params = DistributionParams(
            observed=observed,
            replicates=replicates,
            n_reps=design.n_reps,
            kind='permutation',
        )

        return Result(
            params=params,
            info={
                'n_a': sample.n_a,
                'n_b': sample.n_b,
                'statistic': statistic_name(statistic),
                'n_blocks': len(block_sizes(design.n_reps)),
                'n_jobs': resolve_n_jobs(design.n_jobs),
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=_non_finite_warning(replicates, 'permutation'),
        )


def _bootstrap_block(x: NDArray, y: NDArray, statistic: Callable):
    def draw(rng: np.random.Generator, size: int) -> NDArray:
        out = np.empty(size, dtype=np.float64)
        for b in range(size):
            xs, ys = resample_within_groups(x, y, rng)
            out[b] = statistic(xs, ys)
        return out
    return draw


def _permutation_block(values: NDArray, is_a: NDArray, statistic: Callable):
    def draw(rng: np.random.Generator, size: int) -> NDArray:
        out = np.empty(size, dtype=np.float64)
        for b in range(size):
            mask = permute_membership(is_a, rng)
            out[b] = statistic(values[mask], values[~mask])
        return out
    return draw
