"""
Public entry points for two-sample resampling inference.

The engine is five plain functions composed by the caller:

    observed_statistic()               statistic on the original sample
    bootstrap_distribution()           within-group bootstrap replicates
    confidence_interval()              interval from a replicate distribution
    permutation_null_distribution()    label-shuffling null distribution
    p_value()                          tail fraction of a null distribution

two_sample_inference() composes all of them into one InferenceSolution,
and format_p_value() renders a p-value for prose.

Every random operation takes an explicit seed; nothing reads or writes
NumPy's global RNG.
"""

from __future__ import annotations

import math
import numbers
import warnings
from typing import Callable, Hashable, Iterable, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyresampling.core.compute.streams import SeedLike, check_seed, split_seed
from pyresampling.core.compute.timing import timed
from pyresampling.core.exceptions import InvalidParameterError
from pyresampling.core.result import Result
from pyresampling.core.validation import (
    check_1d,
    check_array,
    check_choice,
    check_finite,
    check_level,
    check_min_samples,
    check_n_reps,
)
from pyresampling.resampling._ci import compute_ci
from pyresampling.resampling._common import (
    VALID_CI_METHODS,
    VALID_DIRECTIONS,
    DistributionParams,
    InferenceParams,
)
from pyresampling.resampling._pvalue import compute_p_value, format_p
from pyresampling.resampling._quantile import DEFAULT_QTYPE
from pyresampling.resampling._statistics import mean_diff, statistic_name
from pyresampling.resampling.backends.cpu import (
    CPUBootstrapBackend,
    CPUPermutationBackend,
)
from pyresampling.resampling.design import (
    ResamplingDesign,
    TwoSampleDesign,
    as_design,
)
from pyresampling.resampling.solution import InferenceSolution

SampleLike = Union[TwoSampleDesign, Iterable[tuple[Hashable, float]]]


def _get_backend(kind: str, backend: str = 'cpu'):
    """Select the backend for 'bootstrap' or 'permutation'."""
    if backend not in ('cpu', 'auto'):
        raise InvalidParameterError(
            f"Unknown backend: {backend!r}. Use 'cpu'.",
            name="backend",
            value=backend,
            allowed=('cpu', 'auto'),
        )
    if kind == 'bootstrap':
        return CPUBootstrapBackend()
    return CPUPermutationBackend()


def _solve(kind: str, design: ResamplingDesign, backend: str) -> Result[DistributionParams]:
    result = _get_backend(kind, backend).solve(design)
    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=3)
    return result


def _check_distribution(distribution: ArrayLike, min_points: int, name: str) -> NDArray:
    t = check_array(distribution, name)
    check_1d(t, name)
    check_min_samples(t, min_points, name)
    check_finite(t, name)
    return t


def observed_statistic(
    sample: SampleLike,
    group_a: Hashable | None = None,
    group_b: Hashable | None = None,
    *,
    statistic: Callable = mean_diff,
) -> float:
    """
    Statistic on the original sample; mean(A) - mean(B) by default.

    Parameters
    ----------
    sample : TwoSampleDesign or sequence of (label, value) pairs
        The labeled sample. Pairs require group_a and group_b.
    group_a, group_b : hashable, optional
        Group labels. With a TwoSampleDesign they override (e.g. swap)
        the design's own groups.
    statistic : callable
        fn(x, y) -> float. Default mean_diff.

    Returns
    -------
    float

    Raises
    ------
    InsufficientDataError
        If either group has no observations.
    """
    design = as_design(sample, group_a, group_b)
    return float(statistic(design.x, design.y))


def bootstrap_distribution(
    sample: SampleLike,
    n_reps: int = 1000,
    seed: SeedLike = None,
    *,
    group_a: Hashable | None = None,
    group_b: Hashable | None = None,
    statistic: Callable = mean_diff,
    n_jobs: int = 1,
    backend: str = 'cpu',
) -> NDArray[np.floating]:
    """
    Bootstrap sampling distribution of the statistic.

    Each replicate resamples group A and group B independently, with
    replacement, each to its original size, then evaluates the statistic.

    Parameters
    ----------
    sample : TwoSampleDesign or sequence of (label, value) pairs
    n_reps : int
        Number of replicates, >= 1. Default 1000.
    seed : int, SeedSequence, Generator or None
        Same seed, same output, for any n_jobs.
    statistic : callable
        fn(x, y) -> float. Default mean_diff.
    n_jobs : int
        Worker threads; -1 for all cores. Default 1.
    backend : str
        'cpu' (default).

    Returns
    -------
    ndarray
        Replicates in draw order, shape (n_reps,). Not sorted.
    """
    design = ResamplingDesign.for_resampling(
        as_design(sample, group_a, group_b),
        statistic,
        n_reps,
        seed=seed,
        n_jobs=n_jobs,
    )
    return _solve('bootstrap', design, backend).params.replicates


def permutation_null_distribution(
    sample: SampleLike,
    n_reps: int = 1000,
    seed: SeedLike = None,
    *,
    group_a: Hashable | None = None,
    group_b: Hashable | None = None,
    statistic: Callable = mean_diff,
    n_jobs: int = 1,
    backend: str = 'cpu',
) -> NDArray[np.floating]:
    """
    Distribution of the statistic under "no association between label
    and value".

    Each replicate shuffles which observations carry which label, keeping
    both group sizes, and evaluates the statistic on the relabeled sample.
    Parameters are as for bootstrap_distribution().

    Returns
    -------
    ndarray
        Null replicates in draw order, shape (n_reps,).
    """
    design = ResamplingDesign.for_resampling(
        as_design(sample, group_a, group_b),
        statistic,
        n_reps,
        seed=seed,
        n_jobs=n_jobs,
    )
    return _solve('permutation', design, backend).params.replicates


def confidence_interval(
    distribution: ArrayLike,
    level: float = 0.95,
    *,
    method: str = "perc",
    observed: float | None = None,
    qtype: int = DEFAULT_QTYPE,
) -> tuple[float, float]:
    """
    Two-sided interval from an empirical distribution.

    Parameters
    ----------
    distribution : array-like
        Replicate values, at least 2, all finite.
    level : float
        Confidence level in (0, 1]. Default 0.95. A level of 1 gives the
        full range of the distribution.
    method : str
        "perc" (default): the (1-level)/2 and 1-(1-level)/2 quantiles.
        "basic": pivotal interval, requires observed.
        "normal": bias-corrected normal approximation, requires observed.
    observed : float, optional
        Statistic on the original sample.
    qtype : int
        Hyndman & Fan quantile type. Default 7: linear interpolation
        between order statistics (R's and NumPy's default).

    Returns
    -------
    (low, high)
        With low <= high.

    Raises
    ------
    InsufficientDataError
        If the distribution has fewer than 2 points.
    InvalidParameterError
        If level, method or qtype is invalid.
    """
    t = _check_distribution(distribution, 2, "distribution")
    level = check_level(level)
    check_choice(method, VALID_CI_METHODS, "method")
    check_choice(qtype, range(1, 10), "qtype")
    return compute_ci(t, level, method, observed, qtype)


def p_value(
    null_distribution: ArrayLike,
    observed: float,
    direction: str = "both",
    *,
    correct: bool = False,
) -> float:
    """
    Fraction of the null distribution at least as extreme as observed.

    - "both":  count(|v| >= |observed|) / n_reps
    - "right": count(v >= observed) / n_reps
    - "left":  count(v <= observed) / n_reps

    Comparisons are inclusive. The result is 0 only if no null draw was
    as extreme, and it is then only known to be below 1 / n_reps: report
    it as "< 1/n_reps" (see format_p_value), never as 0. With
    correct=True the Phipson-Smyth estimate (count + 1) / (n_reps + 1)
    is returned instead.

    Raises
    ------
    InsufficientDataError
        If the null distribution is empty.
    InvalidParameterError
        If direction is not "both", "left" or "right", or observed is
        not a finite real number.
    """
    null = _check_distribution(null_distribution, 1, "null_distribution")
    check_choice(direction, VALID_DIRECTIONS, "direction")
    if isinstance(observed, bool) or not isinstance(observed, numbers.Real) \
            or not math.isfinite(observed):
        raise InvalidParameterError(
            f"observed: expected a finite real number, got {observed!r}",
            name="observed",
            value=observed,
            allowed="finite real number",
        )
    return compute_p_value(null, float(observed), direction, correct)


def format_p_value(p: float, n_reps: int, digits: int = 4) -> str:
    """
    Render a resampling p-value for prose.

    A p-value of 0 becomes "< 1/n_reps" (e.g. "< 0.0002" for 5000
    permutations); anything else is printed to `digits` significant digits.
    """
    n_reps = check_n_reps(n_reps)
    if not (0.0 <= p <= 1.0):
        raise InvalidParameterError(
            f"p must be in [0, 1], got {p}",
            name="p",
            value=p,
            allowed="[0, 1]",
        )
    return format_p(p, n_reps, digits)


def two_sample_inference(
    sample: SampleLike,
    group_a: Hashable | None = None,
    group_b: Hashable | None = None,
    *,
    statistic: Callable = mean_diff,
    n_boot: int = 1000,
    n_perm: int = 1000,
    level: float = 0.95,
    ci_method: str = "perc",
    qtype: int = DEFAULT_QTYPE,
    direction: str = "both",
    correct: bool = False,
    seed: SeedLike = None,
    n_jobs: int = 1,
    backend: str = 'cpu',
) -> InferenceSolution:
    """
    Observed statistic, bootstrap CI and permutation p-value in one call.

    The root seed is split into two independent child streams, one for
    the bootstrap and one for the permutations, so the two stages never
    share random draws.

    Parameters
    ----------
    sample, group_a, group_b, statistic
        As for observed_statistic().
    n_boot : int
        Bootstrap replicates (>= 2). Default 1000.
    n_perm : int
        Permutation replicates (>= 1). Default 1000.
    level, ci_method, qtype
        As for confidence_interval() (ci_method is its `method`).
    direction, correct
        As for p_value().
    seed, n_jobs, backend
        As for bootstrap_distribution().

    Returns
    -------
    InferenceSolution
    """
    level = check_level(level)
    check_choice(ci_method, VALID_CI_METHODS, "ci_method")
    check_choice(qtype, range(1, 10), "qtype")
    check_choice(direction, VALID_DIRECTIONS, "direction")
    check_seed(seed)

    design = as_design(sample, group_a, group_b)
    boot_seed, perm_seed = split_seed(seed, 2)

    with timed() as timer:
        with timer.section('bootstrap'):
            boot = _solve('bootstrap', ResamplingDesign.for_resampling(
                design, statistic, n_boot, seed=boot_seed, n_jobs=n_jobs,
            ), backend)

        with timer.section('permutation'):
            perm = _solve('permutation', ResamplingDesign.for_resampling(
                design, statistic, n_perm, seed=perm_seed, n_jobs=n_jobs,
            ), backend)

        observed = boot.params.observed
        t = boot.params.replicates
        null = perm.params.replicates

        with timer.section('summaries'):
            conf_int = confidence_interval(
                t, level, method=ci_method, observed=observed, qtype=qtype,
            )
            p = p_value(null, observed, direction, correct=correct)
            bias = float(np.mean(t) - observed)
            se = float(np.std(t, ddof=1))

    notes = list(boot.warnings) + list(perm.warnings)
    if p == 0.0:
        notes.append(
            f"No permutation was as extreme as the observed statistic; "
            f"report the p-value as {format_p(p, len(null), 4)}, not 0"
        )

    params = InferenceParams(
        observed=observed,
        conf_int=conf_int,
        conf_level=level,
        ci_method=ci_method,
        p_value=p,
        direction=direction,
        boot_stats=t,
        null_stats=null,
        bias=bias,
        se=se,
    )

    result = Result(
        params=params,
        info={
            **design.metadata,
            'statistic': statistic_name(statistic),
            'n_boot': boot.params.n_reps,
            'n_perm': perm.params.n_reps,
            'qtype': qtype,
            'correct': correct,
            'bootstrap_info': boot.info,
            'permutation_info': perm.info,
        },
        timing=timer.result(),
        backend_name=f"{boot.backend_name}+{perm.backend_name}",
        warnings=tuple(notes),
    )
    return InferenceSolution(_result=result, _design=design)
