"""
Common data structures for resampling inference.

DistributionParams is the payload of a single backend run (bootstrap or
permutation). InferenceParams is the combined record produced by
two_sample_inference(). Both are wrapped by Result[P].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

VALID_DIRECTIONS = ("both", "left", "right")
VALID_CI_METHODS = ("perc", "basic", "normal")


@dataclass(frozen=True)
class DistributionParams:
    """
    Parameter payload for one empirical distribution.

    - observed: statistic on the original sample
    - replicates: statistic on each resample, shape (n_reps,), in draw order
    - kind: "bootstrap" or "permutation"
    """
    observed: float
    replicates: NDArray[np.floating[Any]]       # shape (n_reps,)
    n_reps: int
    kind: str


@dataclass(frozen=True)
class InferenceParams:
    """
    Parameter payload for a full two-sample resampling analysis.

    - observed: statistic on the original sample
    - conf_int: (low, high) from the bootstrap distribution
    - p_value: tail fraction of the permutation null distribution
    - bias: mean(boot_stats) - observed
    - se: sd(boot_stats), ddof=1
    """
    observed: float
    conf_int: tuple[float, float]
    conf_level: float
    ci_method: str
    p_value: float
    direction: str
    boot_stats: NDArray[np.floating[Any]]       # shape (n_boot,)
    null_stats: NDArray[np.floating[Any]]       # shape (n_perm,)
    bias: float
    se: float
