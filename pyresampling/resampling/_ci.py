"""
Confidence intervals from an empirical bootstrap distribution.

- perc: percentile interval [Q(alpha/2), Q(1 - alpha/2)]
- basic: basic (pivotal) interval [2*t0 - Q(1 - alpha/2), 2*t0 - Q(alpha/2)]
- normal: bias-corrected normal approximation centred at 2*t0 - mean(t)

Q is the sample quantile of the requested Hyndman & Fan type
(default 7, see _quantile.py).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from pyresampling.core.exceptions import InvalidParameterError
from pyresampling.resampling._quantile import quantile


def compute_ci(
    t: NDArray,
    level: float,
    method: str,
    observed: float | None,
    qtype: int,
) -> tuple[float, float]:
    """
    Two-sided interval from replicates t (validated, finite, len >= 2).

    Args:
        t: Bootstrap replicates, shape (R,).
        level: Confidence level in (0, 1].
        method: "perc", "basic" or "normal".
        observed: Statistic on the original sample; required unless
            method is "perc".
        qtype: Quantile type for "perc" and "basic".

    Returns:
        (low, high) with low <= high.
    """
    alpha = 1.0 - level

    if method != "perc" and observed is None:
        raise InvalidParameterError(
            f"method={method!r} requires the observed statistic",
            name="observed",
            value=None,
        )

    if method == "normal":
        return _ci_normal(t, alpha, observed)

    t_sorted = np.sort(t)
    q_lo, q_hi = quantile(t_sorted, [alpha / 2.0, 1.0 - alpha / 2.0], qtype)

    if method == "perc":
        return float(q_lo), float(q_hi)
    return float(2.0 * observed - q_hi), float(2.0 * observed - q_lo)


def _ci_normal(t: NDArray, alpha: float, observed: float) -> tuple[float, float]:
    """
    Normal approximation CI with bias correction.

    Centered at 2*t0 - mean(t), not at t0. A level of 1 gives (-inf, inf).
    """
    center = 2.0 * observed - np.mean(t)
    se = np.std(t, ddof=1)
    z = sp_stats.norm.ppf(1.0 - alpha / 2.0)
    if se == 0.0:
        return float(center), float(center)
    return float(center - z * se), float(center + z * se)
