"""
Sample quantiles under the nine Hyndman & Fan (1996) definitions.

Confidence intervals use type 7 by default: linear interpolation between
order statistics at plotting position p(k) = (k - 1) / (n - 1). This is
R's quantile() default and NumPy's method="linear". The convention is
fixed so interval endpoints are reproducible; for small replicate counts
different types disagree around the third decimal.

Types 1-3 are discontinuous (step functions); types 4-9 interpolate.

Reference:
    Hyndman, R.J. and Fan, Y. (1996) "Sample Quantiles in Statistical
    Packages", The American Statistician, 50(4), 361-365.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyresampling.core.exceptions import InvalidParameterError
from pyresampling.core.validation import check_choice

DEFAULT_QTYPE = 7

# Continuous types: p(k) = (k - a) / (n + 1 - a - b)
_PLOTTING_POSITIONS = {
    4: (0.0, 1.0),
    5: (0.5, 0.5),
    6: (0.0, 0.0),
    7: (1.0, 1.0),
    8: (1.0 / 3.0, 1.0 / 3.0),
    9: (3.0 / 8.0, 3.0 / 8.0),
}

# Same fuzz R uses to absorb rounding in n * p
_FUZZ = 4.0 * np.finfo(np.float64).eps


def quantile(
    x_sorted: ArrayLike,
    probs: ArrayLike,
    qtype: int = DEFAULT_QTYPE,
) -> NDArray[np.floating]:
    """
    Quantiles of an already sorted, non-empty, NaN-free 1D array.

    Args:
        x_sorted: Sorted values, length n >= 1.
        probs: Probabilities in [0, 1].
        qtype: Hyndman & Fan type, 1-9.

    Returns:
        One quantile per probability.

    Raises:
        InvalidParameterError: If qtype is not 1-9 or a probability is
            outside [0, 1].
    """
    check_choice(qtype, range(1, 10), "qtype")

    x = np.asarray(x_sorted, dtype=np.float64)
    p = np.atleast_1d(np.asarray(probs, dtype=np.float64))
    if np.any((p < 0.0) | (p > 1.0)):
        raise InvalidParameterError(
            f"probs must lie in [0, 1], got {p.tolist()}",
            name="probs",
            value=p.tolist(),
            allowed="[0, 1]",
        )

    n = len(x)

    if qtype <= 3:
        nppm = n * p - 0.5 if qtype == 3 else n * p
        j = np.floor(nppm + _FUZZ).astype(np.int64)
        on_point = np.abs(nppm - j) < _FUZZ
        if qtype == 1:
            h = np.where(nppm > j + _FUZZ, 1.0, 0.0)
        elif qtype == 2:
            h = np.where(on_point, 0.5, 1.0)
        else:
            # round half to even
            h = np.where(on_point & (j % 2 == 0), 0.0, 1.0)
    else:
        a, b = _PLOTTING_POSITIONS[qtype]
        nppm = a + p * (n + 1.0 - a - b)
        j = np.floor(nppm + _FUZZ).astype(np.int64)
        h = nppm - j
        h[np.abs(h) < _FUZZ] = 0.0
        h[np.abs(h - 1.0) < _FUZZ] = 1.0

    # j is a 1-based order statistic; out-of-range j clamps to the extremes
    lo = np.clip(j - 1, 0, n - 1)
    hi = np.clip(j, 0, n - 1)
    return (1.0 - h) * x[lo] + h * x[hi]
