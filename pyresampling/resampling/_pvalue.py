"""
Permutation p-values and their presentation.

Tail fractions use inclusive comparisons, so a null draw exactly as
extreme as the observed statistic counts against it. An uncorrected
p-value is therefore a multiple of 1 / n_reps and reads 0 only when no
draw was as extreme; it must then be reported as "< 1 / n_reps", never
as 0. The Phipson-Smyth correction (count + 1) / (n_reps + 1) gives a
p-value that is never 0.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def tail_count(null: NDArray, observed: float, direction: str) -> int:
    """Number of null draws at least as extreme as observed."""
    if direction == "both":
        return int(np.sum(np.abs(null) >= abs(observed)))
    if direction == "right":
        return int(np.sum(null >= observed))
    return int(np.sum(null <= observed))


def compute_p_value(
    null: NDArray,
    observed: float,
    direction: str,
    correct: bool,
) -> float:
    """Tail fraction of the null distribution (validated inputs)."""
    count = tail_count(null, observed, direction)
    n_reps = len(null)
    if correct:
        return float(count + 1) / float(n_reps + 1)
    return float(count) / float(n_reps)


def format_p(p: float, n_reps: int, digits: int) -> str:
    """Render p; a zero p-value is shown as the bound "< 1/n_reps"."""
    if p <= 0.0:
        return f"< {1.0 / n_reps:.{digits}g}"
    return f"{p:.{digits}g}"
