"""
Two-sample statistic functions.

A statistic is any pure fn(x, y) -> float where x holds group A's values
and y holds group B's values. Backends call it once on the original
sample and once per resample, always through the same code path, so a
resample identical to the original reproduces the observed value bit
for bit.
"""

from __future__ import annotations

import numpy as np


def mean_diff(x, y) -> float:
    """Difference in group means: mean(x) - mean(y)."""
    return float(np.mean(x) - np.mean(y))


def median_diff(x, y) -> float:
    """Difference in group medians: median(x) - median(y)."""
    return float(np.median(x) - np.median(y))


def statistic_name(statistic) -> str:
    """Readable name for summaries."""
    return getattr(statistic, "__name__", type(statistic).__name__)
