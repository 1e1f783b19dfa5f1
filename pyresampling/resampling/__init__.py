"""
PyResampling two-sample inference engine.

Bootstrap confidence intervals and permutation tests for the difference
between two groups, with deterministic per-block random streams.

Usage:
    from pyresampling.resampling import (
        TwoSampleDesign, observed_statistic, bootstrap_distribution,
        confidence_interval, permutation_null_distribution, p_value,
    )

    sample = TwoSampleDesign.from_observations(pairs, "Action", "Comedy")
    t0 = observed_statistic(sample)
    ci = confidence_interval(bootstrap_distribution(sample, 1000, seed=1))
    p = p_value(permutation_null_distribution(sample, 5000, seed=2), t0)

    # Or all at once
    result = two_sample_inference(sample, n_boot=1000, n_perm=5000, seed=1)
"""

from pyresampling.resampling._statistics import mean_diff, median_diff
from pyresampling.resampling.design import ResamplingDesign, TwoSampleDesign
from pyresampling.resampling.solution import InferenceSolution
from pyresampling.resampling.solvers import (
    bootstrap_distribution,
    confidence_interval,
    format_p_value,
    observed_statistic,
    p_value,
    permutation_null_distribution,
    two_sample_inference,
)

__all__ = [
    # Designs
    "TwoSampleDesign",
    "ResamplingDesign",
    # Statistics
    "mean_diff",
    "median_diff",
    # Operations
    "observed_statistic",
    "bootstrap_distribution",
    "confidence_interval",
    "permutation_null_distribution",
    "p_value",
    "format_p_value",
    "two_sample_inference",
    # Results
    "InferenceSolution",
]
