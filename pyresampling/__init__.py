"""
PyResampling: simulation-based inference for two-group comparisons.

Estimates the difference between two groups without relying on a
closed-form sampling distribution: a within-group bootstrap for interval
estimation and a label-permutation null distribution for significance
testing, both reproducible from an explicit seed.

Submodules:
    resampling: Designs, backends and the public inference functions
    core: Exceptions, validation, result envelope, timing, random streams
"""

__version__ = "0.1.0"

from pyresampling import resampling
from pyresampling.core.exceptions import (
    PyResamplingError,
    ValidationError,
    InsufficientDataError,
    InvalidParameterError,
)
from pyresampling.resampling import (
    TwoSampleDesign,
    InferenceSolution,
    mean_diff,
    median_diff,
    observed_statistic,
    bootstrap_distribution,
    confidence_interval,
    permutation_null_distribution,
    p_value,
    format_p_value,
    two_sample_inference,
)

__all__ = [
    "__version__",
    "resampling",
    # Exceptions
    "PyResamplingError",
    "ValidationError",
    "InsufficientDataError",
    "InvalidParameterError",
    # Engine
    "TwoSampleDesign",
    "InferenceSolution",
    "mean_diff",
    "median_diff",
    "observed_statistic",
    "bootstrap_distribution",
    "confidence_interval",
    "permutation_null_distribution",
    "p_value",
    "format_p_value",
    "two_sample_inference",
]
