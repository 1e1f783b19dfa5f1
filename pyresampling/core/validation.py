"""
Validators for resampling inputs.

Every check raises at once, naming the offending parameter and showing
the value it got. Nothing is clipped, dropped or defaulted on the
caller's behalf; one function checks one thing.
"""

from __future__ import annotations

import numbers
from typing import Any, Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyresampling.core.exceptions import (
    DimensionError,
    InsufficientDataError,
    InvalidParameterError,
    ValidationError,
)


def check_array(array: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Coerce an array-like to a floating ndarray.

    Integer input is promoted to float64. Booleans, strings and anything
    NumPy can only hold as object dtype are rejected.

    Raises:
        ValidationError: If the input is not numeric
    """
    try:
        arr = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: not convertible to an array ({e})") from e

    if arr.dtype == object:
        raise ValidationError(
            f"{name}: got object dtype; values must all be numbers"
        )
    if not np.issubdtype(arr.dtype, np.number):
        raise ValidationError(f"{name}: non-numeric dtype {arr.dtype}")

    if not np.issubdtype(arr.dtype, np.floating):
        arr = arr.astype(np.float64)
    return arr


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """Raise ValidationError if array holds NaN or +/-Inf."""
    finite = np.isfinite(array)
    if not finite.all():
        n_nan = int(np.isnan(array).sum())
        n_inf = int((~finite).sum()) - n_nan
        raise ValidationError(
            f"{name}: non-finite values present ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray, name: str) -> None:
    """Raise DimensionError unless array is one-dimensional."""
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D, got shape {array.shape}"
        )


def check_consistent_length(*arrays: NDArray, names: tuple[str, ...]) -> None:
    """
    Raise DimensionError if the arrays differ in length.

    Raises:
        ValueError: If arrays and names are not paired one to one
        DimensionError: If the first dimensions disagree
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"got {len(arrays)} arrays; number of arrays must match number of names ({len(names)})"
        )

    lengths = [len(arr) for arr in arrays]
    if len(set(lengths)) > 1:
        pairs = ", ".join(f"{n}={k}" for n, k in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {pairs}")


def check_min_samples(array: NDArray, min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        InsufficientDataError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise InsufficientDataError(
            f"{name}: requires at least {min_samples} samples, got {n}",
            name=name,
            required=min_samples,
            actual=n,
        )


def check_n_reps(n_reps: Any, name: str = "n_reps") -> int:
    """
    Verify a replicate count is an integer >= 1.

    Returns:
        The count as a plain int

    Raises:
        InvalidParameterError: If n_reps is not an integer
        InsufficientDataError: If n_reps < 1
    """
    if isinstance(n_reps, bool) or not isinstance(n_reps, numbers.Integral):
        raise InvalidParameterError(
            f"{name}: expected an integer, got {type(n_reps).__name__}",
            name=name,
            value=n_reps,
            allowed="integer >= 1",
        )
    n_reps = int(n_reps)
    if n_reps < 1:
        raise InsufficientDataError(
            f"{name} must be >= 1, got {n_reps}",
            name=name,
            required=1,
            actual=n_reps,
        )
    return n_reps


def check_level(level: Any, name: str = "level") -> float:
    """
    Verify a confidence level lies in (0, 1].

    A level of exactly 1 is accepted and denotes the full range of
    the distribution.

    Raises:
        InvalidParameterError: If level is not a real number in (0, 1]
    """
    if isinstance(level, bool) or not isinstance(level, numbers.Real):
        raise InvalidParameterError(
            f"{name}: expected a real number, got {type(level).__name__}",
            name=name,
            value=level,
            allowed="(0, 1]",
        )
    level = float(level)
    if not (0.0 < level <= 1.0):
        raise InvalidParameterError(
            f"{name} must be in (0, 1], got {level}",
            name=name,
            value=level,
            allowed="(0, 1]",
        )
    return level


def check_choice(value: Any, allowed: Iterable[Any], name: str) -> None:
    """
    Verify value is one of a fixed set of options.

    Raises:
        InvalidParameterError: If value is not in allowed
    """
    allowed = tuple(allowed)
    if value not in allowed:
        options = ", ".join(repr(a) for a in allowed)
        raise InvalidParameterError(
            f"{name} must be one of {options}, got {value!r}",
            name=name,
            value=value,
            allowed=allowed,
        )


def check_n_jobs(n_jobs: Any, name: str = "n_jobs") -> None:
    """
    Verify a worker count is -1 (all cores) or a positive integer.

    Raises:
        InvalidParameterError: If n_jobs is 0, below -1 or not an integer
    """
    if (
        isinstance(n_jobs, bool)
        or not isinstance(n_jobs, numbers.Integral)
        or (n_jobs != -1 and n_jobs < 1)
    ):
        raise InvalidParameterError(
            f"{name} must be -1 or a positive integer, got {n_jobs!r}",
            name=name,
            value=n_jobs,
            allowed="-1 or >= 1",
        )
