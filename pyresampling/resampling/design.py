"""
Design classes for resampling inference.

TwoSampleDesign holds the labeled sample being analyzed. ResamplingDesign
bundles a sample with everything a backend needs to produce a replicate
distribution. Both are immutable and validated at construction.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyresampling.core.compute.streams import SeedLike, check_seed
from pyresampling.core.exceptions import InvalidParameterError, ValidationError
from pyresampling.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_min_samples,
    check_n_jobs,
    check_n_reps,
)
from pyresampling.resampling._statistics import mean_diff


def _readonly(arr: NDArray) -> NDArray:
    arr.setflags(write=False)
    return arr


def _label_array(labels: Iterable[Hashable]) -> NDArray:
    """
    Labels as a 1D object array, one element per label.

    Each label is stored as given: mixed int and str labels keep their
    types and tuple labels stay single elements.
    """
    if isinstance(labels, np.ndarray):
        check_1d(labels, "labels")
        return labels.astype(object)
    items = list(labels)
    arr = np.empty(len(items), dtype=object)
    for i, label in enumerate(items):
        arr[i] = label
    return arr


def _matches(labels: NDArray, group: Hashable) -> NDArray[np.bool_]:
    return np.fromiter(
        (bool(label == group) for label in labels), dtype=bool, count=len(labels),
    )


@dataclass(frozen=True)
class TwoSampleDesign:
    """
    Frozen two-group sample.

    Attributes:
        values: Observation values, shape (n,), float64, read-only.
        labels: Group label of each observation, shape (n,), read-only.
        is_a: Boolean mask, True where the observation belongs to group_a.
        group_a: Label of the first group (minuend of the statistic).
        group_b: Label of the second group (subtrahend).
        n_excluded: Observations dropped because their label matched
            neither group.
    """
    values: NDArray[np.floating[Any]]
    labels: NDArray
    is_a: NDArray[np.bool_]
    group_a: Hashable
    group_b: Hashable
    n_excluded: int = 0

    @classmethod
    def from_arrays(
        cls,
        labels: ArrayLike,
        values: ArrayLike,
        group_a: Hashable,
        group_b: Hashable,
    ) -> TwoSampleDesign:
        """
        Build a design from parallel label and value arrays.

        Observations labeled neither group_a nor group_b are excluded
        with a UserWarning.

        Raises:
            InvalidParameterError: If group_a == group_b.
            DimensionError: If labels/values are not 1D or differ in length.
            ValidationError: If values are non-numeric or non-finite.
            InsufficientDataError: If either group ends up empty.
        """
        if group_a == group_b:
            raise InvalidParameterError(
                f"group_a and group_b must differ, both are {group_a!r}",
                name="group_b",
                value=group_b,
            )

        values_arr = check_array(values, "values").astype(np.float64, copy=True)
        labels_arr = _label_array(labels)
        check_1d(values_arr, "values")
        check_consistent_length(labels_arr, values_arr, names=("labels", "values"))
        check_finite(values_arr, "values")

        in_a = _matches(labels_arr, group_a)
        in_b = _matches(labels_arr, group_b)
        keep = in_a | in_b
        n_excluded = int(len(keep) - keep.sum())
        if n_excluded:
            warnings.warn(
                f"{n_excluded} observation(s) labeled neither {group_a!r} "
                f"nor {group_b!r} were excluded",
                UserWarning,
                stacklevel=2,
            )

        is_a = in_a[keep]
        check_min_samples(values_arr[keep][is_a], 1, "group_a")
        check_min_samples(values_arr[keep][~is_a], 1, "group_b")

        return cls(
            values=_readonly(values_arr[keep]),
            labels=_readonly(labels_arr[keep]),
            is_a=_readonly(is_a),
            group_a=group_a,
            group_b=group_b,
            n_excluded=n_excluded,
        )

    @classmethod
    def from_observations(
        cls,
        observations: Iterable[tuple[Hashable, float]],
        group_a: Hashable,
        group_b: Hashable,
    ) -> TwoSampleDesign:
        """Build a design from an ordered sequence of (label, value) pairs."""
        labels = []
        values = []
        for i, obs in enumerate(observations):
            try:
                label, value = obs
            except (TypeError, ValueError) as e:
                raise ValidationError(
                    f"observations[{i}]: expected a (label, value) pair, "
                    f"got {obs!r}"
                ) from e
            labels.append(label)
            values.append(value)

        return cls.from_arrays(_label_array(labels), values, group_a, group_b)

    @classmethod
    def from_groups(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        group_a: Hashable = "A",
        group_b: Hashable = "B",
    ) -> TwoSampleDesign:
        """Build a design from the two groups' values given separately."""
        x_arr = check_array(x, "x").ravel()
        y_arr = check_array(y, "y").ravel()
        labels = _label_array([group_a] * len(x_arr) + [group_b] * len(y_arr))
        return cls.from_arrays(labels, np.concatenate([x_arr, y_arr]),
                               group_a, group_b)

    def regroup(self, group_a: Hashable, group_b: Hashable) -> TwoSampleDesign:
        """Same observations, different pair (or order) of group labels."""
        if (group_a, group_b) == (self.group_a, self.group_b):
            return self
        return TwoSampleDesign.from_arrays(self.labels, self.values,
                                           group_a, group_b)

    def swapped(self) -> TwoSampleDesign:
        """Same observations with group_a and group_b exchanged."""
        return self.regroup(self.group_b, self.group_a)

    # --- Group views ---

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Values of group_a."""
        return self.values[self.is_a]

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Values of group_b."""
        return self.values[~self.is_a]

    @property
    def n_a(self) -> int:
        return int(self.is_a.sum())

    @property
    def n_b(self) -> int:
        return int(len(self.is_a) - self.is_a.sum())

    # --- DataSource protocol ---

    @property
    def n_observations(self) -> int:
        return len(self.values)

    @property
    def metadata(self) -> dict[str, Any]:
        return {
            'group_a': self.group_a,
            'group_b': self.group_b,
            'n_a': self.n_a,
            'n_b': self.n_b,
            'n_excluded': self.n_excluded,
        }

    def __repr__(self) -> str:
        return (
            f"TwoSampleDesign({self.group_a!r}: n={self.n_a}, "
            f"{self.group_b!r}: n={self.n_b})"
        )


def as_design(
    sample: TwoSampleDesign | Iterable[tuple[Hashable, float]],
    group_a: Hashable | None = None,
    group_b: Hashable | None = None,
) -> TwoSampleDesign:
    """
    Coerce solver input to a TwoSampleDesign.

    A TwoSampleDesign is used as is, or regrouped if group labels are
    given. Anything else is treated as (label, value) pairs and needs
    both group labels.
    """
    if isinstance(sample, TwoSampleDesign):
        if group_a is None and group_b is None:
            return sample
        return sample.regroup(
            sample.group_a if group_a is None else group_a,
            sample.group_b if group_b is None else group_b,
        )

    if group_a is None or group_b is None:
        raise InvalidParameterError(
            "group_a and group_b are required when sample is a sequence "
            "of (label, value) pairs",
            name="group_a" if group_a is None else "group_b",
            value=None,
        )
    return TwoSampleDesign.from_observations(sample, group_a, group_b)


@dataclass(frozen=True)
class ResamplingDesign:
    """
    Frozen design for a bootstrap or permutation backend.

    Attributes:
        sample: The two-group sample.
        statistic: fn(x, y) -> float.
        n_reps: Number of replicates (>= 1).
        seed: Root seed; int, SeedSequence, Generator or None.
        n_jobs: Worker threads; -1 for all cores.
    """
    sample: TwoSampleDesign
    statistic: Callable
    n_reps: int
    seed: SeedLike
    n_jobs: int

    @classmethod
    def for_resampling(
        cls,
        sample: TwoSampleDesign,
        statistic: Callable = mean_diff,
        n_reps: int = 1000,
        *,
        seed: SeedLike = None,
        n_jobs: int = 1,
    ) -> ResamplingDesign:
        """
        Create a resampling design with validation.

        Raises:
            ValidationError: If sample is not a TwoSampleDesign or
                statistic is not callable.
            InsufficientDataError: If n_reps < 1.
            InvalidParameterError: If n_jobs or seed is invalid.
        """
        if not isinstance(sample, TwoSampleDesign):
            raise ValidationError(
                f"sample must be a TwoSampleDesign, got {type(sample).__name__}"
            )
        if not callable(statistic):
            raise ValidationError(
                f"statistic must be callable, got {type(statistic).__name__}"
            )
        n_reps = check_n_reps(n_reps)
        check_n_jobs(n_jobs)
        check_seed(seed)

        return cls(
            sample=sample,
            statistic=statistic,
            n_reps=n_reps,
            seed=seed,
            n_jobs=n_jobs,
        )
