"""
Exception hierarchy for PyResampling.

All exceptions inherit from PyResamplingError to allow catching any
library-specific error. Validation failures additionally inherit from
ValueError so callers using plain ``except ValueError`` still catch them.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from typing import Any


class PyResamplingError(Exception):
    """Base exception for all PyResampling errors."""
    pass


class ValidationError(PyResamplingError, ValueError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class InsufficientDataError(ValidationError):
    """
    Not enough data to carry out the computation.

    Raised for an empty group, a distribution with too few points,
    or a replicate count below 1.

    Attributes:
        name: Name of the offending input (e.g. 'group_a', 'n_reps')
        required: Minimum count that was required
        actual: Count that was actually supplied
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        required: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.name = name
        self.required = required
        self.actual = actual


class InvalidParameterError(ValidationError):
    """
    A tuning parameter is outside its allowed range or set of values.

    Raised for a confidence level outside (0, 1], an unknown p-value
    direction, CI method or quantile type.

    Attributes:
        name: Parameter name
        value: The rejected value
        allowed: Description of the allowed values, if available
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        value: Any = None,
        allowed: Any = None,
    ):
        super().__init__(message)
        self.name = name
        self.value = value
        self.allowed = allowed
