"""
Tests for PyResampling exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyResamplingError)
    - Validation errors are also ValueErrors
    - Diagnostic attributes on InsufficientDataError, InvalidParameterError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pyresampling.core.exceptions import (
    DimensionError,
    InsufficientDataError,
    InvalidParameterError,
    PyResamplingError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyResamplingError."""

    def test_validation_error_is_pyresampling_error(self):
        with pytest.raises(PyResamplingError):
            raise ValidationError("bad input")

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_insufficient_data_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise InsufficientDataError("empty group")

    def test_invalid_parameter_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise InvalidParameterError("bad level")

    def test_invalid_parameter_is_value_error(self):
        with pytest.raises(ValueError):
            raise InvalidParameterError("bad direction")


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestInsufficientDataError:

    def test_attributes(self):
        err = InsufficientDataError(
            "group_a: requires at least 1 samples, got 0",
            name="group_a", required=1, actual=0,
        )
        assert err.name == "group_a"
        assert err.required == 1
        assert err.actual == 0
        assert "group_a" in str(err)

    def test_defaults_none(self):
        err = InsufficientDataError("too small")
        assert err.name is None
        assert err.required is None
        assert err.actual is None


class TestInvalidParameterError:

    def test_attributes(self):
        err = InvalidParameterError(
            "direction must be one of ...",
            name="direction", value="up", allowed=("both", "left", "right"),
        )
        assert err.name == "direction"
        assert err.value == "up"
        assert err.allowed == ("both", "left", "right")

    def test_defaults_none(self):
        err = InvalidParameterError("bad")
        assert err.name is None
        assert err.value is None
        assert err.allowed is None
