"""
Core infrastructure for PyResampling.

Shared abstractions used by the resampling domain package.

Key components:
    protocols: DataSource, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and deterministic random streams
"""

from pyresampling.core.protocols import DataSource, Backend
from pyresampling.core.result import Result
from pyresampling.core.exceptions import (
    PyResamplingError,
    ValidationError,
    DimensionError,
    InsufficientDataError,
    InvalidParameterError,
)

__all__ = [
    # Protocols
    "DataSource",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyResamplingError",
    "ValidationError",
    "DimensionError",
    "InsufficientDataError",
    "InvalidParameterError",
]
