"""Resampling backends."""

from pyresampling.resampling.backends.cpu import (
    CPUBootstrapBackend,
    CPUPermutationBackend,
)

__all__ = [
    "CPUBootstrapBackend",
    "CPUPermutationBackend",
]
