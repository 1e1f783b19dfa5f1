"""
Shared compute infrastructure for PyResampling.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared infrastructure only.

Submodules:
    timing: Execution timing utilities
    streams: Deterministic per-block random streams and block execution
"""

from pyresampling.core.compute.timing import Timer, timed
from pyresampling.core.compute.streams import (
    BLOCK_SIZE,
    SeedLike,
    block_sizes,
    check_seed,
    run_blocks,
    spawn_generators,
    split_seed,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Random streams
    "BLOCK_SIZE",
    "SeedLike",
    "block_sizes",
    "check_seed",
    "run_blocks",
    "spawn_generators",
    "split_seed",
]
