"""
Structural interfaces shared by samples and backends.

Anything that looks like a sample (has a size and metadata) or like a
backend (has a name and a solve method) is accepted; nothing has to
inherit from a PyResampling class.
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

D = TypeVar('D', contravariant=True)  # design accepted by a backend
P = TypeVar('P', covariant=True)  # payload carried in the Result


@runtime_checkable
class DataSource(Protocol):
    """
    A labeled sample that resampling backends can draw from.

    TwoSampleDesign is the implementation shipped with the library.
    """

    @property
    def n_observations(self) -> int:
        """Observations kept for analysis, after label filtering."""
        ...

    @property
    def metadata(self) -> dict[str, Any]:
        """Group labels and sizes, e.g. {'group_a': 'Action', 'n_a': 200, ...}."""
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Turns a design into a Result.

    Backends hold no state between calls: replicate count, seed and
    worker count all arrive on the design. Names follow
    '{device}_{method}', e.g. 'cpu_bootstrap'.
    """

    @property
    def name(self) -> str:
        ...

    def solve(self, design: D) -> 'Result[P]':
        ...
