"""
Result envelope returned by every backend and composite solver.

The payload (a replicate distribution, or the combined observed / CI /
p-value record) sits in ``params``. Group sizes, block counts and other
bookkeeping go in ``info``; wall-clock timings in ``timing``; anything
the caller should know but that did not stop the computation (non-finite
replicates, a zero p-value) in ``warnings``.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

P = TypeVar('P')


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Frozen envelope around a payload of type P.

    Example:
        Result(
            params=DistributionParams(observed=-0.69, replicates=t,
                                      n_reps=1000, kind='bootstrap'),
            info={'n_a': 200, 'n_b': 200, 'n_blocks': 4},
            timing={'total_seconds': 0.2, 'replicates': 0.19},
            backend_name='cpu_bootstrap',
        )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """True if any warning message contains `substring`."""
        return any(substring in message for message in self.warnings)
