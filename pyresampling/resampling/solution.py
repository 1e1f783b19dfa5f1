"""
Solution wrapper for two-sample resampling inference.

InferenceSolution wraps Result[InferenceParams] and provides convenient
accessors and a printable summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pyresampling.core.result import Result
from pyresampling.resampling._common import InferenceParams
from pyresampling.resampling._pvalue import format_p

if TYPE_CHECKING:
    from pyresampling.resampling.design import TwoSampleDesign


@dataclass
class InferenceSolution:
    """
    User-facing result of two_sample_inference().

    Holds the observed statistic, the bootstrap confidence interval, the
    permutation p-value and the raw distributions behind them (for
    plotting or further analysis by the caller).
    """
    _result: Result[InferenceParams]
    _design: 'TwoSampleDesign'

    # --- Core fields ---

    @property
    def observed(self) -> float:
        """Statistic on the original sample."""
        return self._result.params.observed

    @property
    def conf_int(self) -> tuple[float, float]:
        """(low, high) confidence interval from the bootstrap distribution."""
        return self._result.params.conf_int

    @property
    def conf_level(self) -> float:
        return self._result.params.conf_level

    @property
    def ci_method(self) -> str:
        return self._result.params.ci_method

    @property
    def p_value(self) -> float:
        """Permutation p-value; lower-bounded by 1 / n_perm unless 0."""
        return self._result.params.p_value

    @property
    def direction(self) -> str:
        return self._result.params.direction

    @property
    def boot_stats(self) -> NDArray[np.floating[Any]]:
        """Bootstrap replicates, shape (n_boot,)."""
        return self._result.params.boot_stats

    @property
    def null_stats(self) -> NDArray[np.floating[Any]]:
        """Permutation null distribution, shape (n_perm,)."""
        return self._result.params.null_stats

    @property
    def n_boot(self) -> int:
        return len(self.boot_stats)

    @property
    def n_perm(self) -> int:
        return len(self.null_stats)

    @property
    def bias(self) -> float:
        """Bootstrap bias estimate: mean(boot_stats) - observed."""
        return self._result.params.bias

    @property
    def se(self) -> float:
        """Bootstrap standard error: sd(boot_stats)."""
        return self._result.params.se

    # --- Metadata ---

    @property
    def sample(self) -> 'TwoSampleDesign':
        return self._design

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Display ---

    def format_p_value(self, digits: int = 4) -> str:
        """p-value for prose; 0 is rendered as "< 1/n_perm"."""
        return format_p(self.p_value, self.n_perm, digits)

    def summary(self) -> str:
        """
        Printable summary.

        Produces:
            TWO-SAMPLE RESAMPLING INFERENCE

            Groups: 'Action' (n=200) vs 'Comedy' (n=200)
            Statistic: mean_diff
            Observed statistic: -0.69

            Bootstrap (R=1000): bias -0.0012, std. error 0.1497
            95% perc CI: (-0.98213, -0.39874)

            Permutation (R=5000), direction 'both': p-value < 0.0002
        """
        d = self._design
        conf_pct = f"{self.conf_level * 100:g}"
        lines = [
            "\nTWO-SAMPLE RESAMPLING INFERENCE",
            "",
            f"Groups: {d.group_a!r} (n={d.n_a}) vs {d.group_b!r} (n={d.n_b})",
            f"Statistic: {self.info.get('statistic', '?')}",
            f"Observed statistic: {self.observed:.6g}",
            "",
            f"Bootstrap (R={self.n_boot}): bias {self.bias:.5g}, "
            f"std. error {self.se:.5g}",
            f"{conf_pct}% {self.ci_method} CI: "
            f"({self.conf_int[0]:.5f}, {self.conf_int[1]:.5f})",
            "",
            f"Permutation (R={self.n_perm}), direction {self.direction!r}: "
            f"p-value {self.format_p_value()}",
            "",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"InferenceSolution(observed={self.observed:.4g}, "
            f"conf_int=({self.conf_int[0]:.4g}, {self.conf_int[1]:.4g}), "
            f"p_value={self.format_p_value()})"
        )
