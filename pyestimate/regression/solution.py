"""
Regression solution types.

Contains the user-facing wrapper around the bootstrap regression result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray
from scipy import stats

from pyestimate.core.exceptions import ValidationError
from pyestimate.core.result import Result
from pyestimate.regression._common import BootstrapLinearParams

if TYPE_CHECKING:
    from pyestimate.regression.design import RegressionDesign


@dataclass
class BootstrapLinearSolution:
    """
    User-facing bootstrap regression results.

    Wraps the backend Result and provides the point estimate, its
    bootstrap covariance, and derived quantities. Unpacks as
    ``(est_beta, cov_beta)``.
    """
    _result: Result[BootstrapLinearParams]
    _design: 'RegressionDesign'

    # --- Core fields ---

    @property
    def est_beta(self) -> NDArray[np.floating[Any]]:
        """Point estimate β̂ on the original data, shape (p,)."""
        return self._result.params.est_beta

    @property
    def cov_beta(self) -> NDArray[np.floating[Any]]:
        """Bootstrap covariance of β̂, shape (p, p)."""
        return self._result.params.cov_beta

    @property
    def replicates(self) -> NDArray[np.floating[Any]]:
        """Bootstrap replicates β̂ᵦ, shape (B, p)."""
        return self._result.params.replicates

    @property
    def B(self) -> int:
        """Number of bootstrap replicates."""
        return self._result.params.B

    @property
    def standard_errors(self) -> NDArray[np.floating[Any]]:
        """Bootstrap standard errors: sqrt(diag(cov_beta))."""
        return np.sqrt(np.diag(self.cov_beta))

    @property
    def bias(self) -> NDArray[np.floating[Any]]:
        """Bootstrap bias estimate: mean(replicates) - est_beta."""
        return np.mean(self.replicates, axis=0) - self.est_beta

    # --- Quality flags ---

    @property
    def converged(self) -> bool:
        """Whether the optimizer converged on the original data."""
        return self._result.params.converged

    @property
    def n_nonconverged(self) -> int:
        """Bootstrap refits whose optimizer did not report convergence."""
        return int(self.B - self._result.params.replicate_converged.sum())

    @property
    def singular(self) -> bool:
        """True if cov_beta failed the rank/finiteness check (on_singular='warn')."""
        return self._result.params.singular

    @property
    def low_confidence(self) -> bool:
        """
        True if any optimizer call fell back to a best-effort value or
        the covariance is singular.
        """
        return (not self.converged) or self.n_nonconverged > 0 or self.singular

    # --- Derived inference ---

    def conf_int(self, level: float = 0.95) -> NDArray[np.floating[Any]]:
        """
        Normal-approximation confidence intervals, est_beta ± z·SE.

        Args:
            level: Confidence level in (0, 1)

        Returns:
            Array of shape (p, 2) with lower and upper bounds
        """
        if not 0.0 < level < 1.0:
            raise ValidationError(f"level: must be in (0, 1), got {level}")
        z = stats.norm.ppf(0.5 + level / 2.0)
        se = self.standard_errors
        return np.column_stack([self.est_beta - z * se, self.est_beta + z * se])

    # --- Metadata ---

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def p(self) -> int:
        return self._design.p

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

    def __iter__(self) -> Iterator[NDArray[np.floating[Any]]]:
        yield self.est_beta
        yield self.cov_beta

    # --- Display ---

    def summary(self) -> str:
        """Coefficient table with bootstrap standard errors."""
        lines = [
            "Linear Regression (pairs bootstrap)",
            "=" * 60,
            f"Observations: {self.n}",
            f"Coefficients: {self.p}",
            f"Bootstrap replicates: {self.B}",
            f"Optimizer: {self.info.get('optimizer', '?')}",
            "",
            "Coefficients:",
            "-" * 60,
            f"{'Index':<8} {'Estimate':>14} {'Boot.SE':>12} {'Bias':>12}",
            "-" * 60,
        ]

        for i, (coef, se, bias) in enumerate(zip(
            self.est_beta, self.standard_errors, self.bias
        )):
            se_str = f"{se:12.6f}" if np.isfinite(se) else "          NA"
            bias_str = f"{bias:12.6f}" if np.isfinite(bias) else "          NA"
            lines.append(f"  β[{i}]: {coef:14.6f} {se_str} {bias_str}")

        lines.append("-" * 60)
        if self.low_confidence:
            lines.append("LOW CONFIDENCE: see warnings")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"BootstrapLinearSolution(n={self.n}, p={self.p}, B={self.B}, "
            f"low_confidence={self.low_confidence})"
        )
