"""
Solution wrapper for interval search results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING

from pyestimate.core.result import Result
from pyestimate.interval._common import IntervalParams

if TYPE_CHECKING:
    from pyestimate.interval.design import IntervalDesign


@dataclass
class IntervalSolution:
    """
    User-facing interval search results.

    Unpacks as ``(x, fun)``:

        >>> x, fun = minimize_interval([1.0, 2.0, 3.0], seed=0)
    """
    _result: Result[IntervalParams]
    _design: 'IntervalDesign'

    # --- Core fields ---

    @property
    def x(self) -> float:
        """Best interior point found."""
        return self._result.params.x

    @property
    def fun(self) -> float:
        """Objective value at x."""
        return self._result.params.fun

    @property
    def bracket(self) -> tuple[float, float, float]:
        """Final bracket (x1, x2, x3)."""
        return self._result.params.bracket

    @property
    def f_bounds_initial(self) -> tuple[float, float]:
        """Objective at the initial endpoints (f1, f3)."""
        return self._result.params.f_bounds_initial

    @property
    def n_iter(self) -> int:
        return self._result.params.n_iter

    @property
    def converged(self) -> bool:
        return self._result.params.converged

    @property
    def degenerate(self) -> bool:
        return self._result.params.degenerate

    @property
    def final_change(self) -> float | None:
        return self._result.params.final_change

    # --- Metadata ---

    @property
    def bounds(self) -> tuple[float, float]:
        """Initial bracket endpoints."""
        return (self._design.lower, self._design.upper)

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

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.fun

    # --- Display ---

    def summary(self) -> str:
        """Plain-text report of the search."""
        x1, x2, x3 = self.bracket
        lower, upper = self.bounds
        if self.degenerate:
            status = "degenerate bracket (single point)"
        elif self.converged:
            status = "converged"
        else:
            status = "iteration limit reached"
        lines = [
            "\nRANDOM INTERVAL SEARCH",
            "",
            f"Initial bracket: [{lower:.6g}, {upper:.6g}]",
            f"Final bracket:   [{x1:.6g}, {x3:.6g}]",
            f"Minimizer:       {x2:.8g}",
            f"Objective:       {self.fun:.8g}",
            f"Iterations:      {self.n_iter} (maxit={self._design.maxit})",
            f"Status:          {status}",
        ]
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"IntervalSolution(x={self.x:.6g}, fun={self.fun:.6g}, "
            f"n_iter={self.n_iter}, converged={self.converged})"
        )
