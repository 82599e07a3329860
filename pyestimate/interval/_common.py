"""
Common data structures for interval search.

IntervalParams is the parameter payload wrapped by Result[P] and exposed
through IntervalSolution.
"""

from __future__ import annotations

from dataclasses import dataclass


# Stopping rule defaults: objective improvement threshold and iteration cap
DEFAULT_TOL = 1e-6
DEFAULT_MAXIT = 100


@dataclass(frozen=True)
class IntervalParams:
    """
    Parameter payload for random interval search.

    - x: best interior point found (the bracket's middle point x2)
    - fun: objective value at x
    - bracket: final (x1, x2, x3), x1 <= x2 <= x3
    - f_bounds_initial: objective at the initial endpoints (f1, f3);
      informational only, never used by the search
    - n_iter: iterations performed (<= maxit)
    - converged: loop ended because the improvement fell to <= tol
    - degenerate: initial bracket had zero width; x is the sole point
    - final_change: last improvement f2_old - f2, None if no iteration ran
    """
    x: float
    fun: float
    bracket: tuple[float, float, float]
    f_bounds_initial: tuple[float, float]
    n_iter: int
    converged: bool
    degenerate: bool
    final_change: float | None
