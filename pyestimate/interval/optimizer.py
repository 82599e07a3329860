"""
Interval search as a ScalarOptimizer.

Lets minimize_interval stand in for a general optimizer wherever the
objective has exactly one parameter, e.g. a one-column regression.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyestimate.core.compute.optimization import OptimizerResult
from pyestimate.core.exceptions import DimensionError, ValidationError
from pyestimate.core.protocols import Objective
from pyestimate.core.rng import NumpyRandomSource
from pyestimate.interval._common import DEFAULT_MAXIT, DEFAULT_TOL
from pyestimate.interval.solvers import minimize_interval


class IntervalOptimizer:
    """
    ScalarOptimizer for one-parameter objectives via random interval search.

    The search always begins from ``bounds``. Each call builds its own
    random source from the optimizer's seed, the starting point and the
    objective's values at the two bounds, so a call is a pure function of
    (objective, start): reusing an instance, or calling it from several
    threads at once, gives the same answers, while different objectives
    get different draws.

    Args:
        bounds: (lower, upper) bracket searched on every call
        tol: Improvement threshold passed to minimize_interval
        maxit: Iteration cap passed to minimize_interval
        seed: Integer seed for the uniform draws. None draws fresh OS
            entropy once, at construction.
    """

    def __init__(
        self,
        bounds: tuple[float, float],
        *,
        tol: float = DEFAULT_TOL,
        maxit: int = DEFAULT_MAXIT,
        seed: int | None = None,
    ):
        if seed is None:
            seed = int(np.random.SeedSequence().entropy)
        elif isinstance(seed, bool) or not isinstance(seed, (int, np.integer)) or seed < 0:
            raise ValidationError(
                f"seed: expected a non-negative int or None, got {seed!r}"
            )
        self.bounds = (float(bounds[0]), float(bounds[1]))
        self.tol = tol
        self.maxit = maxit
        self.seed = int(seed)

    def _source_for(
        self,
        start: NDArray[np.floating[Any]],
        f_bounds: tuple[float, float],
    ) -> NumpyRandomSource:
        key = np.concatenate([start, np.array(f_bounds, dtype=np.float64)])
        words = np.frombuffer(key.tobytes(), dtype=np.uint32)
        entropy = [self.seed, *(int(w) for w in words)]
        return NumpyRandomSource(np.random.default_rng(np.random.SeedSequence(entropy)))

    def minimize(
        self,
        objective: Objective,
        start: NDArray[np.floating[Any]],
    ) -> OptimizerResult:
        start = np.atleast_1d(np.asarray(start, dtype=np.float64))
        if start.shape != (1,):
            raise DimensionError(
                f"IntervalOptimizer handles one parameter, got start of shape {start.shape}"
            )

        lower, upper = self.bounds
        f_lower = float(objective(np.array([lower])))
        f_upper = float(objective(np.array([upper])))
        known = {lower: f_lower, upper: f_upper}

        def scalar_objective(mu: float) -> float:
            if mu in known:
                return known[mu]
            return float(objective(np.array([mu])))

        solution = minimize_interval(
            None,
            self.tol,
            self.maxit,
            objective=scalar_objective,
            bounds=self.bounds,
            seed=self._source_for(start, (f_lower, f_upper)),
        )
        # endpoints, then x2 and two evaluations per iteration
        n_fev = 2 if solution.degenerate else 2 * solution.n_iter + 3
        return OptimizerResult(
            x=np.array([solution.x]),
            fun=solution.fun,
            converged=solution.converged,
            n_iter=solution.n_iter,
            n_fev=n_fev,
            message='; '.join(solution.warnings),
        )

    def __repr__(self) -> str:
        return f"IntervalOptimizer(bounds={self.bounds})"
