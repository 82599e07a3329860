"""
Solver dispatch for random interval search.

Public API: minimize_interval(sample, ...) -> IntervalSolution
"""

from __future__ import annotations

from typing import Callable

import numpy as np
from numpy.typing import ArrayLike

from pyestimate.core.protocols import RandomSource
from pyestimate.core.rng import as_random_source
from pyestimate.interval._common import DEFAULT_MAXIT, DEFAULT_TOL
from pyestimate.interval.backends.cpu import CPUIntervalBackend
from pyestimate.interval.design import IntervalDesign
from pyestimate.interval.solution import IntervalSolution


def minimize_interval(
    sample: ArrayLike | None,
    tol: float = DEFAULT_TOL,
    maxit: int = DEFAULT_MAXIT,
    *,
    objective: Callable[[float], float] | None = None,
    bounds: tuple[float, float] | None = None,
    seed: int | np.random.Generator | RandomSource | None = None,
    verbose: bool = False,
) -> IntervalSolution:
    """
    Minimize a 1-D objective by random interval search.

    Starts from the bracket [min(sample), max(sample)] with an interior
    point drawn uniformly at random, then repeatedly samples a candidate
    in the wider half of the bracket and either shrinks that half or
    moves the interior point to the candidate. Derivative-free and
    stochastic: two unseeded runs may return different answers.

    Parameters
    ----------
    sample : array-like or None
        1D observations. Defines the default bracket and the default
        objective f(mu) = sum((sample - mu)^2), whose minimizer is the
        sample mean.
    tol : float
        Stop once an iteration lowers the objective by no more than tol.
    maxit : int
        Hard cap on iterations.
    objective : callable, optional
        Custom objective f(mu) -> float.
    bounds : (float, float), optional
        Explicit initial bracket. Required when sample is None.
    seed : int, Generator or RandomSource, optional
        Random source for the uniform draws. Fix it for reproducible runs.
    verbose : bool
        Print progress information.

    Returns
    -------
    IntervalSolution
        Unpacks as ``(x, fun)``.

    Raises
    ------
    ValidationError
        Empty or non-finite sample, bad tol/maxit.
    DegenerateBracketError
        Explicit bounds with lower > upper.

    Examples
    --------
    >>> from pyestimate.interval import minimize_interval
    >>> x, fun = minimize_interval([1.0, 2.0, 3.0, 4.0, 5.0], seed=1)
    """
    design = IntervalDesign.for_sample(
        sample,
        objective=objective,
        bounds=bounds,
        tol=tol,
        maxit=maxit,
    )

    if verbose:
        print(f"Interval search: bracket [{design.lower:.6g}, {design.upper:.6g}], "
              f"tol={design.tol:.3g}, maxit={design.maxit}")

    backend = CPUIntervalBackend(as_random_source(seed))
    result = backend.solve(design)

    if verbose:
        p = result.params
        print(f"Converged: {p.converged} (iterations: {p.n_iter}, "
              f"x: {p.x:.8g}, f: {p.fun:.8g})")

    return IntervalSolution(_result=result, _design=design)
