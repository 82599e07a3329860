"""
Generic optimizers satisfying the ScalarOptimizer protocol.

ScipyOptimizer is the default collaborator of the bootstrap estimator.
normalize_result() turns whatever an injected optimizer returns into an
OptimizerResult so backends only deal with one shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy.optimize import minimize

from pyestimate.core.exceptions import DimensionError
from pyestimate.core.protocols import Objective


_GRADIENT_FREE = frozenset({'nelder-mead', 'powell', 'cobyla', 'cobyqa'})

@dataclass(frozen=True)
class OptimizerResult:
    """
    Outcome of a single optimizer call.

    Attributes:
        x: Best point found, shape (p,)
        fun: Objective value at x
        converged: False when the optimizer exhausted its budget or
            otherwise failed; x is then a best-effort value
        n_iter: Iterations performed, if reported
        n_fev: Objective evaluations, if reported
        message: Optimizer status message
    """
    x: NDArray[np.floating[Any]]
    fun: float
    converged: bool
    n_iter: int = 0
    n_fev: int = 0
    message: str = ''


class ScipyOptimizer:
    """
    ScalarOptimizer backed by ``scipy.optimize.minimize``.

    BFGS is the default: the least squares loss is smooth and convex, and
    BFGS is deterministic for a given (objective, start). If the objective
    has a ``gradient`` method it is passed as ``jac``; otherwise SciPy
    falls back to finite differences. 'Nelder-Mead' gives the classic
    derivative-free behavior at the cost of many more evaluations.

    Args:
        method: Any method name accepted by scipy.optimize.minimize
        tol: Passed through as ``tol`` (method-specific meaning)
        max_iter: Iteration cap, passed as ``options['maxiter']``
        options: Extra solver options merged over the defaults
    """

    def __init__(
        self,
        method: str = 'BFGS',
        *,
        tol: float | None = None,
        max_iter: int | None = None,
        options: dict[str, Any] | None = None,
    ):
        self.method = method
        self.tol = tol
        self.max_iter = max_iter
        self.options = dict(options) if options else {}

    def minimize(
        self,
        objective: Objective,
        start: NDArray[np.floating[Any]],
    ) -> OptimizerResult:
        options = {'disp': False}
        if self.max_iter is not None:
            options['maxiter'] = self.max_iter
        options.update(self.options)

        # Objectives may expose an analytic gradient; gradient-free
        # methods (Nelder-Mead, Powell) must not be handed one.
        jac = getattr(objective, 'gradient', None)
        if self.method.lower() in _GRADIENT_FREE:
            jac = None

        opt_result = minimize(
            objective,
            np.asarray(start, dtype=np.float64),
            jac=jac,
            method=self.method,
            tol=self.tol,
            options=options,
        )
        return OptimizerResult(
            x=np.atleast_1d(np.asarray(opt_result.x, dtype=np.float64)),
            fun=float(opt_result.fun),
            converged=bool(opt_result.success),
            n_iter=int(getattr(opt_result, 'nit', 0)),
            n_fev=int(getattr(opt_result, 'nfev', 0)),
            message=str(getattr(opt_result, 'message', '')),
        )

    def __repr__(self) -> str:
        return f"ScipyOptimizer(method={self.method!r})"


def normalize_result(
    raw: Any,
    objective: Objective,
    p: int,
) -> OptimizerResult:
    """
    Convert an optimizer's return value into an OptimizerResult.

    Accepts an OptimizerResult, any object with an ``x`` attribute
    (``success``/``fun``/``nit``/``nfev``/``message`` are read when present),
    or a bare array, which is treated as converged.

    Args:
        raw: Value returned by ScalarOptimizer.minimize
        objective: The objective that was minimized (used to fill ``fun``)
        p: Expected length of the minimizer

    Raises:
        DimensionError: If the minimizer does not have length p
    """
    if isinstance(raw, OptimizerResult):
        result = raw
    elif hasattr(raw, 'x'):
        x = np.atleast_1d(np.asarray(raw.x, dtype=np.float64))
        fun = getattr(raw, 'fun', None)
        result = OptimizerResult(
            x=x,
            fun=float(fun) if fun is not None else float(objective(x)),
            converged=bool(getattr(raw, 'success', True)),
            n_iter=int(getattr(raw, 'nit', 0)),
            n_fev=int(getattr(raw, 'nfev', 0)),
            message=str(getattr(raw, 'message', '')),
        )
    else:
        x = np.atleast_1d(np.asarray(raw, dtype=np.float64))
        result = OptimizerResult(x=x, fun=float(objective(x)), converged=True)

    if result.x.shape != (p,):
        raise DimensionError(
            f"optimizer returned minimizer of shape {result.x.shape}, expected ({p},)"
        )
    return result
