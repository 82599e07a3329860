"""
Stub optimizers for bootstrap regression tests.
"""

import numpy as np

from pyestimate.core.compute.optimization import OptimizerResult
from pyestimate.regression import ExactLeastSquaresOptimizer


BETA_TRUE = np.array([2.0, -1.5, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0])


class NonConvergingOptimizer:
    """Exact minimizer that always reports an exhausted budget."""

    def __init__(self):
        self._exact = ExactLeastSquaresOptimizer()

    def minimize(self, objective, start):
        res = self._exact.minimize(objective, start)
        return OptimizerResult(
            x=res.x, fun=res.fun, converged=False, message='maxiter reached',
        )


class NaNOptimizer:
    """Returns a bare all-NaN vector."""

    def minimize(self, objective, start):
        return np.full(start.shape, np.nan)


class FailAfterFirstOptimizer:
    """Solves the original data, then raises LinAlgError on every refit."""

    def __init__(self):
        self.calls = 0
        self._exact = ExactLeastSquaresOptimizer()

    def minimize(self, objective, start):
        self.calls += 1
        if self.calls > 1:
            raise np.linalg.LinAlgError("Singular matrix")
        return self._exact.minimize(objective, start)


class WrongLengthOptimizer:

    def minimize(self, objective, start):
        return np.zeros(start.shape[0] + 1)
