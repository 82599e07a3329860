"""
Linear regression by optimization with bootstrap covariance.

Public API:
    fit_linear_bootstrap(y, X, B, ...) -> BootstrapLinearSolution

The fit_linear_bootstrap() function is the only entry point. It handles:
    - Input validation
    - Design construction
    - Delegation to the injected optimizer
    - Result wrapping

Example:
    >>> from pyestimate.regression import fit_linear_bootstrap
    >>> result = fit_linear_bootstrap(y, X, B=100, seed=1)
    >>> print(result.est_beta)
    >>> print(result.summary())
"""

from pyestimate.regression._loss import LeastSquaresLoss, ls_loss
from pyestimate.regression.design import RegressionDesign
from pyestimate.regression.optimizers import ExactLeastSquaresOptimizer
from pyestimate.regression.solution import BootstrapLinearSolution
from pyestimate.regression.solvers import fit_linear_bootstrap

__all__ = [
    "fit_linear_bootstrap",
    "RegressionDesign",
    "BootstrapLinearSolution",
    "ExactLeastSquaresOptimizer",
    "LeastSquaresLoss",
    "ls_loss",
]
