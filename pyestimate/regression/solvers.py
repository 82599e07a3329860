"""
Solver dispatch for bootstrap linear regression.

This module provides the fit_linear_bootstrap() function (public API).
"""

from __future__ import annotations

import warnings

import numpy as np
from numpy.typing import ArrayLike

from pyestimate.core.compute.optimization import ScipyOptimizer
from pyestimate.core.exceptions import ValidationError
from pyestimate.core.protocols import RandomSource, ScalarOptimizer
from pyestimate.core.rng import as_random_source
from pyestimate.regression._common import DEFAULT_BOOTSTRAP_REPLICATES
from pyestimate.regression.backends.cpu import CPUPairsBootstrapBackend, SingularPolicy
from pyestimate.regression.design import RegressionDesign
from pyestimate.regression.solution import BootstrapLinearSolution


def fit_linear_bootstrap(
    y: ArrayLike,
    X: ArrayLike,
    B: int = DEFAULT_BOOTSTRAP_REPLICATES,
    *,
    optimizer: ScalarOptimizer | None = None,
    seed: int | np.random.Generator | RandomSource | None = None,
    n_jobs: int = 1,
    on_singular: SingularPolicy = 'raise',
    verbose: bool = False,
) -> BootstrapLinearSolution:
    """
    Fit a linear model by optimization and estimate Cov(β̂) by bootstrap.

    Minimizes the sum of squared residuals
        L(β) = Σᵢ (yᵢ − xᵢᵗβ)²
    with the given optimizer, starting from β = 0. The covariance of β̂
    is the sample covariance of B refits on pairs-bootstrap resamples:
    each resample draws n rows of (y, X) uniformly with replacement.

    Parameters
    ----------
    y : array-like
        Response vector (n,).
    X : array-like
        Design matrix (n, p). No intercept is added; append a column of
        ones to X to fit one.
    B : int
        Number of bootstrap replicates, >= 1. B >= p + 1 is needed for a
        nonsingular covariance.
    optimizer : ScalarOptimizer, optional
        Anything with ``minimize(objective, start)``. Defaults to
        ``ScipyOptimizer()`` (BFGS).
    seed : int, Generator or RandomSource, optional
        Source of resample indices. Fix it for reproducible results.
    n_jobs : int
        Worker threads for the B refits (1 = inline, -1 = min(cpus, 4)).
        Results do not depend on n_jobs.
    on_singular : {'raise', 'warn'}
        What to do when the bootstrap covariance is singular or not
        finite: raise SingularCovarianceError, or return it flagged
        with a RuntimeWarning.
    verbose : bool
        Print progress information.

    Returns
    -------
    BootstrapLinearSolution
        Unpacks as ``(est_beta, cov_beta)``.

    Raises
    ------
    ValidationError
        Non-numeric or non-finite data, bad B / on_singular.
    DimensionError
        len(y) != rows of X, or the optimizer returned a wrong-length vector.
    SingularCovarianceError
        Singular covariance with on_singular='raise'.

    Warns
    -----
    RuntimeWarning
        Optimizer non-convergence (best-effort values are kept) and,
        with on_singular='warn', a singular covariance.

    Examples
    --------
    >>> import numpy as np
    >>> from pyestimate.regression import fit_linear_bootstrap
    >>> rng = np.random.default_rng(1)
    >>> X = rng.standard_normal((120, 3))
    >>> y = X @ [2.0, -1.5, 0.0] + rng.standard_normal(120)
    >>> est_beta, cov_beta = fit_linear_bootstrap(y, X, B=200, seed=1)
    """
    # === Input Validation ===
    if isinstance(B, bool) or int(B) != B or B < 1:
        raise ValidationError(f"B: must be an integer >= 1, got {B!r}")
    if on_singular not in ('raise', 'warn'):
        raise ValidationError(
            f"on_singular: must be 'raise' or 'warn', got {on_singular!r}"
        )
    if optimizer is None:
        optimizer = ScipyOptimizer()
    elif not callable(getattr(optimizer, 'minimize', None)):
        raise ValidationError(
            f"optimizer: expected an object with a minimize(objective, start) "
            f"method, got {type(optimizer).__name__}"
        )

    # === Construct Design ===
    design = RegressionDesign.from_arrays(y, X)

    if verbose:
        print(f"Bootstrap regression: {design.n} observations, {design.p} coefficients, "
              f"B={int(B)}, optimizer={optimizer!r}")

    # === Solve ===
    backend = CPUPairsBootstrapBackend(
        optimizer,
        as_random_source(seed),
        n_jobs=n_jobs,
        on_singular=on_singular,
    )
    result = backend.solve(design, B=int(B))

    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)

    if verbose:
        print(f"Done in {result.timing['total_seconds']:.3f}s "
              f"(non-converged refits: {result.info['n_nonconverged']})")

    # === Wrap and Return ===
    return BootstrapLinearSolution(_result=result, _design=design)
