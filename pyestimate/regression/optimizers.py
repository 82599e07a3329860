"""
Closed-form least-squares optimizer.

ExactLeastSquaresOptimizer satisfies the ScalarOptimizer protocol for
LeastSquaresLoss objectives only. It is deterministic and exact, which
makes it the reference collaborator in tests and a fast choice for large B.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyestimate.core.compute.linalg import qr_lstsq_cpu
from pyestimate.core.compute.optimization import OptimizerResult
from pyestimate.core.exceptions import ValidationError
from pyestimate.core.protocols import Objective
from pyestimate.regression._loss import LeastSquaresLoss


class ExactLeastSquaresOptimizer:
    """
    Solve a LeastSquaresLoss by QR instead of iterating.

    The starting point is ignored. Rank-deficient data (possible for
    bootstrap resamples with many repeated rows) gets the minimum-norm
    solution and is reported as not converged, since the minimizer is
    not unique.
    """

    def minimize(
        self,
        objective: Objective,
        start: NDArray[np.floating[Any]],
    ) -> OptimizerResult:
        if not isinstance(objective, LeastSquaresLoss):
            raise ValidationError(
                f"ExactLeastSquaresOptimizer requires a LeastSquaresLoss objective, "
                f"got {type(objective).__name__}"
            )

        solved = qr_lstsq_cpu(objective.X, objective.y)
        beta = solved.coefficients
        message = (
            'closed-form QR solution' if solved.full_rank
            else f'rank-deficient design (rank={solved.rank}, p={objective.n_params}); '
                 f'minimum-norm solution'
        )
        return OptimizerResult(
            x=beta,
            fun=objective(beta),
            converged=solved.full_rank,
            n_iter=0,
            n_fev=1,
            message=message,
        )

    def __repr__(self) -> str:
        return "ExactLeastSquaresOptimizer()"
