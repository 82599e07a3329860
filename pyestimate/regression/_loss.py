"""
Least-squares loss for linear models.

L(β; X, y) = Σᵢ (yᵢ − xᵢᵗβ)². The sum (not the mean) is used throughout:
optimizer tolerances are calibrated against its scale.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray


def ls_loss(beta: ArrayLike, X: NDArray, y: NDArray) -> float:
    """
    Sum of squared residuals of y on X at coefficients beta.

    Args:
        beta: Coefficients (p,)
        X: Design matrix (n, p); no intercept is added
        y: Response (n,)

    Returns:
        Σ (y - Xβ)²
    """
    r = y - X @ np.asarray(beta, dtype=np.float64)
    return float(r @ r)


class LeastSquaresLoss:
    """
    Least-squares objective bound to one (X, y) pair.

    Callable as ``loss(beta)`` so it can be handed to any ScalarOptimizer.
    Optimizers that know about this class may use ``gradient`` or solve
    it in closed form from ``X`` and ``y``; to everyone else it is an
    ordinary black-box function.
    """

    def __init__(self, X: NDArray[np.floating[Any]], y: NDArray[np.floating[Any]]):
        self.X = X
        self.y = y

    @property
    def n_params(self) -> int:
        return self.X.shape[1]

    def __call__(self, beta: NDArray[np.floating[Any]]) -> float:
        return ls_loss(beta, self.X, self.y)

    def gradient(self, beta: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        """∇L(β) = −2 Xᵗ (y − Xβ)."""
        r = self.y - self.X @ beta
        return -2.0 * (self.X.T @ r)

    def __repr__(self) -> str:
        n, p = self.X.shape
        return f"LeastSquaresLoss(n={n}, p={p})"
