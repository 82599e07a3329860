"""
Regression Design.

Holds the response y and design matrix X as row-aligned pairs. Bootstrap
resampling selects whole rows through take(), so y and X can never drift
apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyestimate.core.exceptions import ValidationError
from pyestimate.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_indices,
    check_min_samples,
)
from pyestimate.regression._loss import LeastSquaresLoss


@dataclass(frozen=True)
class RegressionDesign:
    """
    Regression data: response y paired row-by-row with design matrix X.

    Immutable after construction. No intercept column is added; callers
    who want one append a column of ones to X themselves.

    Construction:
        RegressionDesign.from_arrays(y, X)     # validated
        design.take(indices)                   # row resample of an existing design
    """
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _p: int

    @classmethod
    def from_arrays(cls, y: ArrayLike, X: ArrayLike) -> RegressionDesign:
        """
        Build a design from a response vector and a design matrix.

        Args:
            y: Response, shape (n,) or (n, 1)
            X: Design matrix, shape (n, p); a 1D X is one column

        Raises:
            ValidationError: Non-numeric or non-finite data, no rows
            DimensionError: Wrong dimensionality or len(y) != rows of X
        """
        X_arr = check_array(X, 'X')
        y_arr = check_array(y, 'y')

        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(-1, 1)
        if y_arr.ndim == 2 and y_arr.shape[1] == 1:
            y_arr = y_arr.ravel()

        check_2d(X_arr, 'X')
        check_1d(y_arr, 'y')
        check_consistent_length(y_arr, X_arr, names=('y', 'X'))
        check_min_samples(X_arr, 1, 'X')
        if X_arr.shape[1] < 1:
            raise ValidationError("X: requires at least 1 column, got 0")
        check_finite(X_arr, 'X')
        check_finite(y_arr, 'y')

        X_arr = np.ascontiguousarray(X_arr, dtype=np.float64)
        y_arr = np.ascontiguousarray(y_arr, dtype=np.float64)
        n, p = X_arr.shape
        return cls(_X=X_arr, _y=y_arr, _n=n, _p=p)

    # === Properties ===

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Design matrix (n x p)."""
        return self._X

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def p(self) -> int:
        """Number of coefficients."""
        return self._p

    # === Operations ===

    def take(self, indices: ArrayLike) -> RegressionDesign:
        """
        Select rows of (y, X) together; rows may repeat.

        Args:
            indices: 1D integer row positions in [0, n)

        Returns:
            New design with len(indices) rows and the same columns

        Raises:
            DimensionError: If any index is out of range
        """
        idx = np.asarray(indices)
        check_indices(idx, self._n, 'indices')
        return RegressionDesign(
            _X=self._X[idx],
            _y=self._y[idx],
            _n=int(idx.shape[0]),
            _p=self._p,
        )

    def loss(self) -> LeastSquaresLoss:
        """Least-squares objective β ↦ Σ (y − Xβ)² for this data."""
        return LeastSquaresLoss(self._X, self._y)

    def rank(self) -> int:
        """Numerical column rank of X."""
        return int(np.linalg.matrix_rank(self._X))
