"""
Tests for the least-squares loss and the closed-form optimizer.
"""

import numpy as np
import pytest

from pyestimate.core.exceptions import ValidationError
from pyestimate.core.protocols import ScalarOptimizer
from pyestimate.regression import ExactLeastSquaresOptimizer, LeastSquaresLoss, ls_loss


class TestLsLoss:

    def test_known_value(self):
        X = np.array([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
        y = np.array([1.0, 2.0, 4.0])
        # residuals at beta=(1, 2): (0, 0, 1)
        assert ls_loss([1.0, 2.0], X, y) == 1.0

    def test_zero_at_exact_fit(self, rng):
        X = rng.standard_normal((10, 2))
        beta = np.array([0.5, -1.0])
        assert ls_loss(beta, X, X @ beta) == pytest.approx(0.0, abs=1e-24)

    def test_is_sum_not_mean(self):
        X = np.ones((4, 1))
        y = np.full(4, 2.0)
        assert ls_loss([0.0], X, y) == 16.0


class TestLeastSquaresLoss:

    def test_callable_matches_function(self, small_data):
        y, X = small_data
        loss = LeastSquaresLoss(X, y)
        beta = np.array([0.1, 0.2, 0.3])
        assert loss(beta) == ls_loss(beta, X, y)
        assert loss.n_params == 3

    def test_gradient_matches_finite_differences(self, small_data):
        y, X = small_data
        loss = LeastSquaresLoss(X, y)
        beta = np.array([0.3, -0.7, 1.1])
        h = 1e-6
        numeric = np.array([
            (loss(beta + h * e) - loss(beta - h * e)) / (2 * h)
            for e in np.eye(3)
        ])
        np.testing.assert_allclose(loss.gradient(beta), numeric, rtol=1e-5)

    def test_gradient_zero_at_minimum(self, small_data):
        y, X = small_data
        beta_hat, *_ = np.linalg.lstsq(X, y, rcond=None)
        np.testing.assert_allclose(LeastSquaresLoss(X, y).gradient(beta_hat), 0.0, atol=1e-9)

    def test_repr(self):
        assert repr(LeastSquaresLoss(np.ones((5, 2)), np.ones(5))) == "LeastSquaresLoss(n=5, p=2)"


class TestExactLeastSquaresOptimizer:

    def test_satisfies_protocol(self):
        assert isinstance(ExactLeastSquaresOptimizer(), ScalarOptimizer)

    def test_solves_full_rank(self, small_data):
        y, X = small_data
        res = ExactLeastSquaresOptimizer().minimize(LeastSquaresLoss(X, y), np.zeros(3))
        expected, *_ = np.linalg.lstsq(X, y, rcond=None)
        np.testing.assert_allclose(res.x, expected, rtol=1e-10)
        assert res.converged
        assert res.fun == pytest.approx(ls_loss(expected, X, y))

    def test_rank_deficient_not_converged(self):
        x = np.arange(1.0, 7.0)
        X = np.column_stack([x, 2 * x])
        res = ExactLeastSquaresOptimizer().minimize(LeastSquaresLoss(X, x), np.zeros(2))
        assert not res.converged
        assert "rank-deficient" in res.message
        assert np.all(np.isfinite(res.x))

    def test_start_ignored(self, small_data):
        y, X = small_data
        opt = ExactLeastSquaresOptimizer()
        loss = LeastSquaresLoss(X, y)
        a = opt.minimize(loss, np.zeros(3))
        b = opt.minimize(loss, np.full(3, 100.0))
        np.testing.assert_array_equal(a.x, b.x)

    def test_rejects_other_objectives(self):
        with pytest.raises(ValidationError, match="LeastSquaresLoss"):
            ExactLeastSquaresOptimizer().minimize(lambda b: float(b @ b), np.zeros(2))
