"""
Shared fixtures for bootstrap regression tests.
"""

import numpy as np
import pytest

from bootstrap_stubs import BETA_TRUE
from pyestimate.regression import ExactLeastSquaresOptimizer


@pytest.fixture
def scenario_data():
    """n=120, p=8 linear model with unit noise."""
    rng = np.random.default_rng(2024)
    X = rng.standard_normal((120, 8))
    y = X @ BETA_TRUE + rng.standard_normal(120)
    return y, X


@pytest.fixture
def small_data(rng):
    X = rng.standard_normal((40, 3))
    y = X @ np.array([1.0, -2.0, 0.5]) + 0.3 * rng.standard_normal(40)
    return y, X


@pytest.fixture
def exact():
    return ExactLeastSquaresOptimizer()
