"""
Random interval search.

Derivative-free, stochastic minimization of a 1-D objective by random
bracket narrowing.

Usage:
    from pyestimate.interval import minimize_interval

    x, fun = minimize_interval(sample, tol=1e-6, maxit=100, seed=42)
"""

from pyestimate.interval._loss import LossEvaluation, evaluate_loss, l2_loss
from pyestimate.interval.design import IntervalDesign
from pyestimate.interval.optimizer import IntervalOptimizer
from pyestimate.interval.solution import IntervalSolution
from pyestimate.interval.solvers import minimize_interval

__all__ = [
    "minimize_interval",
    "IntervalDesign",
    "IntervalSolution",
    "IntervalOptimizer",
    "LossEvaluation",
    "evaluate_loss",
    "l2_loss",
]
