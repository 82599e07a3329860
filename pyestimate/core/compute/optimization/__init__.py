"""
Optimization utilities for PyEstimate.

Provides the default ScalarOptimizer implementation and result
normalization shared by every backend that delegates to an optimizer.
"""

from pyestimate.core.compute.optimization.minimizers import (
    OptimizerResult,
    ScipyOptimizer,
    normalize_result,
)

__all__ = [
    "OptimizerResult",
    "ScipyOptimizer",
    "normalize_result",
]
