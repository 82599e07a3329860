"""
Core infrastructure for PyEstimate.

This module provides shared abstractions and utilities used by the
domain packages (interval, regression).

Key components:
    protocols: ScalarOptimizer, RandomSource, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    rng: Seedable random sources
    compute: Timing, least squares kernel, default optimizer
"""

from pyestimate.core.protocols import Backend, RandomSource, ScalarOptimizer
from pyestimate.core.result import Result
from pyestimate.core.rng import NumpyRandomSource, as_random_source
from pyestimate.core.exceptions import (
    PyEstimateError,
    ValidationError,
    DimensionError,
    DegenerateBracketError,
    NumericalError,
    SingularCovarianceError,
    ConvergenceError,
)

__all__ = [
    # Protocols
    "Backend",
    "RandomSource",
    "ScalarOptimizer",
    # Result
    "Result",
    # Random sources
    "NumpyRandomSource",
    "as_random_source",
    # Exceptions
    "PyEstimateError",
    "ValidationError",
    "DimensionError",
    "DegenerateBracketError",
    "NumericalError",
    "SingularCovarianceError",
    "ConvergenceError",
]
