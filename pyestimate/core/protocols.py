"""
Core protocols for PyEstimate.

These define structural interfaces that collaborators must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that any object with the right methods can be injected: a SciPy wrapper,
a closed-form stub in tests, or a user's own optimizer.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Injectable: estimators never construct their collaborators implicitly
      when the caller supplies one
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, Any, Callable, runtime_checkable

import numpy as np
from numpy.typing import NDArray

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


Objective = Callable[[NDArray[np.floating[Any]]], float]


@runtime_checkable
class ScalarOptimizer(Protocol):
    """
    Black-box minimizer of a scalar-valued objective.

    Given an objective f: R^p -> R and a starting point of length p,
    returns an approximate minimizer. Implementations should be pure
    functions of (objective, start) so that bootstrap results are
    reproducible under a fixed random source.

    The return value may be an OptimizerResult, any object exposing the
    minimizer as ``.x`` (such as a SciPy OptimizeResult), or a bare
    array. Non-convergence must be reported through the result, never
    raised.
    """

    def minimize(
        self,
        objective: Objective,
        start: NDArray[np.floating[Any]],
    ) -> Any:
        ...


@runtime_checkable
class RandomSource(Protocol):
    """
    Seedable source of the two kinds of draws the estimators need.

    A RandomSource is owned by a single call. It is never shared across
    worker threads; the bootstrap backend draws every resample up front
    on the calling thread.
    """

    def uniform(self, low: float, high: float) -> float:
        """One draw from U[low, high]."""
        ...

    def integers(self, n: int, size: int) -> NDArray[np.integer[Any]]:
        """``size`` draws uniformly from {0, ..., n-1}, with replacement."""
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a domain-specific Design and produces a Result
    with a domain-specific parameter payload.

    Backends are stateless apart from collaborators injected at
    construction (optimizer, random source). This makes them easy to
    test and swap.

    Type Parameters:
        D: The Design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_interval', 'cpu_pairs_bootstrap'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Validated domain-specific design

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            NumericalError: If numerical issues prevent a usable result
            ValidationError: If design is invalid for this backend
        """
        ...
