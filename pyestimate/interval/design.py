"""
Design class for random interval search.

IntervalDesign encapsulates everything the backend needs: the objective,
the initial bracket and the stopping rule. Immutable, validated at
construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyestimate.core.exceptions import DegenerateBracketError, ValidationError
from pyestimate.core.validation import (
    check_1d,
    check_array,
    check_finite,
    check_min_samples,
)
from pyestimate.interval._common import DEFAULT_MAXIT, DEFAULT_TOL
from pyestimate.interval._loss import SquaredDeviationLoss


@dataclass(frozen=True)
class IntervalDesign:
    """
    Frozen design for random interval search.

    Attributes:
        objective: f(mu) -> float to be minimized.
        lower: Initial left endpoint x1.
        upper: Initial right endpoint x3.
        tol: Stop once an iteration improves f by no more than tol.
        maxit: Maximum number of iterations.
        sample: Observations the bounds (and default objective) came
            from, or None when bounds and objective were given directly.
    """
    objective: Callable[[float], float]
    lower: float
    upper: float
    tol: float
    maxit: int
    sample: NDArray[np.floating[Any]] | None

    @classmethod
    def for_sample(
        cls,
        sample: ArrayLike | None,
        *,
        objective: Callable[[float], float] | None = None,
        bounds: tuple[float, float] | None = None,
        tol: float = DEFAULT_TOL,
        maxit: int = DEFAULT_MAXIT,
    ) -> IntervalDesign:
        """
        Create an interval design with validation.

        Args:
            sample: 1D observations. Supplies the default bracket
                [min(sample), max(sample)] and the default objective
                sum((sample - mu)^2). May be None if both ``objective``
                and ``bounds`` are given.
            objective: Custom objective. Defaults to the L2 loss of sample.
            bounds: Explicit (lower, upper) bracket overriding the sample
                range.
            tol: Improvement threshold, >= 0.
            maxit: Iteration cap, >= 0.

        Returns:
            Validated IntervalDesign.

        Raises:
            ValidationError: If inputs are invalid
            DimensionError: If sample is not 1D
            DegenerateBracketError: If lower > upper
        """
        sample_arr = None
        if sample is not None:
            sample_arr = check_array(sample, 'sample')
            if sample_arr.ndim == 2 and 1 in sample_arr.shape:
                sample_arr = sample_arr.ravel()
            check_1d(sample_arr, 'sample')
            check_min_samples(sample_arr, 1, 'sample')
            check_finite(sample_arr, 'sample')
            sample_arr = sample_arr.astype(np.float64, copy=True)

        if objective is None:
            if sample_arr is None:
                raise ValidationError(
                    "objective: required when no sample is given"
                )
            objective = SquaredDeviationLoss(sample_arr)
        elif not callable(objective):
            raise ValidationError(
                f"objective: expected a callable, got {type(objective).__name__}"
            )

        if bounds is not None:
            if len(bounds) != 2:
                raise ValidationError(
                    f"bounds: expected (lower, upper), got {len(bounds)} values"
                )
            lower, upper = float(bounds[0]), float(bounds[1])
        elif sample_arr is not None:
            lower, upper = float(sample_arr.min()), float(sample_arr.max())
        else:
            raise ValidationError("bounds: required when no sample is given")

        if not (np.isfinite(lower) and np.isfinite(upper)):
            raise ValidationError(
                f"bounds: must be finite, got ({lower}, {upper})"
            )
        if lower > upper:
            raise DegenerateBracketError(
                f"bounds: lower ({lower}) exceeds upper ({upper})",
                lower=lower,
                upper=upper,
            )

        if not np.isfinite(tol) or tol < 0:
            raise ValidationError(f"tol: must be finite and >= 0, got {tol}")
        if isinstance(maxit, bool) or int(maxit) != maxit or maxit < 0:
            raise ValidationError(f"maxit: must be an integer >= 0, got {maxit!r}")

        return cls(
            objective=objective,
            lower=lower,
            upper=upper,
            tol=float(tol),
            maxit=int(maxit),
            sample=sample_arr,
        )

    @property
    def is_degenerate(self) -> bool:
        """True when the initial bracket is a single point."""
        return self.lower == self.upper
