"""
Exception hierarchy for PyEstimate.

All exceptions inherit from PyEstimateError to allow catching any
library-specific error. Domain packages raise the most specific class
available here rather than defining their own.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyEstimateError(Exception):
    """Base exception for all PyEstimate errors."""
    pass


class ValidationError(PyEstimateError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when y and X disagree on the number of rows, when resample
    indices fall outside the data, or when an optimizer hands back a
    coefficient vector of the wrong length.
    """
    pass


class DegenerateBracketError(ValidationError):
    """
    Search interval is inverted and cannot be searched.

    Zero-width brackets are not an error (the sole point is returned);
    this is raised only when the lower bound exceeds the upper bound.

    Attributes:
        lower: Requested lower bound
        upper: Requested upper bound
    """

    def __init__(
        self,
        message: str,
        lower: float | None = None,
        upper: float | None = None,
    ):
        super().__init__(message)
        self.lower = lower
        self.upper = upper


class NumericalError(PyEstimateError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularCovarianceError(NumericalError):
    """
    Bootstrap covariance estimate is singular or not finite.

    Raised when the replicate matrix cannot support a full-rank p x p
    covariance: too few replicates (B < p + 1), replicates containing
    NaN/Inf from degenerate refits, or numerically collinear replicates.

    Attributes:
        rank: Numerical rank of the covariance, if computed
        expected_rank: Number of coefficients p
        n_replicates: Number of bootstrap replicates B
        n_nonfinite: Number of replicate rows containing NaN/Inf
    """

    def __init__(
        self,
        message: str,
        rank: int | None = None,
        expected_rank: int | None = None,
        n_replicates: int | None = None,
        n_nonfinite: int | None = None,
    ):
        super().__init__(message)
        self.rank = rank
        self.expected_rank = expected_rank
        self.n_replicates = n_replicates
        self.n_nonfinite = n_nonfinite


class ConvergenceError(PyEstimateError):
    """
    Iterative algorithm failed to converge.

    The estimators in this package accept best-effort optimizer output and
    flag it instead of raising; this class exists for optimizer
    implementations and callers that want to escalate non-convergence.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final parameter or objective change
        reason: Why convergence failed (e.g., 'max_iterations', 'diverging')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
