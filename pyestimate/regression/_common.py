"""
Common data structures for bootstrap linear regression.

BootstrapLinearParams is the parameter payload wrapped by Result[P] and
exposed through BootstrapLinearSolution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


DEFAULT_BOOTSTRAP_REPLICATES = 100


@dataclass(frozen=True)
class BootstrapLinearParams:
    """
    Parameter payload for pairs-bootstrap linear regression.

    - est_beta: optimizer estimate on the original data
    - cov_beta: sample covariance (ddof=1) of the replicate rows
    - replicates: β̂ᵦ for every resample, one row per replicate
    - converged: whether the point-estimate optimizer call converged
    - replicate_converged: per-replicate convergence flags
    - singular: cov_beta failed the rank/finiteness check
    """
    est_beta: NDArray[np.floating[Any]]            # shape (p,)
    cov_beta: NDArray[np.floating[Any]]            # shape (p, p)
    replicates: NDArray[np.floating[Any]]          # shape (B, p)
    B: int
    converged: bool
    replicate_converged: NDArray[np.bool_]         # shape (B,)
    cov_rank: int | None
    singular: bool
