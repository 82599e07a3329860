"""
QR-based least squares.

Used by the closed-form least-squares optimizer, which serves as the
deterministic reference against which iterative optimizers are checked.
"""

from dataclasses import dataclass
from typing import Literal, Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import solve_triangular


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Orthogonal matrix (n x k where k = min(n, p) for reduced mode)
        R: Upper triangular matrix (k x p)
        rank: Numerical rank determined from R diagonal
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int


@dataclass(frozen=True)
class LstsqResult:
    """
    Least squares solution with rank diagnostics.

    Attributes:
        coefficients: Solution vector (p,)
        rank: Numerical rank of the design matrix
        full_rank: True when rank == p and the QR path was used
    """
    coefficients: NDArray[np.floating[Any]]
    rank: int
    full_rank: bool


def qr_cpu(
    X: NDArray[np.floating[Any]],
    mode: Literal['reduced', 'complete'] = 'reduced'
) -> QRResult:
    """
    QR decomposition using LAPACK (via NumPy).

    Args:
        X: Matrix to decompose (n x p)
        mode: 'reduced' for economy QR, 'complete' for full QR

    Returns:
        QRResult with Q, R, and numerical rank
    """
    Q, R = np.linalg.qr(X, mode=mode)

    # Numerical rank from R diagonal
    diag_R = np.abs(np.diag(R))
    if len(diag_R) > 0 and diag_R.max() > 0:
        tol = max(X.shape) * np.finfo(X.dtype).eps * diag_R.max()
        rank = int(np.sum(diag_R > tol))
    else:
        rank = 0

    return QRResult(Q=Q, R=R, rank=rank)


def qr_lstsq_cpu(
    X: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
) -> LstsqResult:
    """
    Solve min_β ||y - Xβ||² via QR decomposition.

    The full-rank solution is computed as:
        X = QR
        β = R⁻¹ Q'y

    Rank-deficient systems (which pairs-bootstrap resamples can produce
    when duplicated rows collapse the column space) fall back to the
    minimum-norm solution from ``np.linalg.lstsq``.

    Args:
        X: Design matrix (n x p)
        y: Response vector (n,)

    Returns:
        LstsqResult with coefficients and rank
    """
    n, p = X.shape
    if n >= p:
        qr_result = qr_cpu(X, mode='reduced')
        if qr_result.rank == p:
            Qty = qr_result.Q.T @ y
            beta = solve_triangular(qr_result.R[:p, :p], Qty[:p], lower=False)
            return LstsqResult(coefficients=beta, rank=p, full_rank=True)

    beta, _, rank, _ = np.linalg.lstsq(X, y, rcond=None)
    return LstsqResult(coefficients=beta, rank=int(rank), full_rank=False)
