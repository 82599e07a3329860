"""
CPU backend for pairs-bootstrap linear regression.

CPUPairsBootstrapBackend: optimizer-based point estimate plus B refits on
row resamples, combined into a bootstrap covariance.
"""

from __future__ import annotations

import multiprocessing
from concurrent.futures import ThreadPoolExecutor
from typing import Literal

import numpy as np
from numpy.typing import NDArray

from pyestimate.core.compute.optimization import OptimizerResult, normalize_result
from pyestimate.core.compute.timing import Timer
from pyestimate.core.exceptions import SingularCovarianceError
from pyestimate.core.protocols import RandomSource, ScalarOptimizer
from pyestimate.core.result import Result
from pyestimate.regression._common import BootstrapLinearParams
from pyestimate.regression.design import RegressionDesign


SingularPolicy = Literal['raise', 'warn']


class CPUPairsBootstrapBackend:
    """
    CPU backend for the pairs (case-resampling) bootstrap.

    Every optimizer call starts from the zero vector. All B index
    vectors are drawn from the random source on the calling thread, in
    replicate order, before any refit runs. Refits only read the
    original design and write their own row of a preallocated array,
    so dispatching them to a thread pool changes nothing but wall time.

    Args:
        optimizer: ScalarOptimizer used for the point estimate and refits
        random_source: Source of resample indices
        n_jobs: Worker threads for refits; 1 runs them inline, -1 uses
            min(cpu_count, 4)
        on_singular: 'raise' a SingularCovarianceError for a singular or
            non-finite covariance, or 'warn' and return it flagged
    """

    def __init__(
        self,
        optimizer: ScalarOptimizer,
        random_source: RandomSource,
        *,
        n_jobs: int = 1,
        on_singular: SingularPolicy = 'raise',
    ):
        self._optimizer = optimizer
        self._random = random_source
        self._n_jobs = n_jobs
        self._on_singular = on_singular

    @property
    def name(self) -> str:
        return 'cpu_pairs_bootstrap'

    def solve(
        self,
        design: RegressionDesign,
        *,
        B: int,
    ) -> Result[BootstrapLinearParams]:
        """Fit, resample B times, refit, and return Result[BootstrapLinearParams]."""
        timer = Timer()
        timer.start()

        n, p = design.n, design.p
        warnings_list: list[str] = []

        if n <= p:
            warnings_list.append(
                f"Design has n={n} observations for p={p} coefficients; "
                f"the fit is not identified"
            )

        with timer.section('point_estimate'):
            point = self._fit(design)
        if not point.converged:
            warnings_list.append(
                f"Optimizer did not converge on the original data: {point.message}"
            )

        with timer.section('resampling'):
            indices = np.empty((B, n), dtype=np.intp)
            for b in range(B):
                indices[b] = self._random.integers(n, n)

        replicates = np.empty((B, p), dtype=np.float64)
        replicate_converged = np.zeros(B, dtype=bool)
        failures: list[str | None] = [None] * B

        def refit(b: int) -> None:
            try:
                res = self._fit(design.take(indices[b]))
            except (np.linalg.LinAlgError, ArithmeticError) as e:
                replicates[b] = np.nan
                failures[b] = f"replicate {b}: {type(e).__name__}: {e}"
                return
            replicates[b] = res.x
            replicate_converged[b] = res.converged

        with timer.section('bootstrap_replicates'):
            workers = self._workers(B)
            if workers == 1:
                for b in range(B):
                    refit(b)
            else:
                with ThreadPoolExecutor(max_workers=workers) as executor:
                    # list() re-raises the first exception from any worker
                    list(executor.map(refit, range(B)))

        n_nonconverged = int(B - replicate_converged.sum())
        failed = [f for f in failures if f is not None]
        if failed:
            warnings_list.append(
                f"{len(failed)} of {B} bootstrap refits failed; first: {failed[0]}"
            )
        elif n_nonconverged:
            warnings_list.append(
                f"Optimizer did not converge on {n_nonconverged} of {B} bootstrap resamples"
            )

        with timer.section('covariance'):
            cov_beta = self._covariance(replicates)
            cov_rank, reason = self._check_covariance(replicates, cov_beta)

        singular = reason is not None
        if singular:
            if self._on_singular == 'raise':
                raise SingularCovarianceError(
                    f"Bootstrap covariance is singular: {reason}",
                    rank=cov_rank,
                    expected_rank=p,
                    n_replicates=B,
                    n_nonfinite=_count_nonfinite_rows(replicates),
                )
            warnings_list.append(f"Bootstrap covariance is singular: {reason}")

        timer.stop()

        params = BootstrapLinearParams(
            est_beta=point.x,
            cov_beta=cov_beta,
            replicates=replicates,
            B=B,
            converged=point.converged,
            replicate_converged=replicate_converged,
            cov_rank=cov_rank,
            singular=singular,
        )

        return Result(
            params=params,
            info={
                'n': n,
                'p': p,
                'B': B,
                'optimizer': repr(self._optimizer),
                'objective_value': point.fun,
                'n_nonconverged': n_nonconverged,
                'n_failed': len(failed),
                'n_jobs': self._workers(B),
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _fit(self, design: RegressionDesign) -> OptimizerResult:
        """Minimize the least-squares loss of one design from β = 0."""
        loss = design.loss()
        start = np.zeros(design.p, dtype=np.float64)
        raw = self._optimizer.minimize(loss, start)
        return normalize_result(raw, loss, design.p)

    def _workers(self, B: int) -> int:
        n_jobs = self._n_jobs
        if n_jobs is None or n_jobs == 1:
            return 1
        if n_jobs < 0:
            n_jobs = min(multiprocessing.cpu_count(), 4)
        return max(1, min(n_jobs, B))

    @staticmethod
    def _covariance(replicates: NDArray) -> NDArray:
        """Sample covariance (ddof=1) of replicate rows; NaN-filled if B < 2."""
        B, p = replicates.shape
        if B < 2:
            return np.full((p, p), np.nan, dtype=np.float64)
        return np.atleast_2d(np.cov(replicates, rowvar=False, ddof=1))

    @staticmethod
    def _check_covariance(
        replicates: NDArray,
        cov: NDArray,
    ) -> tuple[int | None, str | None]:
        """Return (rank, reason) where reason is None for a usable covariance."""
        B, p = replicates.shape
        n_bad = _count_nonfinite_rows(replicates)
        if n_bad:
            return None, f"{n_bad} of {B} replicates are not finite"
        if B < p + 1:
            rank = _scale_free_rank(cov) if B >= 2 else 0
            return rank, f"B={B} replicates cannot identify {p} coefficients (need B >= p + 1)"
        rank = _scale_free_rank(cov)
        if rank < p:
            return rank, f"rank {rank} < p={p}"
        return rank, None


def _count_nonfinite_rows(replicates: NDArray) -> int:
    return int(np.sum(~np.all(np.isfinite(replicates), axis=1)))


def _scale_free_rank(cov: NDArray) -> int:
    """
    Numerical rank of a covariance matrix, computed on its correlation
    matrix so the tolerance does not depend on the coefficients' units.

    Zero-variance coefficients count as rank-deficient directions.
    """
    sd = np.sqrt(np.clip(np.diag(cov), 0.0, None))
    keep = sd > 0
    if not keep.any():
        return 0
    corr = cov[np.ix_(keep, keep)] / np.outer(sd[keep], sd[keep])
    return int(np.linalg.matrix_rank(corr))
