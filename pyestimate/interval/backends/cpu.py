"""
CPU backend for random interval search.

CPUIntervalBackend: stochastic, derivative-free bracket narrowing.
"""

from __future__ import annotations

from pyestimate.core.protocols import RandomSource
from pyestimate.core.result import Result
from pyestimate.core.compute.timing import Timer
from pyestimate.interval._common import IntervalParams
from pyestimate.interval.design import IntervalDesign


class CPUIntervalBackend:
    """
    CPU backend for random interval search.

    Keeps a bracket (x1, x2, x3) whose middle point x2 is the best point
    seen. Each iteration draws a candidate uniformly from the wider of
    the two sub-intervals [x1, x2] and [x2, x3] (the right one when they
    are equal). A worse candidate pulls in that side's outer endpoint; a
    candidate at least as good becomes the new x2, with the old x2
    replacing the endpoint on the opposite side.

    The loop stops when an iteration improves f(x2) by no more than tol,
    or after maxit iterations. A rejected candidate leaves f(x2)
    unchanged, so it always ends the search.
    """

    def __init__(self, random_source: RandomSource):
        self._random = random_source

    @property
    def name(self) -> str:
        return 'cpu_interval'

    def solve(self, design: IntervalDesign) -> Result[IntervalParams]:
        """Run interval search and return Result[IntervalParams]."""
        timer = Timer()
        timer.start()

        f = design.objective
        tol = design.tol
        maxit = design.maxit
        warnings_list: list[str] = []

        x1 = design.lower
        x3 = design.upper

        with timer.section('initialization'):
            f1 = float(f(x1))
            f3 = float(f(x3))

        if design.is_degenerate:
            timer.stop()
            warnings_list.append(
                f"Degenerate bracket: lower == upper == {x1}; "
                f"returned the sole point without searching"
            )
            params = IntervalParams(
                x=x1,
                fun=f1,
                bracket=(x1, x1, x3),
                f_bounds_initial=(f1, f3),
                n_iter=0,
                converged=True,
                degenerate=True,
                final_change=None,
            )
            return Result(
                params=params,
                info=self._info(design),
                timing=timer.result(),
                backend_name=self.name,
                warnings=tuple(warnings_list),
            )

        with timer.section('initialization'):
            x2 = self._random.uniform(x1, x3)
            f2 = float(f(x2))

        diff = tol + 1.0
        final_change = None
        n_iter = 0

        with timer.section('search'):
            while diff > tol and n_iter < maxit:
                a = x2 - x1
                b = x3 - x2

                if a > b:
                    x4 = self._random.uniform(x1, x2)
                    f4 = float(f(x4))
                    if f4 > f2:
                        x1 = x4
                    else:
                        x3 = x2
                        x2 = x4
                else:
                    x4 = self._random.uniform(x2, x3)
                    f4 = float(f(x4))
                    if f4 > f2:
                        x3 = x4
                    else:
                        x1 = x2
                        x2 = x4

                f2_old = f2
                f2 = float(f(x2))
                diff = f2_old - f2
                final_change = diff
                n_iter += 1

        converged = not diff > tol
        if not converged:
            last = 'none' if final_change is None else f"{final_change:.3g}"
            warnings_list.append(
                f"Iteration limit reached: maxit={maxit}, last improvement "
                f"{last}, tol={tol:.3g}"
            )

        timer.stop()

        params = IntervalParams(
            x=x2,
            fun=f2,
            bracket=(x1, x2, x3),
            f_bounds_initial=(f1, f3),
            n_iter=n_iter,
            converged=converged,
            degenerate=False,
            final_change=final_change,
        )

        return Result(
            params=params,
            info=self._info(design),
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    @staticmethod
    def _info(design: IntervalDesign) -> dict:
        return {
            'lower': design.lower,
            'upper': design.upper,
            'tol': design.tol,
            'maxit': design.maxit,
            'n': None if design.sample is None else int(design.sample.shape[0]),
        }
