"""
Random sources.

Every stochastic routine in PyEstimate takes an explicit RandomSource
(or a seed from which one is built) instead of touching global numpy
state. One source is created per call and owned by that call.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyestimate.core.exceptions import ValidationError
from pyestimate.core.protocols import RandomSource


class NumpyRandomSource:
    """
    RandomSource backed by ``numpy.random.Generator``.

    Args:
        seed: Anything ``np.random.default_rng`` accepts (None, int,
            SeedSequence), or an existing Generator which is used as-is.
    """

    def __init__(self, seed: int | np.random.Generator | None = None):
        if isinstance(seed, np.random.Generator):
            self._rng = seed
        else:
            self._rng = np.random.default_rng(seed)

    @property
    def generator(self) -> np.random.Generator:
        return self._rng

    def uniform(self, low: float, high: float) -> float:
        return float(self._rng.uniform(low, high))

    def integers(self, n: int, size: int) -> NDArray[np.integer[Any]]:
        return self._rng.integers(0, n, size=size)

    def __repr__(self) -> str:
        return f"NumpyRandomSource({self._rng.bit_generator.__class__.__name__})"


def as_random_source(
    seed: int | np.random.Generator | RandomSource | None = None,
) -> RandomSource:
    """
    Coerce a seed-like argument into a RandomSource.

    Args:
        seed: None (fresh OS entropy), an int seed, a numpy Generator,
            or an object already satisfying the RandomSource protocol.

    Returns:
        A RandomSource instance.

    Raises:
        ValidationError: If seed is of an unsupported type
    """
    if seed is None or isinstance(seed, (int, np.integer, np.random.Generator)):
        if isinstance(seed, bool):
            raise ValidationError(f"seed: expected int, got bool {seed!r}")
        return NumpyRandomSource(seed)
    if isinstance(seed, RandomSource):
        return seed
    raise ValidationError(
        f"seed: expected None, int, numpy Generator or RandomSource, "
        f"got {type(seed).__name__}"
    )
