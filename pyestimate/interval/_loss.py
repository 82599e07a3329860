"""
Squared-deviation (L2) loss of a location parameter.

f(mu) = sum_i (x_i - mu)^2, minimized by the sample mean. This is the
default objective of minimize_interval.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray


def l2_loss(sample: ArrayLike, mu: float) -> float:
    """Sum of squared deviations of ``sample`` from ``mu``."""
    obs = np.asarray(sample, dtype=np.float64)
    return float(np.sum((obs - mu) ** 2))


@dataclass(frozen=True)
class LossEvaluation:
    """
    One evaluation of the L2 loss, with its inputs.

    Attributes:
        sample: The observations the loss was computed over
        value: The candidate location mu
        loss: sum((sample - value)^2)
    """
    sample: NDArray[np.floating[Any]]
    value: float
    loss: float


def evaluate_loss(sample: ArrayLike, mu: float) -> LossEvaluation:
    """
    Evaluate the L2 loss and return it together with its inputs.

    Examples:
        >>> ev = evaluate_loss([1.0, 2.0, 3.0], 2.0)
        >>> ev.loss
        2.0
    """
    obs = np.asarray(sample, dtype=np.float64)
    return LossEvaluation(sample=obs, value=float(mu), loss=l2_loss(obs, mu))


class SquaredDeviationLoss:
    """
    Callable L2 loss bound to a fixed sample.

    ``SquaredDeviationLoss(sample)(mu) == l2_loss(sample, mu)``.
    """

    def __init__(self, sample: NDArray[np.floating[Any]]):
        self.sample = sample

    def __call__(self, mu: float) -> float:
        return float(np.sum((self.sample - mu) ** 2))

    def __repr__(self) -> str:
        return f"SquaredDeviationLoss(n={self.sample.shape[0]})"
