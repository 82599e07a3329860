"""
Shared fixtures for interval search tests.

Scripted random sources make the bracket updates fully predictable.
"""

import numpy as np
import pytest

from pyestimate.core.rng import NumpyRandomSource


class ScriptedSource:
    """Returns queued values from uniform() and records each (low, high)."""

    def __init__(self, values):
        self._values = list(values)
        self.calls = []

    def uniform(self, low, high):
        self.calls.append((low, high))
        return float(self._values.pop(0))

    def integers(self, n, size):
        return np.zeros(size, dtype=np.intp)


class MidpointSource:
    """Always draws the midpoint of the requested interval."""

    def __init__(self):
        self.calls = []

    def uniform(self, low, high):
        self.calls.append((low, high))
        return (low + high) / 2.0

    def integers(self, n, size):
        return np.arange(size, dtype=np.intp) % n


class RecordingSource(NumpyRandomSource):
    """Seeded numpy source that remembers every uniform draw."""

    def __init__(self, seed):
        super().__init__(seed)
        self.draws = []

    def uniform(self, low, high):
        value = super().uniform(low, high)
        self.draws.append(value)
        return value


@pytest.fixture
def five_points():
    return np.array([1.0, 2.0, 3.0, 4.0, 5.0])


@pytest.fixture
def scripted():
    return ScriptedSource


@pytest.fixture
def midpoint():
    return MidpointSource()


@pytest.fixture
def recording():
    return RecordingSource
