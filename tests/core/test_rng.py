"""
Tests for random sources.
"""

import numpy as np
import pytest

from pyestimate.core.exceptions import ValidationError
from pyestimate.core.protocols import RandomSource
from pyestimate.core.rng import NumpyRandomSource, as_random_source


class TestNumpyRandomSource:

    def test_satisfies_protocol(self):
        assert isinstance(NumpyRandomSource(0), RandomSource)

    def test_uniform_within_bounds(self):
        rs = NumpyRandomSource(1)
        draws = [rs.uniform(2.0, 3.0) for _ in range(200)]
        assert all(2.0 <= d <= 3.0 for d in draws)
        assert all(isinstance(d, float) for d in draws)

    def test_integers_range_and_size(self):
        rs = NumpyRandomSource(1)
        idx = rs.integers(7, 500)
        assert idx.shape == (500,)
        assert idx.min() >= 0
        assert idx.max() <= 6

    def test_integers_with_replacement(self):
        """n draws from n values almost surely repeat something."""
        idx = NumpyRandomSource(3).integers(50, 50)
        assert len(np.unique(idx)) < 50

    def test_same_seed_same_stream(self):
        a, b = NumpyRandomSource(42), NumpyRandomSource(42)
        np.testing.assert_array_equal(a.integers(10, 20), b.integers(10, 20))
        assert a.uniform(0, 1) == b.uniform(0, 1)

    def test_wraps_existing_generator(self):
        gen = np.random.default_rng(5)
        rs = NumpyRandomSource(gen)
        assert rs.generator is gen


class TestAsRandomSource:

    def test_none_gives_fresh_source(self):
        assert isinstance(as_random_source(None), NumpyRandomSource)

    def test_int_seed(self):
        a = as_random_source(7)
        b = as_random_source(7)
        assert a.uniform(0, 1) == b.uniform(0, 1)

    def test_generator(self):
        gen = np.random.default_rng(0)
        assert as_random_source(gen).generator is gen

    def test_custom_source_passthrough(self):
        class Fixed:
            def uniform(self, low, high):
                return low

            def integers(self, n, size):
                return np.zeros(size, dtype=np.intp)

        src = Fixed()
        assert as_random_source(src) is src

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="bool"):
            as_random_source(True)

    def test_unsupported_type_rejected(self):
        with pytest.raises(ValidationError, match="str"):
            as_random_source("42")
