"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection
    - check_finite: NaN/Inf detection
    - check_ndim / check_1d / check_2d: dimensionality checks
    - check_consistent_length: multi-array length matching
    - check_min_samples: minimum sample count
    - check_indices: resample index range checks
"""

import numpy as np
import pytest

from pyestimate.core.exceptions import DimensionError, ValidationError
from pyestimate.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_indices,
    check_min_samples,
    check_ndim,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "X")
        assert isinstance(result, np.ndarray)
        assert np.issubdtype(result.dtype, np.floating)
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted_to_float(self):
        arr = np.array([1, 2, 3], dtype=np.int32)
        result = check_array(arr, "X")
        assert np.issubdtype(result.dtype, np.floating)

    def test_nested_list_to_2d(self):
        result = check_array([[1, 2], [3, 4]], "X")
        assert result.shape == (2, 2)

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "X")

    def test_rejects_homogeneous_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array(["a", "b", "c"], "X")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a", "b"], "my_var")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:
    """check_finite rejects NaN and Inf values."""

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0, 3.0]), "X")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan, 3.0]), "X")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            check_finite(np.array([1.0, np.inf, 3.0]), "X")

    def test_mixed_nan_inf(self):
        with pytest.raises(ValidationError, match="2 NaN.*1 Inf"):
            check_finite(np.array([np.nan, np.inf, np.nan]), "X")


# ═══════════════════════════════════════════════════════════════════════
# check_ndim / check_1d / check_2d
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNdim:
    """check_ndim, check_1d, check_2d enforce dimensionality."""

    def test_wrong_ndim_raises(self):
        with pytest.raises(DimensionError, match="expected 1D.*got 2D"):
            check_ndim(np.array([[1.0, 2.0]]), 1, "X")

    def test_error_includes_shape(self):
        with pytest.raises(DimensionError, match=r"shape \(3, 2\)"):
            check_ndim(np.ones((3, 2)), 1, "X")

    def test_check_1d_passes(self):
        check_1d(np.array([1.0, 2.0, 3.0]), "y")

    def test_check_2d_rejects_1d(self):
        with pytest.raises(DimensionError):
            check_2d(np.array([1.0, 2.0, 3.0]), "X")


# ═══════════════════════════════════════════════════════════════════════
# check_consistent_length
# ═══════════════════════════════════════════════════════════════════════


class TestCheckConsistentLength:
    """check_consistent_length ensures first dimensions match."""

    def test_2d_and_1d_same_rows_pass(self):
        check_consistent_length(np.ones(10), np.ones((10, 3)), names=("y", "X"))

    def test_error_includes_names_and_lengths(self):
        with pytest.raises(DimensionError, match=r"y=3.*X=2"):
            check_consistent_length(np.ones(3), np.ones((2, 4)), names=("y", "X"))

    def test_wrong_number_of_names(self):
        with pytest.raises(ValueError, match="Number of arrays"):
            check_consistent_length(np.ones(5), np.ones(5), names=("X",))


# ═══════════════════════════════════════════════════════════════════════
# check_min_samples
# ═══════════════════════════════════════════════════════════════════════


class TestCheckMinSamples:

    def test_exact_minimum_passes(self):
        check_min_samples(np.ones(5), 5, "X")

    def test_empty_array_raises(self):
        with pytest.raises(ValidationError, match="at least 1.*got 0"):
            check_min_samples(np.array([]), 1, "sample")


# ═══════════════════════════════════════════════════════════════════════
# check_indices
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndices:
    """check_indices guards resample row positions."""

    def test_in_range_passes(self):
        check_indices(np.array([0, 4, 4, 2]), 5, "indices")

    def test_empty_passes(self):
        check_indices(np.array([], dtype=np.intp), 5, "indices")

    def test_upper_out_of_range(self):
        with pytest.raises(DimensionError, match=r"\[0, 5\).*\[0, 5\]"):
            check_indices(np.array([0, 5]), 5, "indices")

    def test_negative_rejected(self):
        with pytest.raises(DimensionError):
            check_indices(np.array([-1, 2]), 5, "indices")

    def test_float_indices_rejected(self):
        with pytest.raises(ValidationError, match="integer"):
            check_indices(np.array([0.0, 1.0]), 5, "indices")

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            check_indices(np.array([[0, 1]]), 5, "indices")
