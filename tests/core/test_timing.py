"""
Tests for Timer.
"""

import pytest

from pyestimate.core.compute.timing import Timer


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('refit'):
            pass
        with timer.section('refit'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'refit'}
        assert result['refit'] >= 0.0
        assert result['total_seconds'] >= 0.0

    def test_stop_before_start_raises(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop_raises(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_section_recorded_on_exception(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ValueError):
            with timer.section('failing'):
                raise ValueError("boom")
        timer.stop()
        assert 'failing' in timer.result()
