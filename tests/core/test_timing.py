"""
Tests for the section timer.
"""

import pytest

from pyinsight.core.compute import Timer


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section("decode"):
            pass
        with timer.section("decode"):
            pass
        with timer.section("post_passes"):
            pass
        timer.stop()

        result = timer.result()
        assert list(result) == ["total_seconds", "decode", "post_passes"]
        assert all(v >= 0.0 for v in result.values())

    def test_section_recorded_on_error(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ValueError):
            with timer.section("decode"):
                raise ValueError("boom")
        timer.stop()
        assert "decode" in timer.result()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()
