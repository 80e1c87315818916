"""Tests for the chart's auto-scaling control loop."""

import pytest

from randgraph.chart import SCALE_HIGH, SCALE_LOW, next_scale


class TestNextScale:
    def test_inside_band_is_unchanged(self):
        assert next_scale(1.0, 0.5) == 1.0
        assert next_scale(1.0, 0.45) == 1.0
        assert next_scale(1.0, 0.9) == 1.0

    def test_doubles_until_max_fits(self):
        """5 is above 90% of 1, 2 and 4; 8 puts it at 62.5%."""
        assert next_scale(1.0, 5.0) == 8.0

    def test_halves_until_max_fits(self):
        assert next_scale(1.0, 0.1) == 0.125

    def test_zero_max_keeps_scale(self):
        assert next_scale(4.0, 0.0) == 4.0

    def test_negative_max_keeps_scale(self):
        assert next_scale(4.0, -1.0) == 4.0

    @pytest.mark.parametrize("scale", [0.0, -1.0])
    def test_rejects_non_positive_scale(self, scale):
        with pytest.raises(ValueError, match="current_scale must be positive"):
            next_scale(scale, 1.0)

    def test_rejects_band_too_narrow_to_reach(self):
        with pytest.raises(ValueError, match="Invalid scale band"):
            next_scale(1.0, 1.0, low=0.6, high=0.9)

    @pytest.mark.parametrize("actual", [1e-6, 0.3, 1.0, 7.0, 123.0, 4096.5, 1e9])
    @pytest.mark.parametrize("start", [0.25, 1.0, 1000.0])
    def test_result_lands_in_band(self, start, actual):
        scale = next_scale(start, actual)
        assert scale * SCALE_LOW <= actual <= scale * SCALE_HIGH

    def test_hysteresis_ignores_small_changes(self):
        """Growth inside the band never rescales."""
        scale = next_scale(1.0, 50.0)
        for actual in range(50, 58):
            assert next_scale(scale, float(actual)) == scale
