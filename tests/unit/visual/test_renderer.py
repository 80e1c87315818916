"""Tests for the matplotlib bar renderer."""

import pytest

from randgraph.chart import BarChart, ChartRenderer, Viewport


@pytest.fixture
def ax():
    pytest.importorskip("matplotlib")
    from matplotlib.figure import Figure

    return Figure().subplots()


@pytest.fixture
def renderer(ax):
    from randgraph.visual import MatplotlibBarRenderer

    return MatplotlibBarRenderer(ax)


class TestMatplotlibBarRenderer:
    def test_satisfies_protocol(self, renderer):
        assert isinstance(renderer, ChartRenderer)

    def test_rebuild_creates_one_patch_per_bar(self, renderer, ax):
        chart = BarChart(Viewport(800, 600), renderer=renderer)
        chart.set_weights([1, 2, 3, 4])

        assert len(renderer.patches) == 4
        assert len(ax.patches) == 4

    def test_rebuild_replaces_old_patches(self, renderer, ax):
        chart = BarChart(Viewport(800, 600), renderer=renderer)
        chart.set_weights([1, 2, 3, 4])
        chart.set_weights([1, 2])

        assert len(ax.patches) == 2

    def test_redraw_matches_chart_geometry(self, renderer):
        chart = BarChart(Viewport(800, 600), renderer=renderer)
        chart.set_weights([1, 3])

        for patch, bar in zip(renderer.patches, chart.bars):
            assert patch.get_height() == pytest.approx(bar.height)
            assert patch.get_width() == pytest.approx(bar.width)
            assert patch.get_x() == pytest.approx(bar.left)
            assert patch.get_y() == pytest.approx(bar.bottom)

    def test_axis_limits_cover_extents(self, renderer, ax):
        chart = BarChart(Viewport(800, 600), renderer=renderer)
        chart.set_weights([1])

        x0, x1 = ax.get_xlim()
        y0, y1 = ax.get_ylim()
        assert x0 < chart.extents.left and x1 > chart.extents.right
        assert y0 < chart.extents.bottom and y1 > chart.extents.top

    def test_resize_rebuilds_patches(self, renderer, ax):
        chart = BarChart(Viewport(800, 600), renderer=renderer)
        chart.set_weights([1, 2])
        chart.resize(Viewport(400, 600))

        assert len(ax.patches) == 2
        assert renderer.patches[0].get_width() == pytest.approx(chart.bars[0].width)
