"""Auto-scaling bar chart model."""

from randgraph.chart.bar_chart import BarChart, ChartRenderer
from randgraph.chart.layout import Margins, Rect, Viewport, bar_rect, compute_extents, layout_bars
from randgraph.chart.scaling import SCALE_HIGH, SCALE_LOW, next_scale

__all__ = [
    "SCALE_HIGH",
    "SCALE_LOW",
    "BarChart",
    "ChartRenderer",
    "Margins",
    "Rect",
    "Viewport",
    "bar_rect",
    "compute_extents",
    "layout_bars",
    "next_scale",
]
