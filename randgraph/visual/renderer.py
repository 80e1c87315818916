"""Matplotlib backend for BarChart."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from matplotlib.patches import Rectangle

if TYPE_CHECKING:
    from matplotlib.axes import Axes

    from randgraph.chart.layout import Rect

logger = logging.getLogger(__name__)

DEFAULT_BAR_COLOR = "#3b82f6"


class MatplotlibBarRenderer:
    """Draws chart bars as Rectangle patches on a matplotlib Axes.

    Args:
        ax: Axes to draw on. Axis decorations are hidden so the chart reads
            as a plain scene.
        color: Bar face color.
        padding: World units of empty space kept around the chart extents.
    """

    def __init__(self, ax: Axes, color: str = DEFAULT_BAR_COLOR, padding: float = 0.5):
        self.ax = ax
        self.color = color
        self.padding = padding
        self.patches: list[Rectangle] = []
        ax.set_axis_off()

    def rebuild(self, slots: list[Rect], extents: Rect) -> None:
        for patch in self.patches:
            patch.remove()
        self.patches = []

        for slot in slots:
            patch = Rectangle(
                (slot.left, slot.bottom),
                slot.width,
                slot.height,
                facecolor=self.color,
                edgecolor="white",
                linewidth=0.5,
            )
            self.ax.add_patch(patch)
            self.patches.append(patch)

        self.ax.set_xlim(extents.left - self.padding, extents.right + self.padding)
        self.ax.set_ylim(extents.bottom - self.padding, extents.top + self.padding)
        logger.debug("Rebuilt %d bar patch(es)", len(self.patches))

    def redraw(self, bars: list[Rect]) -> None:
        for patch, bar in zip(self.patches, bars, strict=True):
            patch.set_xy((bar.left, bar.bottom))
            patch.set_width(bar.width)
            patch.set_height(bar.height)
        self.ax.figure.canvas.draw_idle()
