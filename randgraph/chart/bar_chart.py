"""Histogram model: weights in, bar rectangles out.

BarChart holds no drawing code. It keeps the weights, the auto-scaled
reference maximum and the bar geometry, and tells a ChartRenderer when the
bar set must be rebuilt (bar count or viewport changed) or just redrawn.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from randgraph.chart.layout import Margins, Rect, Viewport, bar_rect, compute_extents, layout_bars
from randgraph.chart.scaling import next_scale

logger = logging.getLogger(__name__)


@runtime_checkable
class ChartRenderer(Protocol):
    """Presentation side of a BarChart."""

    def rebuild(self, slots: list[Rect], extents: Rect) -> None:
        """Discard existing bars and create one per slot."""
        ...

    def redraw(self, bars: list[Rect]) -> None:
        """Resize existing bars; ``bars`` matches the last rebuild's slots."""
        ...


class BarChart:
    """A series of non-negative weights drawn as a bar histogram.

    Args:
        viewport: Screen size the chart is laid out for.
        renderer: Optional presentation backend.
        margins: Layout margins; defaults to ``Margins()``.
        initial_max: Starting reference maximum for bar heights.
    """

    def __init__(
        self,
        viewport: Viewport,
        renderer: ChartRenderer | None = None,
        margins: Margins | None = None,
        initial_max: float = 1.0,
    ):
        if initial_max <= 0:
            raise ValueError(f"initial_max must be positive, got {initial_max}")

        self._viewport = viewport
        self._renderer = renderer
        self._margins = margins or Margins()
        self._weights: list[float] = []
        self._current_max = initial_max
        self._extents = compute_extents(viewport, self._margins)
        self._slots: list[Rect] = []
        self._bars: list[Rect] = []
        self.rebuild_count = 0

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def weights(self) -> list[float]:
        return list(self._weights)

    @property
    def current_max(self) -> float:
        return self._current_max

    @property
    def extents(self) -> Rect:
        return self._extents

    @property
    def bars(self) -> list[Rect]:
        return list(self._bars)

    def set_renderer(self, renderer: ChartRenderer | None) -> None:
        """Attach a renderer and bring it up to date."""
        self._renderer = renderer
        self._setup()
        self._redraw()

    def set_weights(self, weights: Sequence[float]) -> None:
        """Set the weights of the graph and redraw it.

        Raises:
            ValueError: If any weight is negative.
        """
        weights = [float(w) for w in weights]
        if any(w < 0 for w in weights):
            raise ValueError("Chart weights must be non-negative")

        previous_count = len(self._weights)
        self._weights = weights
        self._current_max = next_scale(self._current_max, max(weights, default=0.0))

        if len(weights) != previous_count:
            logger.info("Resizing graph as the number of weights has changed (%d -> %d)", previous_count, len(weights))
            self._setup()

        self._redraw()

    def resize(self, viewport: Viewport) -> bool:
        """Lay the chart out for a new viewport.

        Returns:
            True if the viewport changed and the bars were rebuilt.
        """
        if viewport == self._viewport:
            return False

        logger.info(
            "Resizing graph as screen size has changed (%dx%d -> %dx%d)",
            self._viewport.width,
            self._viewport.height,
            viewport.width,
            viewport.height,
        )
        self._viewport = viewport
        self._extents = compute_extents(viewport, self._margins)
        self._setup()
        self._redraw()
        return True

    def _setup(self) -> None:
        """Create one slot per weight for the current extents."""
        logger.debug("Setting up %d bars", len(self._weights))
        self._slots = layout_bars(self._extents, len(self._weights), self._viewport, self._margins)
        self._bars = list(self._slots)
        self.rebuild_count += 1
        if self._renderer is not None:
            self._renderer.rebuild(list(self._slots), self._extents)

    def _redraw(self) -> None:
        """Resize every bar from the current weights."""
        self._bars = [
            bar_rect(slot, weight, self._current_max, self._extents)
            for slot, weight in zip(self._slots, self._weights, strict=True)
        ]
        if self._renderer is not None and self._bars:
            self._renderer.redraw(list(self._bars))
