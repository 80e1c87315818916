"""World-space geometry of the bar chart.

The chart is laid out like a 2D scene viewed by an orthographic camera
centred on the origin: the camera shows ``ortho_size`` world units either
side of the centre vertically, and the horizontal extent follows the
viewport's aspect ratio. Margins are fractions of those half-extents.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Viewport:
    """Screen size in pixels plus the camera's vertical half-extent."""

    width: int
    height: int
    ortho_size: float = 5.0

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Viewport must have positive size, got {self.width}x{self.height}")
        if self.ortho_size <= 0:
            raise ValueError(f"ortho_size must be positive, got {self.ortho_size}")

    @property
    def vertical_extent(self) -> float:
        return self.ortho_size

    @property
    def horizontal_extent(self) -> float:
        return self.ortho_size * self.width / self.height


@dataclass(frozen=True)
class Margins:
    """Chart margins as fractions of the camera half-extents."""

    bottom: float = 0.15
    horizontal: float = 0.05
    top: float = 0.1
    between: float = 0.0


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in world units."""

    left: float
    bottom: float
    width: float
    height: float

    @classmethod
    def from_min_max(cls, left: float, bottom: float, right: float, top: float) -> Rect:
        return cls(left=left, bottom=bottom, width=right - left, height=top - bottom)

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def top(self) -> float:
        return self.bottom + self.height

    @property
    def center(self) -> tuple[float, float]:
        return self.left + self.width / 2.0, self.bottom + self.height / 2.0


def compute_extents(viewport: Viewport, margins: Margins | None = None) -> Rect:
    """Region of world space the bars are drawn in."""
    margins = margins or Margins()
    v_extent = viewport.vertical_extent
    h_extent = viewport.horizontal_extent

    bottom = -v_extent * (1 - margins.bottom * 2)
    left = -h_extent * (1 - margins.horizontal * 2)
    right = h_extent * (1 - margins.horizontal * 2)
    top = v_extent * (1 - margins.top * 2)
    return Rect.from_min_max(left, bottom, right, top)


def layout_bars(
    extents: Rect,
    count: int,
    viewport: Viewport,
    margins: Margins | None = None,
) -> list[Rect]:
    """Zero-height slots for ``count`` bars spread across ``extents``.

    Bars share the width evenly, separated by ``margins.between`` (a
    fraction of the full horizontal camera extent).
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if count == 0:
        return []

    margins = margins or Margins()
    gap = margins.between * viewport.horizontal_extent * 2
    bar_width = (extents.width - (count - 1) * gap) / count

    return [
        Rect(left=extents.left + i * (bar_width + gap), bottom=extents.bottom, width=bar_width, height=0.0)
        for i in range(count)
    ]


def bar_rect(slot: Rect, weight: float, current_max: float, extents: Rect) -> Rect:
    """Bar for ``weight`` in ``slot``, as tall as its share of ``current_max``."""
    height = extents.height * (weight / current_max)
    return Rect(left=slot.left, bottom=extents.bottom, width=slot.width, height=height)
