"""Screen size detection for the initial chart layout."""

from __future__ import annotations

import logging

from screeninfo import ScreenInfoError, get_monitors

from randgraph.chart.layout import Viewport

logger = logging.getLogger(__name__)

DEFAULT_SCREEN_SIZE = (1280, 720)


def detect_viewport(
    default: tuple[int, int] = DEFAULT_SCREEN_SIZE,
    ortho_size: float = 5.0,
) -> Viewport:
    """Viewport matching the primary monitor, or ``default`` when headless."""
    try:
        monitors = get_monitors()
    except ScreenInfoError as exc:
        logger.info("No monitor detected (%s), using %dx%d", exc, *default)
        return Viewport(default[0], default[1], ortho_size)

    if not monitors:
        return Viewport(default[0], default[1], ortho_size)

    primary = next((m for m in monitors if m.is_primary), monitors[0])
    logger.debug("Detected monitor %s at %dx%d", primary.name, primary.width, primary.height)
    return Viewport(primary.width, primary.height, ortho_size)
