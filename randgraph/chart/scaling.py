"""Auto-scaling of the chart's reference maximum.

The chart keeps a "current max" that bar heights are drawn relative to.
Rather than tracking the data maximum exactly (which would rescale every
frame), it halves or doubles the reference until the real maximum sits in
a band between 45% and 90% of it.
"""

import logging

logger = logging.getLogger(__name__)

SCALE_LOW = 0.45
SCALE_HIGH = 0.9


def next_scale(
    current_scale: float,
    actual_max: float,
    low: float = SCALE_LOW,
    high: float = SCALE_HIGH,
) -> float:
    """Return the reference maximum to draw ``actual_max`` against.

    Halves ``current_scale`` while ``actual_max`` is below ``low`` of it and
    doubles it while ``actual_max`` is above ``high`` of it. A value already
    inside the band keeps the current scale.

    Args:
        current_scale: Reference maximum from the previous redraw.
        actual_max: Largest weight currently shown.
        low: Lower edge of the band, as a fraction of the scale.
        high: Upper edge of the band, as a fraction of the scale.

    Returns:
        The new reference maximum.

    Raises:
        ValueError: If ``current_scale`` is not positive, or the band is not
            wide enough for halving/doubling to land inside it.
    """
    if current_scale <= 0:
        raise ValueError(f"current_scale must be positive, got {current_scale}")
    if not 0 < low < high or high < 2 * low:
        raise ValueError(f"Invalid scale band [{low}, {high}]")

    # Nothing to fit; halving would never reach the band.
    if actual_max <= 0:
        return current_scale

    scale = current_scale
    while actual_max < scale * low or actual_max > scale * high:
        if actual_max < scale * low:
            scale /= 2.0
        else:
            scale *= 2.0

    if scale != current_scale:
        logger.debug("Rescaled chart max %s -> %s for data max %s", current_scale, scale, actual_max)
    return scale
