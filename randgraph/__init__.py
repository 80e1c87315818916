"""randgraph: weighted random numbers and a live histogram that shows them.

The core is rejection sampling against a density's bounding box:

    from randgraph import WeightedSampler

    sampler = WeightedSampler(seed=7)
    sampler.polynomial(0, 100)   # x^2 weighted, piles up at both ends
    sampler.gaussian(10, 20)     # normal weighted, peaked at 15

Logging is silent by default; see randgraph.logging_config.
"""

import logging

from randgraph.chart import BarChart, ChartRenderer, Margins, Rect, Viewport, next_scale
from randgraph.config import GraphConfig
from randgraph.core import Entity, Frame, FrameClock, FrameLoop
from randgraph.distributions import (
    DensityShape,
    UniformSource,
    WeightedSampler,
    gaussian,
    polynomial,
    sample_region,
)
from randgraph.entities import HistogramDriver
from randgraph.errors import InvalidArgumentError
from randgraph.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
    set_module_level,
)
from randgraph.numerics import inverse_lerp, lerp, rescale

logging.getLogger("randgraph").addHandler(logging.NullHandler())

__all__ = [
    # Sampling
    "DensityShape",
    "InvalidArgumentError",
    "UniformSource",
    "WeightedSampler",
    "gaussian",
    "polynomial",
    "sample_region",
    # Numerics
    "inverse_lerp",
    "lerp",
    "rescale",
    # Frame loop
    "Entity",
    "Frame",
    "FrameClock",
    "FrameLoop",
    "HistogramDriver",
    # Chart
    "BarChart",
    "ChartRenderer",
    "Margins",
    "Rect",
    "Viewport",
    "next_scale",
    # Configuration
    "GraphConfig",
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
]
