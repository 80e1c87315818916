"""Matplotlib presentation of the histogram."""

from randgraph.visual.live import build_scene, run_live, save_snapshot
from randgraph.visual.renderer import MatplotlibBarRenderer
from randgraph.visual.screen import detect_viewport

__all__ = [
    "MatplotlibBarRenderer",
    "build_scene",
    "detect_viewport",
    "run_live",
    "save_snapshot",
]
