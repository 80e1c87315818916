"""Frame loop primitives."""

from randgraph.core.clock import Frame, FrameClock
from randgraph.core.entity import Entity
from randgraph.core.frame_loop import FrameLoop

__all__ = [
    "Entity",
    "Frame",
    "FrameClock",
    "FrameLoop",
]
