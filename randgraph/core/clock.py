"""Fixed-step clock for the frame loop."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Frame:
    """A single tick of the update loop.

    Attributes:
        index: Zero-based frame number.
        time_s: Elapsed time at the start of this frame, in seconds.
        dt_s: Time step between frames, in seconds.
    """

    index: int
    time_s: float
    dt_s: float


class FrameClock:
    """Counts frames and converts them to elapsed time at a fixed rate."""

    def __init__(self, frame_rate: float = 60.0):
        if frame_rate <= 0:
            raise ValueError(f"frame_rate must be positive, got {frame_rate}")
        self._frame_rate = frame_rate
        self._frame = 0

    @property
    def frame_rate(self) -> float:
        return self._frame_rate

    @property
    def dt(self) -> float:
        return 1.0 / self._frame_rate

    @property
    def frame(self) -> int:
        return self._frame

    @property
    def now(self) -> float:
        """Elapsed time in seconds."""
        return self._frame * self.dt

    def current(self) -> Frame:
        return Frame(index=self._frame, time_s=self.now, dt_s=self.dt)

    def advance(self) -> Frame:
        """Move to the next frame and return it."""
        self._frame += 1
        return self.current()
