"""Fixed-rate update loop, the game-engine "Update()" cycle.

The loop owns a FrameClock and a list of entities. Each step updates the
entities in insertion order and then advances the clock. It does not sleep
between frames; pacing is left to whatever drives step() (a matplotlib
animation timer, or a tight loop in headless runs).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from randgraph.core.clock import Frame, FrameClock
from randgraph.core.entity import Entity

logger = logging.getLogger(__name__)


class FrameLoop:
    """Calls update() on every registered entity once per frame.

    Args:
        entities: Entities to update, in order.
        frame_rate: Frames per second used to derive frame times.
    """

    def __init__(self, entities: Iterable[Entity] = (), frame_rate: float = 60.0):
        self._clock = FrameClock(frame_rate)
        self._entities: list[Entity] = []
        for entity in entities:
            self.add(entity)

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def entities(self) -> list[Entity]:
        return list(self._entities)

    def add(self, entity: Entity) -> None:
        entity.set_clock(self._clock)
        self._entities.append(entity)

    def step(self) -> Frame:
        """Run one frame and return it."""
        frame = self._clock.current()
        for entity in self._entities:
            entity.update(frame)
        self._clock.advance()
        return frame

    def run(self, frames: int) -> int:
        """Run ``frames`` frames back to back.

        Returns:
            The total number of frames completed so far.
        """
        if frames < 0:
            raise ValueError(f"frames must be non-negative, got {frames}")

        logger.info("Running %d frame(s) with %d entit(ies)", frames, len(self._entities))
        for _ in range(frames):
            self.step()
        return self._clock.frame
