"""Base class for objects updated once per frame.

Entities are the building blocks of the update loop. Each entity receives
every frame via update() and mutates its own state or forwards results to
its collaborators.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from randgraph.core.clock import Frame, FrameClock

logger = logging.getLogger(__name__)


class Entity(ABC):
    """Abstract base class for frame-driven actors.

    The frame loop injects its clock when the entity is added, so entities
    can read the current time without being handed it on every call.

    Subclasses must implement update().

    Attributes:
        name: Identifier for logging and debugging.
    """

    def __init__(self, name: str):
        self.name = name
        self._clock: FrameClock | None = None

    def set_clock(self, clock: FrameClock) -> None:
        """Inject the loop clock. Called automatically by FrameLoop."""
        self._clock = clock
        logger.debug("[%s] Clock injected", self.name)

    @property
    def now(self) -> float:
        """Elapsed loop time in seconds.

        Raises:
            RuntimeError: If accessed before clock injection.
        """
        if self._clock is None:
            logger.error("[%s] Attempted to access time before clock injection", self.name)
            raise RuntimeError(f"Entity {self.name} is not attached to a frame loop (Clock is None).")
        return self._clock.now

    @abstractmethod
    def update(self, frame: Frame) -> None:
        """Advance this entity by one frame."""
        raise NotImplementedError
