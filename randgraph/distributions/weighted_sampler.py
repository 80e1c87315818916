"""Weighted random numbers via rejection sampling.

A value is drawn from a density shape's native interval by picking uniform
points in the shape's bounding box until one lands under the curve. The
accepted x is then rescaled into the interval the caller asked for.

This is a simple and fairly expensive way to sample any bounded density:
it needs no inverse CDF, only the density and a box around it. The number
of loop iterations per draw averages out to box_area / area_under_curve
(about 3 for the polynomial and 2.4 for the Gaussian).

Example:
    sampler = WeightedSampler(seed=42)
    value = sampler.gaussian(0, 20)       # 0 <= value < 20, peaked at 10

    # Module-level helpers use a per-thread default sampler
    from randgraph.distributions import polynomial
    polynomial(0, 1)
"""

from __future__ import annotations

import logging
import random
import threading
from collections.abc import Callable
from typing import Protocol, runtime_checkable

from randgraph.distributions.density_shape import DensityShape
from randgraph.errors import InvalidArgumentError
from randgraph.numerics.interpolation import rescale

logger = logging.getLogger(__name__)


@runtime_checkable
class UniformSource(Protocol):
    """Source of continuous uniform draws.

    ``random.Random`` satisfies this protocol.
    """

    def uniform(self, a: float, b: float) -> float:
        """Return a uniform value between ``a`` (inclusive) and ``b``."""
        ...


def sample_region(
    fn: Callable[[float], float],
    x_min: float,
    x_max: float,
    y_min: float,
    y_max: float,
    rng: UniformSource,
) -> tuple[float, int]:
    """Draw x in [x_min, x_max) weighted by ``fn`` using rejection sampling.

    Points are chosen uniformly inside the region until one falls on or
    under the curve. The region must enclose the graph of ``fn`` or the
    result is biased; nothing here checks that.

    Args:
        fn: Weight function.
        x_min: Minimum x of the region.
        x_max: Maximum x of the region (never returned).
        y_min: Minimum y of the region.
        y_max: Maximum y of the region.
        rng: Uniform random source.

    Returns:
        Tuple of (accepted x, number of loop iterations taken).
    """
    attempts = 0
    while True:
        attempts += 1
        x = rng.uniform(x_min, x_max)

        # uniform() may round up to x_max; the upper bound is exclusive
        if x == x_max:
            continue

        y = rng.uniform(y_min, y_max)
        if y <= fn(x):
            return x, attempts


def _validate_interval(name: str, min: float, max: float) -> None:
    if max < min:
        raise InvalidArgumentError(f"{name} region max cannot be smaller than min (min={min}, max={max})")
    if max == min:
        raise InvalidArgumentError(f"{name} region min and max cannot be equal (min={min}, max={max})")


class WeightedSampler:
    """Produces random numbers in [min, max) weighted by a density shape.

    Args:
        seed: Seed for the private ``random.Random``. Ignored when ``rng``
            is given.
        rng: Uniform source to draw from. Defaults to a new
            ``random.Random(seed)``.

    Instances are not thread-safe; give each thread its own sampler.
    """

    def __init__(self, seed: int | None = None, rng: UniformSource | None = None):
        self._rng: UniformSource = rng if rng is not None else random.Random(seed)
        self.last_attempts = 0

    @property
    def rng(self) -> UniformSource:
        return self._rng

    def sample_native(self, shape: DensityShape) -> float:
        """Draw from the shape's native interval, before any rescaling."""
        box = shape.bounds
        x, attempts = sample_region(shape.density, box.x_min, box.x_max, box.y_min, box.y_max, self._rng)
        self.last_attempts = attempts
        return x

    def sample(self, shape: DensityShape, min: float = 0.0, max: float = 1.0) -> float:
        """Draw a value in [min, max) distributed according to ``shape``.

        Raises:
            InvalidArgumentError: If ``max < min`` or ``max == min``.
        """
        _validate_interval(shape.name.capitalize(), min, max)

        native = self.sample_native(shape)
        result = rescale(native, shape.x_min, shape.x_max, min, max)
        logger.debug(
            "%s sample: native=%.6f result=%.6f in [%s, %s) after %d attempt(s)",
            shape.name,
            native,
            result,
            min,
            max,
            self.last_attempts,
        )
        return result

    def polynomial(self, min: float = 0.0, max: float = 1.0) -> float:
        """Random number in [min, max) weighted by an x^2 curve.

        The curve is sampled over (-10, 10) and rescaled, so values pile up
        at both ends of the requested interval.
        """
        return self.sample(DensityShape.POLYNOMIAL, min, max)

    def gaussian(self, min: float = 0.0, max: float = 1.0) -> float:
        """Random number in [min, max) weighted by a normal distribution.

        The interval spans three standard deviations either side of its
        midpoint.
        """
        return self.sample(DensityShape.GAUSSIAN, min, max)


_thread_state = threading.local()


def default_sampler() -> WeightedSampler:
    """Return the calling thread's default sampler, creating it on first use."""
    sampler = getattr(_thread_state, "sampler", None)
    if sampler is None:
        sampler = WeightedSampler()
        _thread_state.sampler = sampler
    return sampler


def seed(value: int | None) -> None:
    """Replace the calling thread's default sampler with a seeded one."""
    _thread_state.sampler = WeightedSampler(seed=value)


def polynomial(min: float = 0.0, max: float = 1.0) -> float:
    """``WeightedSampler.polynomial`` on the thread's default sampler."""
    return default_sampler().polynomial(min, max)


def gaussian(min: float = 0.0, max: float = 1.0) -> float:
    """``WeightedSampler.gaussian`` on the thread's default sampler."""
    return default_sampler().gaussian(min, max)
