"""Density shapes supported by the weighted sampler.

Each shape pairs a density function with the native interval it is sampled
on and the bounding box used for rejection sampling. The bounding box must
enclose the density's graph over the native interval; ``verify_bounding_box``
checks this for every shape when the module is imported.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

from randgraph.numerics.integration import integrate_simpson

logger = logging.getLogger(__name__)

# f(0) of the standard normal density, 1 / sqrt(2 * pi), rounded up so it
# stays an upper bound. Hard-coded so sampling never recomputes it.
GAUSSIAN_PEAK = 0.3989423

_VERIFY_GRID_POINTS = 10_001


def polynomial_density(x: float) -> float:
    """Order two polynomial, x^2."""
    return x * x


def gaussian_density(x: float) -> float:
    """Standard normal probability density."""
    return math.exp(-(x * x) / 2.0) / math.sqrt(2.0 * math.pi)


@dataclass(frozen=True)
class BoundingBox:
    """Rectangle [x_min, x_max) x [y_min, y_max) enclosing a density graph."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    @property
    def area(self) -> float:
        return (self.x_max - self.x_min) * (self.y_max - self.y_min)


class DensityShape(Enum):
    """Named target distributions for weighted sampling."""

    POLYNOMIAL = auto()  # x^2 over (-10, 10)
    GAUSSIAN = auto()    # standard normal over three standard deviations

    @classmethod
    def from_name(cls, name: str) -> DensityShape:
        """Look up a shape by case-insensitive name.

        Raises:
            ValueError: If no shape has that name.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(shape.name.lower() for shape in cls)
            raise ValueError(f"Unknown density shape {name!r}, expected one of: {choices}") from None

    @property
    def density(self) -> Callable[[float], float]:
        return _DENSITIES[self]

    @property
    def bounds(self) -> BoundingBox:
        return _BOUNDS[self]

    @property
    def x_min(self) -> float:
        return self.bounds.x_min

    @property
    def x_max(self) -> float:
        return self.bounds.x_max

    @property
    def area_under_curve(self) -> float:
        """Integral of the density over the native interval."""
        return integrate_simpson(self.density, self.x_min, self.x_max)

    @property
    def expected_iterations(self) -> float:
        """Mean number of rejection-loop iterations per accepted draw.

        Equal to box_area / area_under_curve.
        """
        return self.bounds.area / self.area_under_curve

    def verify_bounding_box(self, points: int = _VERIFY_GRID_POINTS) -> None:
        """Check that the bounding box encloses the density on a dense grid.

        A box that cuts off part of the curve biases every draw without
        raising anything at sampling time, so this is treated as a
        programming error.

        Raises:
            AssertionError: If the density leaves [y_min, y_max] anywhere on
                the sampled grid of the native interval.
        """
        box = self.bounds
        for i in range(points):
            # Division last so the final point lands exactly on x_max
            x = box.x_min + (box.x_max - box.x_min) * i / (points - 1)
            y = self.density(x)
            if not box.y_min <= y <= box.y_max:
                raise AssertionError(
                    f"{self.name} density f({x}) = {y} lies outside the bounding box "
                    f"y in [{box.y_min}, {box.y_max}]"
                )


_DENSITIES: dict[DensityShape, Callable[[float], float]] = {
    DensityShape.POLYNOMIAL: polynomial_density,
    DensityShape.GAUSSIAN: gaussian_density,
}

# x^2 is largest at the ends of a symmetric interval, so f(10) is the
# supremum on (-10, 10). Re-derive y_max for any new shape.
_BOUNDS: dict[DensityShape, BoundingBox] = {
    DensityShape.POLYNOMIAL: BoundingBox(x_min=-10.0, x_max=10.0, y_min=0.0, y_max=100.0),
    DensityShape.GAUSSIAN: BoundingBox(x_min=-3.0, x_max=3.0, y_min=0.0, y_max=GAUSSIAN_PEAK),
}

for _shape in DensityShape:
    _shape.verify_bounding_box()
    logger.debug("Verified bounding box for %s: %s", _shape.name, _shape.bounds)
