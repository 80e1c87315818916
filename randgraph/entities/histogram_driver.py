"""Per-frame driver that feeds weighted samples into a bar chart.

Every frame the driver draws from the selected density shape over
[0, bucket_count), floors each draw into a bucket index, bumps that
bucket's count and hands the full count vector to the chart. Changing the
shape or the bucket count goes through reconfigure(), which zeroes the
counts so the histogram only ever shows one distribution.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Protocol

import pandas as pd

from randgraph.core.entity import Entity
from randgraph.distributions.density_shape import DensityShape
from randgraph.distributions.weighted_sampler import WeightedSampler
from randgraph.numerics.integration import integrate_simpson

if TYPE_CHECKING:
    from collections.abc import Sequence

    from randgraph.core.clock import Frame

logger = logging.getLogger(__name__)

MIN_BUCKETS = 2
MAX_BUCKETS = 100


class WeightSink(Protocol):
    """Anything that accepts a full vector of bucket weights."""

    def set_weights(self, weights: Sequence[float]) -> None: ...


def validate_bucket_count(bucket_count: int) -> None:
    """Raise ValueError unless bucket_count is an integer in [2, 100]."""
    if isinstance(bucket_count, bool) or not isinstance(bucket_count, int):
        raise ValueError(f"bucket_count must be an integer, got {bucket_count!r}")
    if not MIN_BUCKETS <= bucket_count <= MAX_BUCKETS:
        raise ValueError(f"bucket_count must be between {MIN_BUCKETS} and {MAX_BUCKETS}, got {bucket_count}")


class HistogramDriver(Entity):
    """Samples a density shape into histogram buckets once per frame.

    Args:
        name: Entity name.
        chart: Receives the count vector after every frame.
        shape: Density shape to sample.
        bucket_count: Number of buckets, between 2 and 100.
        samples_per_frame: Draws taken per frame.
        sampler: Sampler to draw from. Defaults to a new unseeded one.

    Attributes:
        total_samples: Draws recorded since the last reset.
    """

    def __init__(
        self,
        name: str = "histogram",
        chart: WeightSink | None = None,
        shape: DensityShape = DensityShape.POLYNOMIAL,
        bucket_count: int = 20,
        samples_per_frame: int = 1,
        sampler: WeightedSampler | None = None,
    ):
        super().__init__(name)
        validate_bucket_count(bucket_count)
        if samples_per_frame < 1:
            raise ValueError(f"samples_per_frame must be at least 1, got {samples_per_frame}")

        self.chart = chart
        self._shape = shape
        self._bucket_count = bucket_count
        self._samples_per_frame = samples_per_frame
        self._sampler = sampler or WeightedSampler()
        self._counts: list[float] = []
        self.total_samples = 0
        self.reset()

    @property
    def shape(self) -> DensityShape:
        return self._shape

    @property
    def sampler(self) -> WeightedSampler:
        return self._sampler

    @property
    def bucket_count(self) -> int:
        return self._bucket_count

    @property
    def counts(self) -> list[float]:
        return list(self._counts)

    def reset(self) -> None:
        """Zero every bucket."""
        self._counts = [0.0] * self._bucket_count
        self.total_samples = 0

    def reconfigure(self, shape: DensityShape | None = None, bucket_count: int | None = None) -> bool:
        """Switch shape and/or bucket count, resetting counts if either changes.

        Returns:
            True if the configuration changed and the counts were reset.
        """
        new_shape = self._shape if shape is None else shape
        new_count = self._bucket_count if bucket_count is None else bucket_count
        validate_bucket_count(new_count)

        if new_shape == self._shape and new_count == self._bucket_count:
            return False

        logger.info(
            "[%s] Reconfigured %s/%d -> %s/%d, resetting counts",
            self.name,
            self._shape.name,
            self._bucket_count,
            new_shape.name,
            new_count,
        )
        self._shape = new_shape
        self._bucket_count = new_count
        self.reset()
        return True

    def bucket_for(self, value: float) -> int:
        """Bucket index for a sample drawn over [0, bucket_count)."""
        # Rescaling can round a value just below bucket_count up to it
        return min(math.floor(value), self._bucket_count - 1)

    def record(self, value: float) -> int:
        """Count one sample and return the bucket it landed in."""
        index = self.bucket_for(value)
        self._counts[index] += 1
        self.total_samples += 1
        return index

    def update(self, frame: Frame) -> None:
        for _ in range(self._samples_per_frame):
            value = self._sampler.sample(self._shape, 0, self._bucket_count)
            self.record(value)

        if self.chart is not None:
            self.chart.set_weights(list(self._counts))

    def expected_fractions(self) -> list[float]:
        """Probability mass the current shape assigns to each bucket."""
        shape = self._shape
        width = (shape.x_max - shape.x_min) / self._bucket_count
        total = shape.area_under_curve
        return [
            integrate_simpson(shape.density, shape.x_min + i * width, shape.x_min + (i + 1) * width, intervals=200)
            / total
            for i in range(self._bucket_count)
        ]

    def to_dataframe(self) -> pd.DataFrame:
        """Bucket counts alongside the fractions the shape predicts."""
        total = self.total_samples
        return pd.DataFrame(
            {
                "bucket": range(self._bucket_count),
                "count": self._counts,
                "fraction": [c / total if total else 0.0 for c in self._counts],
                "expected_fraction": self.expected_fractions(),
            }
        )
