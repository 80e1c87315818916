"""Weighted random number generation."""

from randgraph.distributions.density_shape import (
    GAUSSIAN_PEAK,
    BoundingBox,
    DensityShape,
    gaussian_density,
    polynomial_density,
)
from randgraph.distributions.weighted_sampler import (
    UniformSource,
    WeightedSampler,
    default_sampler,
    gaussian,
    polynomial,
    sample_region,
    seed,
)

__all__ = [
    "GAUSSIAN_PEAK",
    "BoundingBox",
    "DensityShape",
    "UniformSource",
    "WeightedSampler",
    "default_sampler",
    "gaussian",
    "gaussian_density",
    "polynomial",
    "polynomial_density",
    "sample_region",
    "seed",
]
