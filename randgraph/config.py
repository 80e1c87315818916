"""Run configuration for the live histogram.

Values default to the demo scene (x^2 shape, 20 buckets, one
sample per frame at 60 fps) and can be overridden from the environment:

    RG_SHAPE: Density shape name (polynomial, gaussian)
    RG_BUCKETS: Number of histogram buckets (2-100)
    RG_SAMPLES_PER_FRAME: Draws per frame
    RG_FPS: Frame rate of the update loop
    RG_SEED: Integer seed for reproducible runs
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from randgraph.distributions.density_shape import DensityShape
from randgraph.entities.histogram_driver import validate_bucket_count


@dataclass
class GraphConfig:
    shape: DensityShape = DensityShape.POLYNOMIAL
    bucket_count: int = 20
    samples_per_frame: int = 1
    frame_rate: float = 60.0
    seed: int | None = None

    def __post_init__(self):
        if isinstance(self.shape, str):
            self.shape = DensityShape.from_name(self.shape)
        validate_bucket_count(self.bucket_count)
        if self.samples_per_frame < 1:
            raise ValueError(f"samples_per_frame must be at least 1, got {self.samples_per_frame}")
        if self.frame_rate <= 0:
            raise ValueError(f"frame_rate must be positive, got {self.frame_rate}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GraphConfig:
        """Build a config from RG_* variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()

        seed = env.get("RG_SEED", "")
        return cls(
            shape=DensityShape.from_name(env["RG_SHAPE"]) if env.get("RG_SHAPE") else defaults.shape,
            bucket_count=int(env.get("RG_BUCKETS") or defaults.bucket_count),
            samples_per_frame=int(env.get("RG_SAMPLES_PER_FRAME") or defaults.samples_per_frame),
            frame_rate=float(env.get("RG_FPS") or defaults.frame_rate),
            seed=int(seed) if seed else None,
        )
