"""Polynomial vs Gaussian weighting, side by side.

Runs two histogram drivers through the same frame loop, one per density
shape, and compares the observed bucket fractions with the probability mass
each shape assigns to the buckets. Also reports how many rejection-loop
attempts each draw took on average against box_area / area_under_curve.

## Architecture Diagram

```
              FrameLoop (fixed rate)
                 |            |
                 v            v
   HistogramDriver        HistogramDriver
    (POLYNOMIAL)           (GAUSSIAN)
         |                      |
         v                      v
     BarChart               BarChart
```

## What to look for

- x^2 over (-10, 10) rescaled to the buckets piles up at both ends (a U).
- The Gaussian spans three standard deviations, so almost nothing lands in
  the outermost buckets.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from randgraph import (
    BarChart,
    DensityShape,
    FrameLoop,
    HistogramDriver,
    Viewport,
    WeightedSampler,
    enable_console_logging,
)

# =============================================================================
# Simulation
# =============================================================================


@dataclass
class ShapeResult:
    shape: DensityShape
    buckets: pd.DataFrame
    mean_attempts: float


class AttemptCountingSampler(WeightedSampler):
    """WeightedSampler that totals rejection-loop attempts."""

    def __init__(self, seed: int | None = None):
        super().__init__(seed=seed)
        self.draws = 0
        self.attempts = 0

    def sample_native(self, shape: DensityShape) -> float:
        value = super().sample_native(shape)
        self.draws += 1
        self.attempts += self.last_attempts
        return value


def run_comparison(frames: int, bucket_count: int, samples_per_frame: int, seed: int | None) -> list[ShapeResult]:
    viewport = Viewport(1280, 720)
    drivers = []
    for offset, shape in enumerate(DensityShape):
        sampler = AttemptCountingSampler(seed=None if seed is None else seed + offset)
        drivers.append(
            HistogramDriver(
                name=shape.name.lower(),
                chart=BarChart(viewport),
                shape=shape,
                bucket_count=bucket_count,
                samples_per_frame=samples_per_frame,
                sampler=sampler,
            )
        )

    FrameLoop(drivers).run(frames)

    results = []
    for driver in drivers:
        sampler = driver.sampler
        results.append(
            ShapeResult(
                shape=driver.shape,
                buckets=driver.to_dataframe(),
                mean_attempts=sampler.attempts / sampler.draws,
            )
        )
    return results


# =============================================================================
# Reporting
# =============================================================================


def print_summary(results: list[ShapeResult]) -> None:
    for result in results:
        shape = result.shape
        print(f"\n{shape.name}")
        print(f"  attempts/draw: {result.mean_attempts:.3f} (expected {shape.expected_iterations:.3f})")
        df = result.buckets
        worst = (df["fraction"] - df["expected_fraction"]).abs().max()
        print(f"  samples: {int(df['count'].sum())}, worst bucket error: {worst:.4f}")


def visualize_results(results: list[ShapeResult], output_dir: Path) -> None:
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    output_dir.mkdir(parents=True, exist_ok=True)
    fig, axes = plt.subplots(1, len(results), figsize=(6 * len(results), 4.5))

    for ax, result in zip(axes, results):
        df = result.buckets
        ax.bar(df["bucket"], df["fraction"], alpha=0.6, label="Observed")
        ax.plot(df["bucket"], df["expected_fraction"], "r--", marker="o", label="Expected")
        ax.set_title(result.shape.name.capitalize())
        ax.set_xlabel("Bucket")
        ax.set_ylabel("Fraction of samples")
        ax.legend()

    fig.tight_layout()
    fig.savefig(output_dir / "shape_comparison.png")
    plt.close(fig)


# =============================================================================
# Entry Point
# =============================================================================


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Compare weighted random density shapes")
    parser.add_argument("--frames", type=int, default=2000, help="Frames to run")
    parser.add_argument("--buckets", type=int, default=20, help="Histogram buckets")
    parser.add_argument("--samples-per-frame", type=int, default=10)
    parser.add_argument("--seed", type=int, default=42, help="Random seed (-1 for random)")
    parser.add_argument("--output", type=str, default="output/shape_comparison")
    parser.add_argument("--no-viz", action="store_true", help="Skip visualization generation")
    parser.add_argument("--verbose", action="store_true", help="Log chart rescaling")
    args = parser.parse_args()

    if args.verbose:
        enable_console_logging(level="INFO")

    seed = None if args.seed == -1 else args.seed

    print("Running shape comparison...")
    print(f"  Frames: {args.frames} x {args.samples_per_frame} samples")
    print(f"  Seed: {seed if seed is not None else 'random'}")

    results = run_comparison(args.frames, args.buckets, args.samples_per_frame, seed)
    print_summary(results)

    if not args.no_viz:
        output_dir = Path(args.output)
        visualize_results(results, output_dir)
        print(f"\nVisualizations saved to: {output_dir.absolute()}")
