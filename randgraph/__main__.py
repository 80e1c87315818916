"""Command line entry point.

Usage:
    python -m randgraph --shape gaussian --buckets 30
    python -m randgraph --frames 5000 --seed 42 --output output/gaussian.png
"""

from __future__ import annotations

import argparse

from randgraph.config import GraphConfig
from randgraph.distributions.density_shape import DensityShape
from randgraph.logging_config import configure_from_env


def build_parser(defaults: GraphConfig | None = None) -> argparse.ArgumentParser:
    env = defaults or GraphConfig.from_env()
    parser = argparse.ArgumentParser(prog="randgraph", description="Live histogram of weighted random numbers")
    parser.add_argument(
        "--shape",
        choices=[shape.name.lower() for shape in DensityShape],
        default=env.shape.name.lower(),
    )
    parser.add_argument("--buckets", type=int, default=env.bucket_count)
    parser.add_argument("--samples-per-frame", type=int, default=env.samples_per_frame)
    parser.add_argument("--fps", type=float, default=env.frame_rate)
    parser.add_argument("--seed", type=int, default=env.seed)
    parser.add_argument("--frames", type=int, default=1000, help="Frames to run before saving (with --output)")
    parser.add_argument("--output", type=str, default=None, help="Save a snapshot here instead of opening a window")
    return parser


def main(argv: list[str] | None = None) -> int:
    configure_from_env()
    try:
        env = GraphConfig.from_env()
    except ValueError as exc:
        print(f"randgraph: {exc}")
        return 2
    args = build_parser(env).parse_args(argv)

    try:
        config = GraphConfig(
            shape=DensityShape.from_name(args.shape),
            bucket_count=args.buckets,
            samples_per_frame=args.samples_per_frame,
            frame_rate=args.fps,
            seed=args.seed,
        )
    except ValueError as exc:
        print(f"randgraph: {exc}")
        return 2

    if args.output is None:
        from randgraph.visual.live import run_live

        run_live(config)
        return 0

    from randgraph.visual.live import save_snapshot

    driver = save_snapshot(config, args.frames, args.output)
    print(driver.to_dataframe().to_string(index=False, float_format=lambda v: f"{v:.4f}"))
    print(f"Saved {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
