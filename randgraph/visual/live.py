"""Wiring of sampler, driver, chart and renderer into a running scene."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from matplotlib.figure import Figure

from randgraph.chart.bar_chart import BarChart
from randgraph.chart.layout import Viewport
from randgraph.core.frame_loop import FrameLoop
from randgraph.distributions.weighted_sampler import WeightedSampler
from randgraph.entities.histogram_driver import HistogramDriver
from randgraph.visual.renderer import MatplotlibBarRenderer
from randgraph.visual.screen import detect_viewport

if TYPE_CHECKING:
    from randgraph.chart.bar_chart import ChartRenderer
    from randgraph.config import GraphConfig

logger = logging.getLogger(__name__)

DPI = 100
SNAPSHOT_SIZE = (1280, 720)


def build_scene(
    config: GraphConfig,
    viewport: Viewport,
    renderer: ChartRenderer | None = None,
) -> tuple[FrameLoop, HistogramDriver, BarChart]:
    """Create the loop, driver and chart for ``config``."""
    chart = BarChart(viewport, renderer=renderer)
    driver = HistogramDriver(
        name="histogram",
        chart=chart,
        shape=config.shape,
        bucket_count=config.bucket_count,
        samples_per_frame=config.samples_per_frame,
        sampler=WeightedSampler(seed=config.seed),
    )
    loop = FrameLoop([driver], frame_rate=config.frame_rate)
    return loop, driver, chart


def _title(driver: HistogramDriver) -> str:
    return f"{driver.shape.name.capitalize()} - {driver.bucket_count} buckets - {driver.total_samples} samples"


def save_snapshot(config: GraphConfig, frames: int, path: str | Path, viewport: Viewport | None = None) -> HistogramDriver:
    """Run ``frames`` frames headless and save the final chart as an image.

    Returns:
        The driver, holding the accumulated counts.
    """
    viewport = viewport or Viewport(*SNAPSHOT_SIZE)
    fig = Figure(figsize=(viewport.width / DPI, viewport.height / DPI), dpi=DPI)
    ax = fig.subplots()
    renderer = MatplotlibBarRenderer(ax)

    loop, driver, _ = build_scene(config, viewport, renderer)
    loop.run(frames)
    ax.set_title(_title(driver))

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path)
    logger.info("Saved histogram snapshot after %d frame(s) to %s", frames, path)
    return driver


def run_live(config: GraphConfig) -> None:
    """Open a window and update the histogram every frame until closed."""
    import matplotlib.pyplot as plt
    from matplotlib.animation import FuncAnimation

    screen = detect_viewport()
    # Half the screen keeps the window clear of taskbars and docks
    viewport = Viewport(max(screen.width // 2, 1), max(screen.height // 2, 1), screen.ortho_size)

    fig, ax = plt.subplots(figsize=(viewport.width / DPI, viewport.height / DPI), dpi=DPI)
    renderer = MatplotlibBarRenderer(ax)
    loop, driver, chart = build_scene(config, viewport, renderer)

    def on_resize(event) -> None:
        if event.width > 0 and event.height > 0:
            chart.resize(Viewport(int(event.width), int(event.height), viewport.ortho_size))

    def on_frame(_frame_number):
        loop.step()
        ax.set_title(_title(driver))
        return renderer.patches

    fig.canvas.mpl_connect("resize_event", on_resize)
    # Must stay referenced until show() returns or the timer is collected
    animation = FuncAnimation(fig, on_frame, interval=1000.0 / config.frame_rate, cache_frame_data=False)
    logger.info("Starting live histogram: %s, %d buckets", config.shape.name, config.bucket_count)
    plt.show()
    animation.pause()
