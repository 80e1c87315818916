"""Frame-driven entities."""

from randgraph.entities.histogram_driver import (
    MAX_BUCKETS,
    MIN_BUCKETS,
    HistogramDriver,
    WeightSink,
    validate_bucket_count,
)

__all__ = [
    "MAX_BUCKETS",
    "MIN_BUCKETS",
    "HistogramDriver",
    "WeightSink",
    "validate_bucket_count",
]
