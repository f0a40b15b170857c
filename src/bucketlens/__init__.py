import logging
import sys

from .contracts import (
    BucketScheme,
    HistogramAggregator,
    Reporter,
    SampleSource,
    StatsEngine,
)

__all__ = [
    "BucketScheme",
    "HistogramAggregator",
    "Reporter",
    "SampleSource",
    "StatsEngine",
]

# stdout carries the rendered histogram; keep log records on stderr.
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
    force=True,
)
