from .bucket_scheme import BucketScheme
from .histogram_aggregator import HistogramAggregator
from .reporter import Reporter
from .sample_source import SampleSource
from .stats_engine import StatsEngine

__all__ = [
    "BucketScheme",
    "HistogramAggregator",
    "Reporter",
    "SampleSource",
    "StatsEngine",
]
