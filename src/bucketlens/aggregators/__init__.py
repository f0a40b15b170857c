from .cumulative_histogram import CumulativeHistogramAccumulator

__all__ = ["CumulativeHistogramAccumulator"]
