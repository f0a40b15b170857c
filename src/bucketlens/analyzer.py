from __future__ import annotations

import logging
from itertools import islice

import numpy as np

from bucketlens.aggregators import CumulativeHistogramAccumulator
from bucketlens.contracts import BucketScheme, SampleSource, StatsEngine
from bucketlens.models import HistogramResult
from bucketlens.stats_engines import SummaryStatsEngine

logger = logging.getLogger(__name__)


class Analyzer:
    """Orchestrate bucket construction, accumulation and summary statistics."""

    def __init__(
        self,
        source: SampleSource,
        scheme: BucketScheme,
        stats_engine: StatsEngine | None = None,
        batch_size: int = 4096,
    ) -> None:
        if batch_size < 1:
            raise ValueError("batch_size must be positive.")
        self._source = source
        self._scheme = scheme
        self._stats_engine = stats_engine or SummaryStatsEngine()
        self._batch_size = batch_size

    def analyze(self) -> HistogramResult:
        # Bounds are fixed before the first sample is read.
        bounds = self._scheme.bounds()
        logger.debug("Built %d bucket bounds: %s.", len(bounds), bounds)
        accumulator = CumulativeHistogramAccumulator(bounds)

        samples = self._source.iter_samples()
        while True:
            chunk = list(islice(samples, self._batch_size))
            if not chunk:
                break
            accumulator.update_many(np.asarray(chunk, dtype=np.float64))

        state = accumulator.finalize()
        summary = self._stats_engine.compute(state)
        logger.debug("Analysis finished with %d samples.", state.sample_count)
        return HistogramResult(state=state, summary=summary)
