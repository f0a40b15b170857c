from __future__ import annotations

import logging
import math
from array import array
from bisect import bisect_left
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from bucketlens.contracts import HistogramAggregator
from bucketlens.errors import MalformedSampleError
from bucketlens.models import Bucket, HistogramState

logger = logging.getLogger(__name__)


class CumulativeHistogramAccumulator(HistogramAggregator):
    """Prometheus style cumulative histogram with running sum/min/max.

    Counts are stored per bucket and turned into cumulative counts on
    :meth:`finalize`, so each sample costs one binary search over the finite
    bounds. Memory is proportional to the number of buckets only.
    """

    def __init__(self, bounds: Sequence[float]) -> None:
        finite = [float(bound) for bound in bounds]
        if any(not math.isfinite(bound) for bound in finite):
            raise ValueError("Bucket bounds must be finite.")
        if any(b < a for a, b in zip(finite, finite[1:])):
            raise ValueError("Bucket bounds must be sorted ascending.")

        self._bounds = finite
        self._bounds_view: NDArray[np.float64] = np.asarray(finite, dtype=np.float64)
        # One extra slot for the +Inf overflow bucket.
        self._counts = array("d", [0.0] * (len(finite) + 1))
        self._sum = 0.0
        self._count = 0
        self._min = math.nan
        self._max = math.nan
        logger.debug("Created histogram with %d finite bounds.", len(finite))

    @property
    def sample_count(self) -> int:
        return self._count

    def update(self, value: float) -> None:
        if math.isnan(value):
            logger.error("NaN sample encountered in histogram accumulation.")
            raise MalformedSampleError(str(value))

        if self._count == 0:
            self._min = value
            self._max = value
        elif value < self._min:
            self._min = value
        elif value > self._max:
            self._max = value

        self._counts[bisect_left(self._bounds, value)] += 1.0
        self._sum += value
        self._count += 1

    def update_many(self, values: NDArray[np.number]) -> None:
        value_count = int(values.size)
        if value_count == 0:
            return

        batch = np.asarray(values, dtype=np.float64).ravel()
        if np.isnan(batch).any():
            logger.error("NaN sample encountered in histogram accumulation.")
            raise MalformedSampleError("nan")

        indexes = np.searchsorted(self._bounds_view, batch, side="left")
        per_bucket = np.bincount(indexes, minlength=len(self._counts))
        counts_view: NDArray[np.float64] = np.frombuffer(
            self._counts, dtype=np.float64
        )
        counts_view += per_bucket

        batch_min = float(np.min(batch))
        batch_max = float(np.max(batch))
        if self._count == 0:
            self._min = batch_min
            self._max = batch_max
        else:
            self._min = min(self._min, batch_min)
            self._max = max(self._max, batch_max)
        self._sum += float(np.sum(batch))
        self._count += value_count
        logger.debug(
            "Consumed batch of %d samples; total count=%d.", value_count, self._count
        )

    def finalize(self) -> HistogramState:
        cumulative = np.cumsum(self._counts, dtype=np.float64)
        upper_bounds = [*self._bounds, math.inf]
        buckets = [
            Bucket(upper_bound=upper, cumulative_count=float(count))
            for upper, count in zip(upper_bounds, cumulative, strict=True)
        ]
        state = HistogramState(
            buckets=buckets,
            sum=self._sum,
            sample_count=self._count,
            min=self._min,
            max=self._max,
        )
        logger.debug(
            "Finalized histogram: buckets=%d count=%d sum=%.6f min=%s max=%s.",
            len(buckets),
            state.sample_count,
            state.sum,
            state.min,
            state.max,
        )
        return state
