from __future__ import annotations

import logging
import math

from bucketlens.contracts import StatsEngine
from bucketlens.models import HistogramState, HistogramSummary

logger = logging.getLogger(__name__)

SUMMARY_QUANTILES = {"p50": 0.5, "p90": 0.9, "p95": 0.95, "p99": 0.99}


class SummaryStatsEngine(StatsEngine):
    """Estimate quantiles and averages from cumulative bucket counts."""

    def compute(self, state: HistogramState) -> HistogramSummary:
        count = state.sample_count
        if count == 0:
            logger.debug("Histogram is empty; summary statistics are NaN.")
            return HistogramSummary(
                count=0,
                p50=math.nan,
                p90=math.nan,
                p95=math.nan,
                p99=math.nan,
                avg=math.nan,
                min=math.nan,
                max=math.nan,
            )

        quantiles = {
            name: state.quantile(q) for name, q in SUMMARY_QUANTILES.items()
        }
        summary = HistogramSummary(
            count=count,
            avg=state.sum / count,
            min=state.min,
            max=state.max,
            **quantiles,
        )
        logger.debug(
            "Computed summary: count=%d p50=%.6g p90=%.6g p95=%.6g p99=%.6g "
            "avg=%.6g min=%.6g max=%.6g.",
            summary.count,
            summary.p50,
            summary.p90,
            summary.p95,
            summary.p99,
            summary.avg,
            summary.min,
            summary.max,
        )
        return summary
