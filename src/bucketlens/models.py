from __future__ import annotations

import math
from typing import Literal

from pydantic import BaseModel, ConfigDict, model_validator

from bucketlens.histogram_quantiles import bucket_quantile


class BucketConfig(BaseModel):
    """Bucket layout requested for a run."""

    model_config = ConfigDict(extra="forbid")

    start: float = 1.0
    factor: float = 5.0
    width: float = 1.0
    count: int = 10
    mode: Literal["linear", "exponential"] = "linear"
    explicit_buckets: str | None = None


class Bucket(BaseModel):
    """Cumulative bucket: samples <= upper_bound, including lower buckets."""

    model_config = ConfigDict(
        extra="forbid", strict=True, frozen=True, ser_json_inf_nan="constants"
    )

    upper_bound: float
    cumulative_count: float


class HistogramState(BaseModel):
    """Finalized cumulative histogram with running aggregates."""

    model_config = ConfigDict(
        extra="forbid", strict=True, frozen=True, ser_json_inf_nan="constants"
    )

    buckets: list[Bucket]
    sum: float
    sample_count: int
    min: float
    max: float

    @model_validator(mode="after")
    def _check_cumulative_layout(self) -> HistogramState:
        if not self.buckets:
            raise ValueError("histogram needs at least the +Inf bucket")
        if self.buckets[-1].upper_bound != math.inf:
            raise ValueError("last bucket must have an upper bound of +Inf")
        for prev, cur in zip(self.buckets, self.buckets[1:]):
            if cur.upper_bound < prev.upper_bound:
                raise ValueError("bucket upper bounds must be sorted")
            if cur.cumulative_count < prev.cumulative_count:
                raise ValueError("cumulative counts must be non-decreasing")
        if self.buckets[-1].cumulative_count != self.sample_count:
            raise ValueError("+Inf bucket must count every sample")
        return self

    def finite_bounds(self) -> list[float]:
        return [bucket.upper_bound for bucket in self.buckets[:-1]]

    def per_bucket_counts(self) -> list[float]:
        """Return non-cumulative counts derived from consecutive differences."""
        counts: list[float] = []
        prev = 0.0
        for bucket in self.buckets:
            counts.append(bucket.cumulative_count - prev)
            prev = bucket.cumulative_count
        return counts

    def quantile(self, q: float) -> float:
        """Estimate the q-quantile; without finite bounds, return the max."""
        estimate = bucket_quantile(q, self.buckets)
        if math.isinf(estimate) and len(self.buckets) == 1:
            return self.max
        return estimate


class HistogramSummary(BaseModel):
    """Scalar statistics estimated from a histogram."""

    model_config = ConfigDict(
        extra="forbid", strict=True, frozen=True, ser_json_inf_nan="constants"
    )

    count: int
    p50: float
    p90: float
    p95: float
    p99: float
    avg: float
    min: float
    max: float


class HistogramResult(BaseModel):
    """Immutable histogram result bundle."""

    model_config = ConfigDict(
        extra="forbid", strict=True, frozen=True, ser_json_inf_nan="constants"
    )

    state: HistogramState
    summary: HistogramSummary
