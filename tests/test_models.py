from __future__ import annotations

import json
import math

import pytest
from pydantic import ValidationError

from bucketlens.models import (
    Bucket,
    BucketConfig,
    HistogramResult,
    HistogramState,
    HistogramSummary,
)


def make_state() -> HistogramState:
    return HistogramState(
        buckets=[
            Bucket(upper_bound=1.0, cumulative_count=1.0),
            Bucket(upper_bound=5.0, cumulative_count=3.0),
            Bucket(upper_bound=math.inf, cumulative_count=4.0),
        ],
        sum=20.0,
        sample_count=4,
        min=0.5,
        max=9.5,
    )


def make_summary() -> HistogramSummary:
    return HistogramSummary(
        count=4, p50=3.0, p90=5.0, p95=5.0, p99=5.0, avg=5.0, min=0.5, max=9.5
    )


def test_bucket_config_defaults() -> None:
    config = BucketConfig()

    assert config.start == 1.0
    assert config.factor == 5.0
    assert config.width == 1.0
    assert config.count == 10
    assert config.mode == "linear"
    assert config.explicit_buckets is None


def test_bucket_config_rejects_unknown_mode() -> None:
    with pytest.raises(ValidationError):
        BucketConfig(mode="log")  # type: ignore[arg-type]


def test_histogram_state_helpers() -> None:
    state = make_state()

    assert state.finite_bounds() == [1.0, 5.0]
    assert state.per_bucket_counts() == [1.0, 2.0, 1.0]


def test_histogram_state_is_frozen() -> None:
    state = make_state()

    with pytest.raises(ValidationError):
        state.sum = 0.0  # type: ignore[misc]


def test_histogram_state_requires_overflow_bucket() -> None:
    with pytest.raises(ValidationError, match="\\+Inf"):
        HistogramState(
            buckets=[Bucket(upper_bound=1.0, cumulative_count=1.0)],
            sum=1.0,
            sample_count=1,
            min=1.0,
            max=1.0,
        )


def test_histogram_state_rejects_decreasing_counts() -> None:
    with pytest.raises(ValidationError, match="non-decreasing"):
        HistogramState(
            buckets=[
                Bucket(upper_bound=1.0, cumulative_count=2.0),
                Bucket(upper_bound=math.inf, cumulative_count=1.0),
            ],
            sum=1.0,
            sample_count=1,
            min=1.0,
            max=1.0,
        )


def test_histogram_state_rejects_count_mismatch() -> None:
    with pytest.raises(ValidationError, match="every sample"):
        HistogramState(
            buckets=[Bucket(upper_bound=math.inf, cumulative_count=2.0)],
            sum=1.0,
            sample_count=3,
            min=1.0,
            max=1.0,
        )


def test_histogram_result_rejects_extra_fields() -> None:
    with pytest.raises(ValidationError):
        HistogramResult(
            state=make_state(),
            summary=make_summary(),
            extra="nope",  # type: ignore[call-arg]
        )


def test_histogram_result_json_keeps_infinite_bound() -> None:
    result = HistogramResult(state=make_state(), summary=make_summary())

    payload = json.loads(result.model_dump_json())

    assert payload["state"]["buckets"][-1]["upper_bound"] == math.inf
    assert payload["summary"]["count"] == 4
