from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from bucketlens.models import Bucket


def bucket_quantile(q: float, buckets: Sequence[Bucket]) -> float:
    """Estimate the q-quantile from cumulative buckets.

    Buckets must be sorted by upper bound and end with the +Inf bucket. The
    estimate interpolates linearly inside the bucket whose cumulative count
    straddles ``q * total``; the lowest bucket is assumed to start at 0.

    Ranks that land in the +Inf bucket have no finite upper edge, so the
    largest finite bound is returned as a lower-bound estimate. With no
    finite bounds at all the result is +Inf.

    Returns NaN for an empty histogram.
    """
    if not 0.0 <= q <= 1.0:
        raise ValueError("q must be in [0, 1].")
    if not buckets:
        raise ValueError("No buckets provided for quantile estimation.")

    cumulative = np.fromiter(
        (bucket.cumulative_count for bucket in buckets),
        dtype=np.float64,
        count=len(buckets),
    )
    total = float(cumulative[-1])
    if total == 0.0:
        return math.nan

    target = q * total
    idx = int(np.searchsorted(cumulative, target, side="left"))
    # idx past the end only happens through rounding on q == 1.
    if idx >= len(buckets) - 1:
        return _largest_finite_bound(buckets)

    upper = buckets[idx].upper_bound
    if idx == 0:
        if upper <= 0.0:
            return upper
        lower = 0.0
        prev = 0.0
    else:
        lower = buckets[idx - 1].upper_bound
        prev = float(cumulative[idx - 1])

    bucket_count = float(cumulative[idx]) - prev
    if bucket_count == 0.0:
        return lower
    return lower + (upper - lower) * ((target - prev) / bucket_count)


def _largest_finite_bound(buckets: Sequence[Bucket]) -> float:
    if len(buckets) < 2:
        return math.inf
    return buckets[-2].upper_bound
