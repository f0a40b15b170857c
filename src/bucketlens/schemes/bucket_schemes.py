from __future__ import annotations

import logging
import math

from bucketlens.contracts import BucketScheme
from bucketlens.errors import (
    BucketOverflowError,
    InvalidBoundaryError,
    InvalidCountError,
    InvalidFactorError,
    InvalidStartError,
)
from bucketlens.models import BucketConfig

logger = logging.getLogger(__name__)


def parse_bucket_boundaries(boundaries: str) -> list[float]:
    """Parse comma separated bucket boundaries and sort them ascending.

    Duplicate boundaries are kept; they only produce zero-width buckets.
    """
    result: list[float] = []
    for token in boundaries.split(","):
        try:
            value = float(token)
        except ValueError:
            logger.error("Invalid bucket boundary %r in %r.", token, boundaries)
            raise InvalidBoundaryError(token) from None
        if not math.isfinite(value):
            logger.error("Non-finite bucket boundary %r in %r.", token, boundaries)
            raise InvalidBoundaryError(token)
        result.append(value)

    result.sort()
    return result


def linear_buckets(start: float, width: float, count: int) -> list[float]:
    if count < 1:
        logger.error("Linear buckets requested with count=%d.", count)
        raise InvalidCountError(count)
    bounds = [start + index * width for index in range(count)]
    _check_finite(bounds)
    return bounds


def exponential_buckets(start: float, factor: float, count: int) -> list[float]:
    if count < 1:
        logger.error("Exponential buckets requested with count=%d.", count)
        raise InvalidCountError(count)
    if start <= 0:
        logger.error("Exponential buckets requested with start=%g.", start)
        raise InvalidStartError(start)
    if factor <= 1:
        logger.error("Exponential buckets requested with factor=%g.", factor)
        raise InvalidFactorError(factor)

    bounds: list[float] = []
    bound = start
    for _ in range(count):
        bounds.append(bound)
        bound *= factor
    _check_finite(bounds)
    return bounds


def _check_finite(bounds: list[float]) -> None:
    for index, bound in enumerate(bounds):
        if not math.isfinite(bound):
            logger.error("Generated bucket bound #%d is %s.", index, bound)
            raise BucketOverflowError(index)


class ExplicitBucketScheme(BucketScheme):
    """Bucket bounds taken verbatim from a comma separated list."""

    def __init__(self, boundaries: str) -> None:
        self._boundaries = boundaries

    def bounds(self) -> list[float]:
        return parse_bucket_boundaries(self._boundaries)


class LinearBucketScheme(BucketScheme):
    """``count`` bounds spaced ``width`` apart starting at ``start``."""

    def __init__(self, start: float, width: float, count: int) -> None:
        self._start = start
        self._width = width
        self._count = count

    def bounds(self) -> list[float]:
        # A negative width yields a descending progression; the accumulator
        # needs ascending bounds.
        return sorted(linear_buckets(self._start, self._width, self._count))


class ExponentialBucketScheme(BucketScheme):
    """``count`` bounds growing by ``factor`` starting at ``start``."""

    def __init__(self, start: float, factor: float, count: int) -> None:
        self._start = start
        self._factor = factor
        self._count = count

    def bounds(self) -> list[float]:
        return exponential_buckets(self._start, self._factor, self._count)


def build_bucket_scheme(config: BucketConfig) -> BucketScheme:
    """Pick the scheme for *config*; explicit buckets win over ``mode``."""
    if config.explicit_buckets:
        logger.debug("Using explicit buckets %r.", config.explicit_buckets)
        return ExplicitBucketScheme(config.explicit_buckets)
    if config.mode == "exponential":
        logger.debug(
            "Using exponential buckets start=%g factor=%g count=%d.",
            config.start,
            config.factor,
            config.count,
        )
        return ExponentialBucketScheme(config.start, config.factor, config.count)
    logger.debug(
        "Using linear buckets start=%g width=%g count=%d.",
        config.start,
        config.width,
        config.count,
    )
    return LinearBucketScheme(config.start, config.width, config.count)
