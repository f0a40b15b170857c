from .bucket_schemes import (
    ExplicitBucketScheme,
    ExponentialBucketScheme,
    LinearBucketScheme,
    build_bucket_scheme,
    exponential_buckets,
    linear_buckets,
    parse_bucket_boundaries,
)

__all__ = [
    "ExplicitBucketScheme",
    "ExponentialBucketScheme",
    "LinearBucketScheme",
    "build_bucket_scheme",
    "exponential_buckets",
    "linear_buckets",
    "parse_bucket_boundaries",
]
