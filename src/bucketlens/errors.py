from __future__ import annotations


class BucketLensError(ValueError):
    """Base class for every fatal bucketlens error."""


class BucketSchemeError(BucketLensError):
    """Bucket boundaries could not be constructed."""


class InvalidBoundaryError(BucketSchemeError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"non-numeric input: {token!r}")


class InvalidCountError(BucketSchemeError):
    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"buckets need a positive count, got {count}")


class InvalidStartError(BucketSchemeError):
    def __init__(self, start: float) -> None:
        self.start = start
        super().__init__(
            f"exponential buckets need a positive start value, got {start:g}"
        )


class InvalidFactorError(BucketSchemeError):
    def __init__(self, factor: float) -> None:
        self.factor = factor
        super().__init__(
            f"exponential buckets need a factor greater than 1, got {factor:g}"
        )


class MalformedSampleError(BucketLensError):
    """A sample in the input stream is not a number."""

    def __init__(self, token: str, line_number: int | None = None) -> None:
        self.token = token
        self.line_number = line_number
        location = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"{token!r}{location}")


class BucketOverflowError(BucketSchemeError):
    """A generated bound is not a finite float."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"bucket bound #{index} overflows the float range")
