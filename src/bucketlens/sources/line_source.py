from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator

from bucketlens.contracts import SampleSource
from bucketlens.errors import MalformedSampleError

logger = logging.getLogger(__name__)


def parse_sample(line: str, line_number: int | None = None) -> float:
    """Parse one whitespace-trimmed input line into a float sample."""
    token = line.strip()
    try:
        value = float(token)
    except ValueError:
        logger.error("Non-numerical input %r at line %s.", token, line_number)
        raise MalformedSampleError(token, line_number) from None
    if math.isnan(value):
        logger.error("NaN input %r at line %s.", token, line_number)
        raise MalformedSampleError(token, line_number)
    return value


class LineSampleSource(SampleSource):
    """Read one numeric sample per line from any iterable of text lines.

    Lines are consumed lazily, so a file or ``sys.stdin`` is never read into
    memory as a whole. A line that does not parse aborts the stream.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = lines

    def iter_samples(self) -> Iterator[float]:
        for line_number, line in enumerate(self._lines, start=1):
            yield parse_sample(line, line_number)
