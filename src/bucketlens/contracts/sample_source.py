from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator


class SampleSource(ABC):
    """Stream numeric samples one at a time."""

    @abstractmethod
    def iter_samples(self) -> Iterator[float]:
        """Yield parsed samples in a streaming fashion."""
        raise NotImplementedError
