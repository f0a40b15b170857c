from __future__ import annotations

from abc import ABC, abstractmethod


class BucketScheme(ABC):
    """Produce the finite upper bounds of a histogram."""

    @abstractmethod
    def bounds(self) -> list[float]:
        """Return a sorted, non-empty list of finite upper bounds.

        The +Inf overflow bucket is not included; the accumulator appends it.
        """
        raise NotImplementedError
