from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np
    from numpy.typing import NDArray

    from bucketlens.models import HistogramState


class HistogramAggregator(ABC):
    """Accumulate samples into a cumulative histogram in one pass."""

    @abstractmethod
    def update(self, value: float) -> None:
        """Consume a single sample."""
        raise NotImplementedError

    def update_many(self, values: NDArray[np.number]) -> None:
        """Consume a batch of samples.

        The default falls back to :meth:`update` for every element.
        """
        for value in values:
            self.update(float(value))

    @abstractmethod
    def finalize(self) -> HistogramState:
        """Return the immutable histogram built from all updates."""
        raise NotImplementedError
