from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bucketlens.models import HistogramState, HistogramSummary


class StatsEngine(ABC):
    """Compute summary statistics from a finalized histogram."""

    @abstractmethod
    def compute(self, state: HistogramState) -> HistogramSummary:
        """Return a HistogramSummary for the histogram."""
        raise NotImplementedError
