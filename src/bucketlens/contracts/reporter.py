from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bucketlens.models import HistogramResult


class Reporter(ABC):
    """Render histogram results for presentation."""

    @abstractmethod
    def render(self, result: HistogramResult) -> None:
        """Render the histogram result to the configured output."""
        raise NotImplementedError
