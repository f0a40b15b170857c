from __future__ import annotations

from rich.console import Console

from bucketlens.contracts import Reporter
from bucketlens.models import HistogramResult


class JsonReporter(Reporter):
    """Write the histogram result as a single JSON document."""

    def __init__(self, console: Console | None = None, indent: int | None = 2) -> None:
        self._console = console or Console()
        self._indent = indent

    def render(self, result: HistogramResult) -> None:
        self._console.out(result.model_dump_json(indent=self._indent), highlight=False)
