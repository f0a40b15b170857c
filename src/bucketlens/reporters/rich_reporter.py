from __future__ import annotations

import math

from rich.cells import cell_len
from rich.console import Console
from rich.text import Text

from bucketlens.contracts import Reporter
from bucketlens.models import HistogramResult, HistogramState, HistogramSummary

BOXES = ("▏", "▎", "▍", "▌", "▋", "▊", "▉", "█")


def bucket_labels(state: HistogramState) -> list[str]:
    bounds = state.finite_bounds()
    if not bounds:
        return ["(-∞ .. +∞)"]

    labels = [f"(-∞ .. {bounds[0]:.6g}]"]
    for lower, upper in zip(bounds, bounds[1:]):
        labels.append(f"({lower:.6g} .. {upper:.6g}]")
    labels.append(f"({bounds[-1]:.6g} .. +∞)")
    return labels


def column(size: float) -> str:
    """Return a horizontal bar ``size`` cells wide with 1/8 cell resolution."""
    full = int(size)
    index = int((size - math.floor(size)) * len(BOXES))
    return BOXES[-1] * full + BOXES[index]


def _format_stat(value: float) -> str:
    return f"{value:g}"


class RichReporter(Reporter):
    """Render one bar per bucket followed by a summary line."""

    def __init__(
        self,
        console: Console | None = None,
        column_width: int = 30,
        justify: bool = True,
    ) -> None:
        self._console = console or Console()
        self._column_width = column_width
        self._justify = justify

    def render(self, result: HistogramResult) -> None:
        for line in self._build_bars(result.state):
            self._console.print(line, soft_wrap=True)
        self._console.print()
        self._console.print("summary:", markup=False, highlight=False)
        self._console.print(
            self._build_summary(result.summary),
            markup=False,
            highlight=False,
            soft_wrap=True,
        )

    def _build_bars(self, state: HistogramState) -> list[Text]:
        labels = bucket_labels(state)
        per_bucket = state.per_bucket_counts()
        label_width = max(cell_len(label) for label in labels)
        max_freq = max(per_bucket)
        samples = state.sample_count

        lines: list[Text] = []
        for label, bucket_samples in zip(labels, per_bucket, strict=True):
            padding = " " * (label_width - cell_len(label))
            prefix = padding + label if self._justify else label + padding
            width = (
                bucket_samples / max_freq * self._column_width if max_freq else 0.0
            )
            share = 100 * bucket_samples / samples if samples else 0.0
            line = Text(prefix + " ")
            line.append(column(width), style="cyan")
            line.append(f" {bucket_samples:.0f} ({share:0.1f} %)")
            lines.append(line)
        return lines

    @staticmethod
    def _build_summary(summary: HistogramSummary) -> str:
        stats = [
            f"count={summary.count:.0f}",
            f"p50={_format_stat(summary.p50)}",
            f"p90={_format_stat(summary.p90)}",
            f"p95={_format_stat(summary.p95)}",
            f"p99={_format_stat(summary.p99)}",
            f"avg={_format_stat(summary.avg)}",
            f"min={_format_stat(summary.min)}",
            f"max={_format_stat(summary.max)}",
        ]
        return " " + ", ".join(stats)
