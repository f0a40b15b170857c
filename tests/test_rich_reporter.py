from __future__ import annotations

import json

from rich.console import Console

from bucketlens.aggregators import CumulativeHistogramAccumulator
from bucketlens.models import HistogramResult
from bucketlens.reporters import JsonReporter, RichReporter, bucket_labels, column
from bucketlens.stats_engines import SummaryStatsEngine


def _console() -> Console:
    return Console(record=True, force_terminal=False, color_system=None, width=120)


def _result(bounds: list[float], values: list[float]) -> HistogramResult:
    accumulator = CumulativeHistogramAccumulator(bounds)
    for value in values:
        accumulator.update(value)
    state = accumulator.finalize()
    return HistogramResult(state=state, summary=SummaryStatsEngine().compute(state))


def test_column_uses_eighth_blocks() -> None:
    assert column(0.0) == "▏"
    assert column(2.0) == "██▏"
    assert column(1.5) == "█▌"
    assert column(0.99) == "█"


def test_bucket_labels() -> None:
    state = _result([1.0, 2.5, 1e7], []).state

    assert bucket_labels(state) == [
        "(-∞ .. 1]",
        "(1 .. 2.5]",
        "(2.5 .. 1e+07]",
        "(1e+07 .. +∞)",
    ]


def test_bucket_labels_without_finite_bounds() -> None:
    assert bucket_labels(_result([], [1.0]).state) == ["(-∞ .. +∞)"]


def test_rich_reporter_renders_bars_and_summary() -> None:
    console = _console()
    result = _result([1.0, 2.0, 3.0, 4.0, 5.0], [1.0, 2.0, 3.0, 4.0, 5.0])

    RichReporter(console, column_width=30).render(result)

    lines = console.export_text().splitlines()
    full_bar = "█" * 30 + "▏"
    assert lines[0] == f"(-∞ .. 1] {full_bar} 1 (20.0 %)"
    assert lines[1] == f" (1 .. 2] {full_bar} 1 (20.0 %)"
    assert lines[5] == "(5 .. +∞) ▏ 0 (0.0 %)"
    assert lines[6] == ""
    assert lines[7] == "summary:"
    assert lines[8] == (
        " count=5, p50=2.5, p90=4.5, p95=4.75, p99=4.95, avg=3, min=1, max=5"
    )


def test_rich_reporter_scales_bars_to_largest_bucket() -> None:
    console = _console()
    result = _result([1.0, 2.0], [0.5, 0.5, 0.5, 0.5, 1.5, 1.5])

    RichReporter(console, column_width=8).render(result)

    lines = console.export_text().splitlines()
    assert lines[0].endswith("█" * 8 + "▏ 4 (66.7 %)")
    assert lines[1].endswith("█" * 4 + "▏ 2 (33.3 %)")


def test_rich_reporter_left_aligns_when_not_justified() -> None:
    console = _console()
    result = _result([1.0, 10.0], [5.0])

    RichReporter(console, column_width=4, justify=False).render(result)

    lines = console.export_text().splitlines()
    assert lines[1].startswith("(1 .. 10]  ")


def test_rich_reporter_handles_empty_histogram() -> None:
    console = _console()

    RichReporter(console).render(_result([1.0], []))

    output = console.export_text()
    assert "(-∞ .. 1] ▏ 0 (0.0 %)" in output
    assert "count=0, p50=nan" in output


def test_json_reporter_emits_parseable_document() -> None:
    console = _console()

    JsonReporter(console).render(_result([1.0, 5.0, 10.0], [0.0, 3.0, 7.0, 12.0]))

    payload = json.loads(console.export_text())
    counts = [b["cumulative_count"] for b in payload["state"]["buckets"]]
    assert counts == [1.0, 2.0, 3.0, 4.0]
    assert payload["summary"]["max"] == 12.0
