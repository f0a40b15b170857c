from __future__ import annotations

import argparse
import io
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from rich.console import Console

from bucketlens.analyzer import Analyzer
from bucketlens.contracts import Reporter
from bucketlens.errors import BucketSchemeError, MalformedSampleError
from bucketlens.models import BucketConfig
from bucketlens.reporters import JsonReporter, RichReporter
from bucketlens.schemes import build_bucket_scheme
from bucketlens.sources import LineSampleSource

_MODE_ALIASES = {
    "linear": "linear",
    "lin": "linear",
    "exponential": "exponential",
    "exp": "exponential",
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bucketlens",
        description="Cumulative bucket histogram of numeric samples, one per line.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="File to read samples from (default: stdin)",
    )
    parser.add_argument(
        "--start",
        type=float,
        default=1.0,
        help="Start value for linear or exponential buckets.",
    )
    parser.add_argument(
        "--factor",
        type=float,
        default=5.0,
        help="Factor used when computing exponential buckets.",
    )
    parser.add_argument(
        "--width", type=float, default=1.0, help="Width of linear buckets."
    )
    parser.add_argument(
        "--count",
        type=int,
        default=10,
        help="Number of linear or exponential buckets.",
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=sorted(_MODE_ALIASES),
        default="linear",
        help="Linear or exponential.",
    )
    parser.add_argument(
        "--column-width",
        type=int,
        default=30,
        help="Width of the largest bin.",
    )
    parser.add_argument(
        "--buckets",
        type=str,
        default="",
        help="Explicit buckets: comma separated bucket boundaries.",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log debug details to stderr."
    )
    return parser


def _config_from_args(args: argparse.Namespace) -> BucketConfig:
    return BucketConfig(
        start=args.start,
        factor=args.factor,
        width=args.width,
        count=args.count,
        mode=_MODE_ALIASES[args.mode],
        explicit_buckets=args.buckets or None,
    )


def _build_reporter(args: argparse.Namespace, console: Console) -> Reporter:
    if args.format == "json":
        return JsonReporter(console)
    return RichReporter(console, column_width=args.column_width)


def _run(
    lines: TextIO,
    args: argparse.Namespace,
    *,
    console: Console,
    err_console: Console,
) -> int:
    try:
        scheme = build_bucket_scheme(_config_from_args(args))
        result = Analyzer(LineSampleSource(lines), scheme).analyze()
    except BucketSchemeError as exc:
        err_console.print(f"Failed to create buckets: {exc}", markup=False)
        return 1
    except MalformedSampleError as exc:
        err_console.print(f"found non-numerical input: {exc}", markup=False)
        return 1

    _build_reporter(args, console).render(result)
    return 0


def _stdin_lines() -> TextIO:
    # Undecodable bytes become U+FFFD so the line is reported as malformed.
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        return sys.stdin
    return io.TextIOWrapper(buffer, encoding="utf-8", errors="replace")


def run_cli(
    argv: Sequence[str] | None = None,
    *,
    console: Console | None = None,
    err_console: Console | None = None,
    stdin: TextIO | None = None,
) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    # Fatal errors are reported on err_console; component logs only with --verbose.
    logging.getLogger().setLevel(logging.DEBUG if args.verbose else logging.CRITICAL)
    out_console = console or Console()
    diag_console = err_console or Console(stderr=True)

    if args.input == "-":
        return _run(
            stdin or _stdin_lines(),
            args,
            console=out_console,
            err_console=diag_console,
        )

    input_path = Path(args.input)
    try:
        handle = input_path.open(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        diag_console.print(f"Input file not found: {input_path}", markup=False)
        return 2
    with handle:
        return _run(handle, args, console=out_console, err_console=diag_console)


def main() -> None:
    raise SystemExit(run_cli())
