"""CLI runner replaying one charge stats invocation against local log files."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from contextlib import ExitStack
from dataclasses import asdict, replace
from pathlib import Path
from typing import Sequence

from chargestats.logging_config import setup_logger
from chargestats.pipeline import (
    ChargeStatsPipeline,
    InvocationOutcome,
    InvocationReport,
    PipelineConfig,
    load_pipeline_config,
)
from chargestats.reporting import JsonLinesCollector, Reporter


_SOURCE_OPTIONS = ("charge_stats", "wireless", "pca", "thermal", "gcharger", "dual_battery")


def build_parser() -> argparse.ArgumentParser:
    """Create CLI parser for a single pipeline invocation."""
    parser = argparse.ArgumentParser(
        prog="chargestats-replay",
        description="Consume charging diagnostic logs once and emit telemetry events as JSON lines.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional JSON config with `sources` and `throttle_window_secs`.",
    )
    for name in _SOURCE_OPTIONS:
        parser.add_argument(
            f"--{name.replace('_', '-')}",
            dest=name,
            type=Path,
            default=None,
            help=f"Override the {name.replace('_', ' ')} log path.",
        )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="JSON lines file for emitted events (default: stdout).",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level name.")
    parser.add_argument("--log-file", type=Path, default=None, help="Optional log file.")
    return parser


def resolve_config(args: argparse.Namespace) -> PipelineConfig:
    """Merge the optional config file with per-source CLI overrides."""
    config = load_pipeline_config(args.config) if args.config is not None else PipelineConfig()
    overrides = {name: getattr(args, name) for name in _SOURCE_OPTIONS if getattr(args, name) is not None}
    if overrides:
        config = replace(config, sources=replace(config.sources, **overrides))
    return config


def run_from_args(args: argparse.Namespace) -> InvocationReport:
    """Run one invocation and return its report."""
    config = resolve_config(args)
    with ExitStack() as stack:
        if args.output is None:
            stream = sys.stdout
        else:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            stream = stack.enter_context(args.output.open("a", encoding="utf-8"))
        pipeline = ChargeStatsPipeline.from_config(config, Reporter(JsonLinesCollector(stream)))
        return pipeline.check_and_report()


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    level = logging.getLevelName(str(args.log_level).upper())
    if not isinstance(level, int):
        parser.error(f"unknown log level: {args.log_level}")
    setup_logger("chargestats", log_file=args.log_file, level=level)

    try:
        report = run_from_args(args)
    except (OSError, ValueError) as exc:
        print(f"[ERROR] chargestats replay failed: {exc}", file=sys.stderr)
        return 2

    print(json.dumps(asdict(report), sort_keys=True), file=sys.stderr)
    if report.outcome == InvocationOutcome.SOURCE_UNAVAILABLE:
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
