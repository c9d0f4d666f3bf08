#!/usr/bin/env python3
"""RU: Индикатор прогресса экспорта по статистике FFmpeg из stdin.

Пример::

    ffmpeg $(plan) 2>&1 | python -m video_export_forge.scripts.watch_progress --duration 5

EN: Export progress bar fed by FFmpeg statistics read from stdin.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from tqdm import tqdm

from video_export_forge.stages.progress_stage import export_progress, parse_stats_time
from video_export_forge.utils.job_loader import load_job
from video_export_forge.utils.logging_utils import DEFAULT_LOGGER_NAME, setup_logging

LOG = logging.getLogger(f"{DEFAULT_LOGGER_NAME}.watch_progress")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Show export progress from FFmpeg stats on stdin")
    source = ap.add_mutually_exclusive_group(required=True)
    source.add_argument("--duration", type=float, help="Trimmed duration in seconds")
    source.add_argument("--config", type=Path, help="Job YAML to take the trim duration from")
    ap.add_argument("--quiet", action="store_true", help="Hide the progress bar")
    ap.add_argument("--verbose", action="store_true", help="Log every parsed sample")
    return ap.parse_args(argv)


def _stats_lines(stream: Iterable[str]) -> Iterator[str]:
    # FFmpeg rewrites its stats line with '\r'; stdin only splits on '\n'.
    for chunk in stream:
        for line in chunk.split("\r"):
            if line.strip():
                yield line


def track_progress(
    stream: Iterable[str], trimmed_duration_ms: float, *, quiet: bool = False,
) -> float:
    """RU: Читает строки статистики и обновляет индикатор; возвращает последнюю долю.

    EN: Consume stats lines, update the bar and return the last progress fraction.
    """
    progress = 0.0
    with tqdm(total=100.0, unit="%", disable=quiet, bar_format="{l_bar}{bar}| {n:.1f}%") as bar:
        for line in _stats_lines(stream):
            elapsed_ms = parse_stats_time(line)
            if elapsed_ms is None:
                continue
            progress = export_progress(elapsed_ms, trimmed_duration_ms)
            LOG.debug("elapsed=%.0fms progress=%.3f", elapsed_ms, progress)
            bar.n = round(progress * 100.0, 1)
            bar.refresh()
    return progress


def main(argv: list[str] | None = None, stream: TextIO | None = None) -> float:
    args = parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    if args.config is not None:
        if not args.config.exists():
            LOG.error("job file not found: %s", args.config)
            sys.exit(1)
        try:
            duration_ms = load_job(args.config).state.trimmed_duration_ms
        except ValueError as exc:
            LOG.error("invalid job file %s: %s", args.config, exc)
            sys.exit(1)
    else:
        if args.duration <= 0:
            LOG.error("--duration must be positive")
            sys.exit(1)
        duration_ms = args.duration * 1000.0

    if stream is None:
        stream = sys.stdin
    progress = track_progress(stream, duration_ms, quiet=args.quiet)
    print(f"{progress:.3f}")
    return progress


if __name__ == "__main__":
    main()
