#!/usr/bin/env python3
"""RU: Построение плана экспорта FFmpeg по YAML-описанию задачи.

Скрипт не запускает FFmpeg: он печатает JSON с командой и путём к файлу.

EN: Build an FFmpeg export plan from a YAML job description.

The script does not run FFmpeg; it prints the command and output path as JSON.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path

from video_export_forge.errors import ExportSynthesisError
from video_export_forge.stages.video_stage import build_execution_plan
from video_export_forge.utils.job_loader import EXPORT_KINDS, load_job
from video_export_forge.utils.logging_utils import DEFAULT_LOGGER_NAME, setup_logging

LOG = logging.getLogger(f"{DEFAULT_LOGGER_NAME}.plan_export")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""

    ap = argparse.ArgumentParser(description="Build an FFmpeg export plan from a job file")
    ap.add_argument("--config", type=Path, required=True, help="Path to the job YAML")
    ap.add_argument(
        "--kind", choices=EXPORT_KINDS, help="Override export.kind from the job file",
    )
    ap.add_argument("--output-dir", help="Override the output directory")
    ap.add_argument("--quiet", action="store_true", help="Suppress non-error output")
    ap.add_argument("--verbose", action="store_true", help="Log synthesized commands")
    return ap.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for plan synthesis."""

    args = parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    if not args.config.exists():
        LOG.error("job file not found: %s", args.config)
        sys.exit(1)

    try:
        job = load_job(args.config, kind=args.kind)
    except ValueError as exc:
        LOG.error("invalid job file %s: %s", args.config, exc)
        sys.exit(1)

    setup_logging(
        verbose=bool(args.verbose or job.verbose),
        quiet=bool(args.quiet or job.quiet),
    )

    config = job.config
    if args.output_dir:
        config = dataclasses.replace(config, output_directory=args.output_dir)

    try:
        plan = build_execution_plan(job.state, config)
    except ExportSynthesisError as exc:
        LOG.error("%s", exc)
        sys.exit(2)

    LOG.info("plan ready: %s", plan.output_path)
    print(json.dumps(dataclasses.asdict(plan), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
