"""RU: Загрузка описания задачи экспорта из YAML.

EN: Load an export job description from YAML.

Example job file::

    source: input/clip.mp4
    video: {width: 1920, height: 1080}
    trim: {start: 2.0, duration: 5.0}
    crop: {min: [0.25, 0.25], max: [0.75, 0.75]}
    rotation: 90
    export:
      kind: video
      format: mp4
      scale: 1.0
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Any, Final

import yaml

from video_export_forge.models import (
    COVER_FORMATS,
    FAR_CORNER,
    ORIGIN,
    VIDEO_FORMATS,
    EditState,
    GifExportFormat,
    NormalizedPoint,
    VideoExportFormat,
)
from video_export_forge.stages.video_stage import (
    CoverExportConfig,
    ExportConfig,
    VideoExportConfig,
)

EXPORT_KINDS = ("video", "cover")


@dataclass(frozen=True)
class ExportJob:
    """RU: Снимок состояния и конфигурация одной задачи экспорта.

    EN: State snapshot and export config for a single job.
    """

    state: EditState
    config: ExportConfig
    quiet: bool = False
    verbose: bool = False


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, dict):
        message = f"'{key}' must be a mapping"
        raise ValueError(message)
    return value


def _point(value: object, key: str, default: NormalizedPoint) -> NormalizedPoint:
    if value is None:
        return default
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        message = f"'crop.{key}' must be a [x, y] pair"
        raise ValueError(message)
    try:
        x, y = (float(v) for v in value)
    except (TypeError, ValueError) as exc:
        message = f"'crop.{key}' must contain numbers"
        raise ValueError(message) from exc
    return NormalizedPoint(x, y)


def _seconds(value: object, key: str, default: float | None = None) -> timedelta:
    if value is None:
        if default is None:
            message = f"'{key}' is required"
            raise ValueError(message)
        value = default
    try:
        return timedelta(seconds=float(value))  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        message = f"'{key}' must be a number of seconds"
        raise ValueError(message) from exc


_MISSING: Final = object()


def _number(
    section: dict[str, Any],
    key: str,
    path: str,
    default: object = _MISSING,
    *,
    cast: Callable[[Any], Any] = float,
) -> Any:
    """Convert ``section[key]``; a missing key falls back to ``default``, null does not."""
    if key not in section:
        if default is _MISSING:
            message = f"'{path}' is required"
            raise ValueError(message)
        return default
    value = section[key]
    try:
        if value is None or isinstance(value, bool):
            raise TypeError(value)
        return cast(value)
    except (TypeError, ValueError) as exc:
        message = f"'{path}' must be a number, got {value!r}"
        raise ValueError(message) from exc


def _video_format(name: str, export: dict[str, Any]) -> VideoExportFormat:
    fmt = VIDEO_FORMATS.get(name)
    if fmt is None:
        message = f"Unknown video format '{name}' (expected one of {sorted(VIDEO_FORMATS)})"
        raise ValueError(message)
    if isinstance(fmt, GifExportFormat) and "fps" in export:
        fmt = GifExportFormat(fps=_number(export, "fps", "export.fps", cast=int))
    return fmt


def _build_config(
    export: dict[str, Any], kind: str, *, kind_overridden: bool = False,
) -> ExportConfig:
    common: dict[str, Any] = {
        "name": export.get("name"),
        "output_directory": export.get("output_dir"),
        "scale": _number(export, "scale", "export.scale", 1.0),
        "filters_enabled": bool(export.get("filters", True)),
    }
    formats, other_formats = (
        (VIDEO_FORMATS, COVER_FORMATS) if kind == "video" else (COVER_FORMATS, VIDEO_FORMATS)
    )
    default_fmt = "mp4" if kind == "video" else "jpg"
    fmt_name = str(export.get("format") or default_fmt).lower()
    if kind_overridden and fmt_name not in formats and fmt_name in other_formats:
        # The file describes the other kind; fall back to this kind's format.
        fmt_name = default_fmt

    if kind == "video":
        return VideoExportConfig(format=_video_format(fmt_name, export), **common)

    cover_fmt = COVER_FORMATS.get(fmt_name)
    if cover_fmt is None:
        message = f"Unknown cover format '{fmt_name}' (expected one of {sorted(COVER_FORMATS)})"
        raise ValueError(message)
    return CoverExportConfig(
        format=cover_fmt,
        quality=_number(export, "quality", "export.quality", 100, cast=int),
        **common,
    )


def parse_job(data: dict[str, Any], *, kind: str | None = None) -> ExportJob:
    """RU: Строит ``ExportJob`` из словаря (обычно из YAML).

    EN: Build an ``ExportJob`` from a mapping, usually parsed YAML.

    Args:
        data: Job mapping.
        kind: Overrides ``export.kind`` (``video`` or ``cover``).

    Raises:
        ValueError: A key is missing or malformed.
    """
    if not isinstance(data, dict):
        message = "Job file must contain a mapping"
        raise ValueError(message)

    source = data.get("source")
    if not source:
        message = "'source' is required"
        raise ValueError(message)

    video = _section(data, "video")
    trim = _section(data, "trim")
    crop = _section(data, "crop")
    export = _section(data, "export")
    cli = _section(data, "cli")

    job_kind = str(kind or export.get("kind", "video")).lower()
    if job_kind not in EXPORT_KINDS:
        message = f"'export.kind' must be one of {EXPORT_KINDS}, got '{job_kind}'"
        raise ValueError(message)

    state = EditState(
        source_path=str(source),
        video_width=_number(video, "width", "video.width"),
        video_height=_number(video, "height", "video.height"),
        trim_start=_seconds(trim.get("start"), "trim.start", default=0.0),
        trimmed_duration=_seconds(trim.get("duration"), "trim.duration"),
        min_crop=_point(crop.get("min"), "min", ORIGIN),
        max_crop=_point(crop.get("max"), "max", FAR_CORNER),
        rotation=_number(data, "rotation", "rotation", 0, cast=int),
    )

    return ExportJob(
        state=state,
        config=_build_config(export, job_kind, kind_overridden=kind is not None),
        quiet=bool(cli.get("quiet", False)),
        verbose=bool(cli.get("verbose", False)),
    )


def load_job(path: Path, *, kind: str | None = None) -> ExportJob:
    """Read and parse a YAML job file."""
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return parse_job(data, kind=kind)
