"""RU: Конфигурации экспорта и сборка планов запуска FFmpeg (видео и обложка).

Из снимка состояния редактора и конфигурации экспорта строится
``ExecutionPlan``: строка аргументов FFmpeg и путь к итоговому файлу.
Сам FFmpeg здесь не запускается.

EN: Export configs and FFmpeg execution plan builders (video and cover).

An ``ExecutionPlan`` (FFmpeg argument string plus output path) is built from
an editor state snapshot and an export config. FFmpeg itself is not run here.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from video_export_forge.errors import CoverGenerationError, OutputPathError
from video_export_forge.models import (
    JPG,
    MP4,
    CoverExportFormat,
    EditState,
    ExecutionPlan,
    ExportFormat,
    VideoExportFormat,
)
from video_export_forge.stages.filter_stage import (
    assemble_filters,
    crop_fragment,
    filter_chain_argument,
    rotation_fragment,
    scale_fragment,
)
from video_export_forge.utils.ffmpeg_args import format_duration, format_number, quote
from video_export_forge.utils.output_paths import DirectoryResolver, resolve_output_path

LOG = logging.getLogger(__name__)

# (config, quoted source path, quoted output path) -> full command
CommandBuilder = Callable[["ExportConfig", str, str], str]


@dataclass(frozen=True)
class ExportConfig:
    """RU: Общие параметры экспорта.

    EN: Options shared by every export kind.

    Attributes:
        name: Output base name; the source file name is used when None.
        output_directory: Output directory; the temporary directory when None.
        scale: ``scale=iw*scale:ih*scale`` factor. Defaults to ``1.0``.
        filters_enabled: Set to False to export without crop/scale/rotation.
    """

    name: str | None = None
    output_directory: str | None = None
    scale: float = 1.0
    filters_enabled: bool = True

    def __post_init__(self) -> None:
        if self.scale <= 0:
            message = f"scale must be positive, got {self.scale}"
            raise ValueError(message)

    @property
    def export_format(self) -> ExportFormat | None:
        return None

    def export_filters(self, state: EditState) -> list[str]:
        """Crop, scale and rotation fragments (none when filters are off), then fps."""
        fragments: list[str] = []
        if self.filters_enabled:
            fragments = [
                crop_fragment(state),
                scale_fragment(self.scale),
                rotation_fragment(state),
            ]
        return assemble_filters(fragments, self.export_format)

    def output_path(
        self,
        file_path: str,
        fmt: ExportFormat,
        *,
        resolver: DirectoryResolver | None = None,
    ) -> str:
        return resolve_output_path(
            file_path,
            fmt,
            name=self.name,
            output_directory=self.output_directory,
            resolver=resolver,
        )


@dataclass(frozen=True)
class VideoExportConfig(ExportConfig):
    format: VideoExportFormat = MP4
    command_builder: CommandBuilder | None = None

    @property
    def export_format(self) -> ExportFormat | None:
        return self.format

    @property
    def is_animated(self) -> bool:
        return self.format.is_animated


@dataclass(frozen=True)
class CoverExportConfig(ExportConfig):
    format: CoverExportFormat = JPG
    quality: int = 100
    command_builder: CommandBuilder | None = None

    @property
    def export_format(self) -> ExportFormat | None:
        return self.format

    def __post_init__(self) -> None:
        super().__post_init__()
        if not 0 <= self.quality <= 100:
            message = f"quality must be within 0..100, got {self.quality}"
            raise ValueError(message)


def _join(parts: list[str]) -> str:
    return " ".join(p for p in parts if p)


def build_video_plan(
    state: EditState,
    config: VideoExportConfig,
    *,
    resolver: DirectoryResolver | None = None,
) -> ExecutionPlan:
    """RU: Собирает команду нарезки/фильтрации/кодирования видео.

    EN: Build the trim + filter + encode command for a video export.

    Without active filters the streams are copied (``-c copy``) instead of
    re-encoded.
    """
    video_path = state.source_path
    output_path = config.output_path(video_path, config.format, resolver=resolver)
    filters = config.export_filters(state)

    if config.command_builder is not None:
        command = config.command_builder(config, quote(video_path), quote(output_path))
    else:
        command = _join(
            [
                f"-ss {format_duration(state.trim_start)}",
                f"-i {quote(video_path)}",
                f"-t {format_duration(state.trimmed_duration)}",
                filter_chain_argument(filters),
                "-loop 0" if config.is_animated else "",
                "" if filters else "-c copy",
                f"-y {quote(output_path)}",
            ],
        )

    LOG.debug("video plan: %s", command)
    return ExecutionPlan(command=command, output_path=output_path)


def build_cover_extraction_plan(
    state: EditState,
    config: CoverExportConfig,
    *,
    resolver: DirectoryResolver | None = None,
) -> ExecutionPlan:
    """Build the single-frame extraction that produces the intermediate cover file."""
    cover_path = config.output_path(state.source_path, config.format, resolver=resolver)
    factor = format_number(config.scale)
    command = _join(
        [
            f"-i {quote(state.source_path)}",
            f"-vf {quote(f'scale=iw*{factor}:ih*{factor}')}",
            f"-q:v {config.quality}",
            "-vframes 1",
            quote(cover_path),
        ],
    )
    return ExecutionPlan(command=command, output_path=cover_path)


def _generate_cover_file(
    state: EditState,
    config: CoverExportConfig,
    resolver: DirectoryResolver | None,
) -> str:
    try:
        extraction = build_cover_extraction_plan(state, config, resolver=resolver)
    except OutputPathError as exc:
        LOG.error("Error while generating cover using FFmpeg: %s", exc)
        raise CoverGenerationError(str(exc)) from exc

    if not extraction.output_path:
        reason = "no cover path was produced"
        LOG.error("Error while generating cover using FFmpeg: %s", reason)
        raise CoverGenerationError(reason)

    LOG.debug("cover extraction: %s", extraction.command)
    return extraction.output_path


def build_cover_plan(
    state: EditState,
    config: CoverExportConfig,
    *,
    resolver: DirectoryResolver | None = None,
) -> ExecutionPlan:
    """RU: Собирает команду экспорта обложки из промежуточного кадра.

    EN: Build the cover export command applied to the intermediate frame.

    Raises:
        CoverGenerationError: The intermediate cover path could not be prepared.
    """
    cover_path = _generate_cover_file(state, config, resolver)
    output_path = config.output_path(cover_path, config.format, resolver=resolver)
    filters = config.export_filters(state)

    if config.command_builder is not None:
        command = config.command_builder(config, quote(cover_path), quote(output_path))
    else:
        command = _join(
            [
                f"-i {quote(cover_path)}",
                filter_chain_argument(filters),
                f"-y {quote(output_path)}",
            ],
        )

    LOG.debug("cover plan: %s", command)
    return ExecutionPlan(command=command, output_path=output_path)


def build_execution_plan(
    state: EditState,
    config: ExportConfig,
    *,
    resolver: DirectoryResolver | None = None,
) -> ExecutionPlan:
    """Dispatch to the plan builder matching the config kind."""
    if isinstance(config, VideoExportConfig):
        return build_video_plan(state, config, resolver=resolver)
    if isinstance(config, CoverExportConfig):
        return build_cover_plan(state, config, resolver=resolver)
    message = f"Unsupported export config: {type(config).__name__}"
    raise TypeError(message)
