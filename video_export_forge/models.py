"""RU: Модель данных экспорта: снимок состояния редактора, форматы и план запуска.

EN: Export data model: editor state snapshot, export formats and execution plan.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Final


@dataclass(frozen=True)
class NormalizedPoint:
    """Point in normalized frame space, both axes in [0, 1]."""

    x: float
    y: float


ORIGIN: Final = NormalizedPoint(0.0, 0.0)
FAR_CORNER: Final = NormalizedPoint(1.0, 1.0)


@dataclass(frozen=True)
class EditState:
    """RU: Неизменяемый снимок состояния сессии редактирования.

    EN: Immutable snapshot of the editing session, taken per export call.

    Crop corners are expected in order (``min_crop <= max_crop``); that is the
    caller's responsibility and is not checked here.
    """

    source_path: str
    video_width: float
    video_height: float
    trimmed_duration: timedelta
    trim_start: timedelta = timedelta(0)
    min_crop: NormalizedPoint = ORIGIN
    max_crop: NormalizedPoint = FAR_CORNER
    rotation: int = 0

    def __post_init__(self) -> None:
        if not self.source_path:
            message = "source_path must not be empty"
            raise ValueError(message)
        if self.video_width <= 0 or self.video_height <= 0:
            message = (
                f"video dimensions must be positive, got "
                f"{self.video_width}x{self.video_height}"
            )
            raise ValueError(message)
        if self.trimmed_duration <= timedelta(0):
            message = f"trimmed_duration must be positive, got {self.trimmed_duration}"
            raise ValueError(message)
        if self.trim_start < timedelta(0):
            message = f"trim_start must not be negative, got {self.trim_start}"
            raise ValueError(message)

    @property
    def trimmed_duration_ms(self) -> float:
        return self.trimmed_duration / timedelta(milliseconds=1)


@dataclass(frozen=True)
class ExportFormat:
    """Target container/image format, identified by its file extension."""

    extension: str


@dataclass(frozen=True)
class VideoExportFormat(ExportFormat):
    @property
    def is_animated(self) -> bool:
        return self.extension == "gif"


@dataclass(frozen=True)
class GifExportFormat(VideoExportFormat):
    """Animated GIF export; ``fps`` drives the frame-rate filter."""

    extension: str = "gif"
    fps: int = 10


@dataclass(frozen=True)
class CoverExportFormat(ExportFormat):
    pass


MP4: Final = VideoExportFormat("mp4")
MOV: Final = VideoExportFormat("mov")
AVI: Final = VideoExportFormat("avi")
GIF: Final = GifExportFormat()

JPG: Final = CoverExportFormat("jpg")
PNG: Final = CoverExportFormat("png")
WEBP: Final = CoverExportFormat("webp")

VIDEO_FORMATS: Final[dict[str, VideoExportFormat]] = {
    f.extension: f for f in (MP4, MOV, AVI, GIF)
}
COVER_FORMATS: Final[dict[str, CoverExportFormat]] = {
    f.extension: f for f in (JPG, PNG, WEBP)
}


@dataclass(frozen=True)
class ExecutionPlan:
    """RU: Готовая команда FFmpeg и путь к файлу, который она создаст.

    EN: A complete FFmpeg argument string and the file it will produce.
    """

    command: str
    output_path: str
