"""RU: Синтез команд FFmpeg для экспорта отредактированного видео.

EN: FFmpeg command synthesis for exporting edited video.
"""

from __future__ import annotations

from video_export_forge.errors import (
    CoverGenerationError,
    ExportSynthesisError,
    OutputPathError,
)
from video_export_forge.models import EditState, ExecutionPlan, NormalizedPoint
from video_export_forge.stages.progress_stage import export_progress
from video_export_forge.stages.video_stage import (
    CoverExportConfig,
    VideoExportConfig,
    build_cover_plan,
    build_execution_plan,
    build_video_plan,
)

__version__ = "0.1.0"

__all__ = [
    "CoverExportConfig",
    "CoverGenerationError",
    "EditState",
    "ExecutionPlan",
    "ExportSynthesisError",
    "NormalizedPoint",
    "OutputPathError",
    "VideoExportConfig",
    "__version__",
    "build_cover_plan",
    "build_execution_plan",
    "build_video_plan",
    "export_progress",
]
