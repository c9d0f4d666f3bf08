"""RU: Вычисление путей для файлов экспорта.

EN: Output path resolution for exported files.
"""

from __future__ import annotations

import logging
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from video_export_forge.errors import OutputPathError
from video_export_forge.models import ExportFormat

LOG = logging.getLogger(__name__)


class DirectoryResolver(Protocol):
    """Supplies the directory used when no output directory is configured."""

    def default_directory(self) -> str: ...


@dataclass(frozen=True)
class TemporaryDirectoryResolver:
    """Use the platform temporary directory."""

    def default_directory(self) -> str:
        return tempfile.gettempdir()


@dataclass(frozen=True)
class FixedDirectoryResolver:
    path: str

    def default_directory(self) -> str:
        return self.path


def epoch_millis() -> int:
    return time.time_ns() // 1_000_000


def resolve_output_path(
    file_path: str,
    fmt: ExportFormat,
    *,
    name: str | None = None,
    output_directory: str | None = None,
    resolver: DirectoryResolver | None = None,
) -> str:
    """RU: Возвращает путь вида ``<dir>/<name>_<epoch_ms>.<ext>``.

    Аргументы:
        file_path: Путь, из которого берётся имя, если ``name`` не задано.
        fmt: Формат экспорта (даёт расширение).
        name: Явное имя файла без расширения.
        output_directory: Явная директория; иначе спрашиваем ``resolver``.
        resolver: Источник директории по умолчанию (временная директория).

    EN: Return ``<dir>/<name>_<epoch_ms>.<ext>`` for an export artifact.

    Args:
        file_path: Path the base name is derived from when ``name`` is None.
        fmt: Export format providing the extension.
        name: Explicit base name without extension.
        output_directory: Explicit directory; otherwise ``resolver`` is asked.
        resolver: Default directory source (the temporary directory).

    Two calls within the same millisecond with the same name and directory
    return the same path.
    """
    directory = output_directory
    if directory is None:
        resolver = resolver or TemporaryDirectoryResolver()
        try:
            directory = resolver.default_directory()
        except OSError as exc:
            message = f"Cannot resolve default output directory: {exc}"
            raise OutputPathError(message) from exc
    if not directory:
        message = "Output directory resolved to an empty path"
        raise OutputPathError(message)

    base_name = name if name is not None else Path(file_path).stem
    path = f"{directory}/{base_name}_{epoch_millis()}.{fmt.extension}"
    LOG.debug("Resolved output path: %s", path)
    return path
