"""RU: Перевод времени, сообщаемого FFmpeg, в долю выполнения экспорта.

EN: Map elapsed time reported by FFmpeg to an export progress fraction.
"""

from __future__ import annotations

import re
from typing import Final

from video_export_forge.models import EditState

# `time=00:01:02.50` in regular stats, `time=62.5` in some builds.
_STATS_TIME_RE: Final = re.compile(
    r"time=\s*(?:(?P<h>\d+):(?P<m>\d{1,2}):(?P<s>\d+(?:\.\d+)?)|(?P<secs>\d+(?:\.\d+)?))",
)


def export_progress(elapsed_ms: float, trimmed_duration_ms: float) -> float:
    """Return ``elapsed / duration`` clamped to ``[0.0, 1.0]``.

    Can be used from an FFmpeg statistics callback, for example::

        progress = export_progress(stats.time, state.trimmed_duration_ms)

    ``trimmed_duration_ms`` must be positive; ``EditState`` guarantees it.
    """
    value = float(elapsed_ms) / float(trimmed_duration_ms)
    return max(0.0, min(1.0, value))


def state_progress(state: EditState, elapsed_ms: float) -> float:
    return export_progress(elapsed_ms, state.trimmed_duration_ms)


def parse_stats_time(line: str) -> float | None:
    """RU: Извлекает поле ``time=`` из строки статистики FFmpeg (в миллисекундах).

    EN: Extract the ``time=`` field of an FFmpeg stats line, in milliseconds.

    Returns None when the line carries no usable time (e.g. ``time=N/A``).
    """
    if not line:
        return None
    match = _STATS_TIME_RE.search(line)
    if match is None:
        return None
    if match.group("secs") is not None:
        seconds = float(match.group("secs"))
    else:
        seconds = (
            int(match.group("h")) * 3600
            + int(match.group("m")) * 60
            + float(match.group("s"))
        )
    return seconds * 1000.0
