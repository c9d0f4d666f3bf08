"""RU: Построение цепочки видеофильтров FFmpeg (crop, scale, transpose, fps).

EN: Build the FFmpeg video filter chain (crop, scale, transpose, fps).

Each fragment builder returns an empty string when its transform is a no-op;
empties never reach the final chain.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Final

from video_export_forge.models import (
    GIF,
    EditState,
    ExportFormat,
    GifExportFormat,
    VideoExportFormat,
)
from video_export_forge.utils.ffmpeg_args import format_number, quote

LOG = logging.getLogger(__name__)

CROP_TOLERANCE: Final = 1e-6
TRANSPOSE_FRAGMENT: Final = "transpose=2"
QUARTER_TURN: Final = 90
MAX_QUARTER_TURNS: Final = 4


def _is_full_frame(state: EditState) -> bool:
    lo, hi = state.min_crop, state.max_crop
    return (
        lo.x <= CROP_TOLERANCE
        and lo.y <= CROP_TOLERANCE
        and hi.x >= 1.0 - CROP_TOLERANCE
        and hi.y >= 1.0 - CROP_TOLERANCE
    )


def crop_fragment(state: EditState) -> str:
    """RU: Переводит нормализованный прямоугольник кропа в пиксели.

    EN: Convert the normalized crop rectangle into pixel space.

    The result is in the format ``crop=w:h:x:y``, or empty when the crop
    spans the whole frame.
    """
    if _is_full_frame(state):
        return ""

    lo, hi = state.min_crop, state.max_crop
    width = (hi.x - lo.x) * state.video_width
    height = (hi.y - lo.y) * state.video_height
    x = lo.x * state.video_width
    y = lo.y * state.video_height
    dims = ":".join(format_number(v) for v in (width, height, x, y))
    return f"crop={dims}"


def rotation_fragment(state: EditState) -> str:
    """Emit one ``transpose=2`` per quarter turn, comma-joined."""
    count = state.rotation / QUARTER_TURN
    if count <= 0 or count >= MAX_QUARTER_TURNS:
        return ""

    if state.rotation % QUARTER_TURN:
        LOG.debug("Rotation %s is not a multiple of 90; truncating", state.rotation)
    return ",".join([TRANSPOSE_FRAGMENT] * int(count))


def scale_fragment(scale: float) -> str:
    """Resize relative to the input size (``iw``/``ih``); empty at ``1.0``.

    Produces ``scale=iw*<s>:ih*<s>``.
    """
    if scale == 1.0:
        return ""
    factor = format_number(scale)
    return f"scale=iw*{factor}:ih*{factor}"


def fps_fragment(fmt: ExportFormat | None) -> str:
    """Frame-rate filter (``fps=N``) for animated formats; empty otherwise."""
    if not isinstance(fmt, VideoExportFormat) or not fmt.is_animated:
        return ""
    fps = fmt.fps if isinstance(fmt, GifExportFormat) else GIF.fps
    return f"fps={fps}"


def assemble_filters(
    fragments: Iterable[str], fmt: ExportFormat | None = None,
) -> list[str]:
    """RU: Собирает итоговый список фильтров без пустых элементов.

    EN: Drop empty fragments and append the frame-rate filter for animated formats.

    Callers pass fragments in crop, scale, rotation order; that order is kept.
    """
    filters = [f for f in fragments if f]
    fps = fps_fragment(fmt)
    if fps:
        filters.append(fps)
    return filters


def filter_chain_argument(filters: Iterable[str]) -> str:
    """Return the ``-vf`` (``-filter:v`` alias) argument, or empty when no filter is active."""
    active = [f for f in filters if f]
    if not active:
        return ""
    return f"-vf {quote(','.join(active))}"
