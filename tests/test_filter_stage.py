"""Tests for filter chain construction."""

from __future__ import annotations

from datetime import timedelta

import pytest

from video_export_forge.models import (
    GIF,
    JPG,
    MP4,
    EditState,
    GifExportFormat,
    NormalizedPoint,
    VideoExportFormat,
)
from video_export_forge.stages.filter_stage import (
    assemble_filters,
    crop_fragment,
    filter_chain_argument,
    fps_fragment,
    rotation_fragment,
    scale_fragment,
)


def _state(**kwargs: object) -> EditState:
    base: dict[str, object] = {
        "source_path": "/videos/clip.mp4",
        "video_width": 1920,
        "video_height": 1080,
        "trimmed_duration": timedelta(seconds=5),
    }
    base.update(kwargs)
    return EditState(**base)  # type: ignore[arg-type]


def test_crop_full_frame_is_empty() -> None:
    assert crop_fragment(_state()) == ""


def test_crop_full_frame_within_tolerance_is_empty() -> None:
    state = _state(
        min_crop=NormalizedPoint(1e-9, 0.0),
        max_crop=NormalizedPoint(1.0, 1.0 - 1e-9),
    )
    assert crop_fragment(state) == ""


def test_crop_centered_quarter() -> None:
    state = _state(
        min_crop=NormalizedPoint(0.25, 0.25),
        max_crop=NormalizedPoint(0.75, 0.75),
    )
    assert crop_fragment(state) == "crop=960:540:480:270"


def test_crop_keeps_fractional_pixels() -> None:
    state = _state(
        video_width=1001,
        min_crop=NormalizedPoint(0.5, 0.0),
        max_crop=NormalizedPoint(1.0, 1.0),
    )
    assert crop_fragment(state) == "crop=500.5:1080:500.5:0"


def test_crop_single_axis_is_not_a_no_op() -> None:
    state = _state(max_crop=NormalizedPoint(1.0, 0.5))
    assert crop_fragment(state) == "crop=1920:540:0:0"


@pytest.mark.parametrize(
    ("rotation", "expected"),
    [
        (0, ""),
        (90, "transpose=2"),
        (180, "transpose=2,transpose=2"),
        (270, "transpose=2,transpose=2,transpose=2"),
        (360, ""),
        (450, ""),
        (-90, ""),
    ],
)
def test_rotation_fragment(rotation: int, expected: str) -> None:
    assert rotation_fragment(_state(rotation=rotation)) == expected


def test_rotation_non_multiple_is_truncated() -> None:
    assert rotation_fragment(_state(rotation=45)) == ""
    assert rotation_fragment(_state(rotation=135)) == "transpose=2"


def test_scale_fragment() -> None:
    assert scale_fragment(1.0) == ""
    assert scale_fragment(0.5) == "scale=iw*0.5:ih*0.5"
    assert scale_fragment(2) == "scale=iw*2:ih*2"


def test_fps_fragment_only_for_animated_formats() -> None:
    assert fps_fragment(GIF) == "fps=10"
    assert fps_fragment(GifExportFormat(fps=24)) == "fps=24"
    # A plain video format with a gif extension falls back to the default fps.
    assert fps_fragment(VideoExportFormat("gif")) == "fps=10"
    assert fps_fragment(MP4) == ""
    assert fps_fragment(JPG) == ""
    assert fps_fragment(None) == ""


def test_assemble_filters_drops_empties_and_keeps_order() -> None:
    filters = assemble_filters(["crop=1:2:3:4", "", "scale=iw*2:ih*2", "transpose=2"])
    assert filters == ["crop=1:2:3:4", "scale=iw*2:ih*2", "transpose=2"]


def test_assemble_filters_appends_fps_last_for_gif() -> None:
    filters = assemble_filters(["", "scale=iw*0.5:ih*0.5", "transpose=2"], GIF)
    assert filters == ["scale=iw*0.5:ih*0.5", "transpose=2", "fps=10"]
    assert assemble_filters([], GIF) == ["fps=10"]


def test_filter_chain_argument() -> None:
    assert filter_chain_argument([]) == ""
    assert filter_chain_argument(["", ""]) == ""
    assert (
        filter_chain_argument(["crop=960:540:480:270", "transpose=2"])
        == "-vf 'crop=960:540:480:270,transpose=2'"
    )
