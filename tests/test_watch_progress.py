"""Tests for the watch_progress CLI script."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from video_export_forge.scripts.watch_progress import main, track_progress

STATS = (
    "Input #0, mov,mp4,m4a,3gp,3g2,mj2, from 'clip.mp4':\n"
    "frame=   10 fps=0.0 q=28.0 size=       0kB time=00:00:01.00 bitrate=N/A speed=2x\r"
    "frame=   30 fps= 30 q=28.0 size=     256kB time=00:00:02.50 bitrate=838.9kbits/s\r"
    "frame=   40 fps= 30 q=28.0 Lsize=    300kB time=00:00:07.00 bitrate=351.1kbits/s\n"
)


def test_track_progress_returns_last_clamped_value() -> None:
    lines = io.StringIO(STATS.replace("time=00:00:07.00", "time=00:00:04.00"))
    assert track_progress(lines, 5000.0, quiet=True) == pytest.approx(0.8)


def test_track_progress_clamps_overshoot() -> None:
    assert track_progress(io.StringIO(STATS), 5000.0, quiet=True) == pytest.approx(1.0)


def test_track_progress_without_samples() -> None:
    assert track_progress(io.StringIO("no stats here\n"), 5000.0, quiet=True) == 0.0


def test_main_with_duration(capsys: pytest.CaptureFixture[str]) -> None:
    stream = io.StringIO("frame=1 time=00:00:02.50 bitrate=N/A\n")
    progress = main(["--duration", "10", "--quiet"], stream=stream)
    assert progress == pytest.approx(0.25)
    assert capsys.readouterr().out.strip() == "0.250"


def test_main_reads_duration_from_job(tmp_path: Path) -> None:
    job_path = tmp_path / "job.yaml"
    job_path.write_text(
        "source: clip.mp4\nvideo: {width: 640, height: 360}\ntrim: {start: 10, duration: 4}\n",
        encoding="utf-8",
    )
    stream = io.StringIO("time=00:00:01.00\n")
    assert main(["--config", str(job_path), "--quiet"], stream=stream) == pytest.approx(0.25)


def test_main_rejects_non_positive_duration() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--duration", "0", "--quiet"], stream=io.StringIO(""))
    assert excinfo.value.code == 1
