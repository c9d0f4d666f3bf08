"""Exceptions raised while synthesizing export plans."""

from __future__ import annotations


class ExportSynthesisError(Exception):
    """Base class for plan synthesis failures."""


class OutputPathError(ExportSynthesisError):
    """The output directory or path could not be resolved."""


class CoverGenerationError(ExportSynthesisError):
    """The intermediate cover frame could not be prepared."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Error while generating cover using FFmpeg: {reason}")
        self.reason = reason
