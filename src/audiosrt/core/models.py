"""Shared data models for audio-to-srt."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from audiosrt.subtitles.timecode import seconds_to_code


@dataclass(frozen=True)
class Segment:
    """A recognized span of speech."""

    start: float  # seconds
    end: float  # seconds
    text: str

    def __post_init__(self) -> None:
        if not (math.isfinite(self.start) and math.isfinite(self.end)):
            raise ValueError(f"Segment times must be finite: {self.start!r}, {self.end!r}")
        if self.start < 0:
            raise ValueError(f"Segment start must be non-negative, got {self.start}")
        if self.end < self.start:
            raise ValueError(f"Segment end ({self.end}) is before start ({self.start})")
        object.__setattr__(self, "text", self.text.strip())


@dataclass(frozen=True)
class SubtitleEntry:
    """One numbered SRT block, derived from a Segment at write time."""

    index: int
    start_code: str
    end_code: str
    text: str

    @classmethod
    def from_segment(cls, index: int, segment: Segment) -> SubtitleEntry:
        return cls(
            index=index,
            start_code=seconds_to_code(segment.start),
            end_code=seconds_to_code(segment.end),
            text=segment.text.strip(),
        )

    def render(self) -> str:
        """Render as index, time range, text, and a terminating blank line."""
        return f"{self.index}\n{self.start_code} --> {self.end_code}\n{self.text}\n\n"


def to_entries(segments: list[Segment]) -> list[SubtitleEntry]:
    """Number segments sequentially from 1, in order."""
    return [SubtitleEntry.from_segment(i, seg) for i, seg in enumerate(segments, 1)]


class BackendKind(str, Enum):
    """Kinds of external transcription backends, in no particular order."""

    WHISPER_CPP = "whisper.cpp"
    SYSTEM_WHISPER = "whisper"
    PYTHON_WHISPER = "python-whisper"


@dataclass(frozen=True)
class BackendDescriptor:
    """A discovered backend: its kind and the resolved executable/interpreter."""

    kind: BackendKind
    path: str


@dataclass(frozen=True)
class RunOptions:
    """Per-invocation options handed from the CLI to the driver."""

    input_path: Path
    output_path: Path
    demo: bool = False
    fmt: str = "srt"
