"""Parsers turning backend output into Segments.

Two output shapes are supported:
- SRT files written by whisper.cpp and the whisper CLI
- A JSON array of {start, end, text} objects printed by the Python script
"""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, TypeAdapter, ValidationError

from audiosrt.core.errors import OutputParseFailed
from audiosrt.core.models import Segment
from audiosrt.subtitles.timecode import code_to_seconds

_CODE = r"(\d{2,}):(\d{2}):(\d{2}),(\d{3})"
_RANGE_RE = re.compile(rf"{_CODE} --> {_CODE}")


def parse_srt_file(path: Path) -> list[Segment]:
    """Read segments from an SRT file.

    Each time-range line starts a segment; the line after it, stripped, is
    the text. Everything else (index numbers, blank lines) is ignored, as
    is a range line at end of file.

    Raises:
        OutputParseFailed: If the file is missing or cannot be read.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8", errors="replace") as f:
            return _parse_srt_lines(f)
    except OSError as e:
        raise OutputParseFailed(f"Could not read subtitle file {path}: {e}") from e


def parse_srt_text(text: str) -> list[Segment]:
    """Parse SRT content held in memory."""
    return _parse_srt_lines(text.splitlines())


def _parse_srt_lines(lines) -> list[Segment]:
    segments = []
    it = iter(lines)
    for line in it:
        match = _RANGE_RE.search(line.strip())
        if match is None:
            continue

        fields = [int(g) for g in match.groups()]
        start = code_to_seconds(*fields[:4])
        end = code_to_seconds(*fields[4:])

        text_line = next(it, None)
        if text_line is None:
            break
        try:
            segments.append(Segment(start=start, end=end, text=text_line.strip()))
        except ValueError:
            continue  # range with end before start
    return segments


class _SegmentPayload(BaseModel):
    start: float
    end: float
    text: str


_PAYLOAD_ADAPTER = TypeAdapter(list[_SegmentPayload])


def parse_segments_json(payload: str | bytes) -> list[Segment]:
    """Decode a JSON array of {start, end, text} objects.

    Raises:
        OutputParseFailed: If the payload is not valid JSON of that shape.
            No partial result is returned.
    """
    try:
        items = _PAYLOAD_ADAPTER.validate_json(payload)
        return [Segment(start=item.start, end=item.end, text=item.text) for item in items]
    except (ValidationError, ValueError) as e:
        raise OutputParseFailed(f"Could not decode transcription JSON: {e}") from e
