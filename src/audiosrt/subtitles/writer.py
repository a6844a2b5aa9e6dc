"""Subtitle writers.

SRT output is written block by block from SubtitleEntry values. Other
formats (vtt, ass) go through pysubs2.
"""

from __future__ import annotations

from pathlib import Path

import pysubs2

from audiosrt.core.errors import WriteFailed
from audiosrt.core.models import Segment, to_entries

SUPPORTED_FORMATS = ("srt", "vtt", "ass", "txt")


def write_srt(segments: list[Segment], path: Path) -> Path:
    """Write segments as an SRT file, overwriting any existing file.

    Blocks are numbered from 1 in sequence order. A failure mid-write
    leaves the partial file in place.

    Raises:
        WriteFailed: If the file cannot be created or written.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            for entry in to_entries(segments):
                f.write(entry.render())
    except OSError as e:
        raise WriteFailed(f"Could not write subtitle file {path}: {e}") from e
    return path


def save_subtitles(segments: list[Segment], path: Path, fmt: str = "srt") -> Path:
    """Save segments to a subtitle file.

    Args:
        segments: Segments in playback order.
        path: Output file path.
        fmt: Format — "srt", "vtt", "ass", or "txt".

    Returns:
        The path the file was written to.

    Raises:
        ValueError: If the format is not supported.
        WriteFailed: If writing fails.
    """
    fmt = fmt.lower()
    if fmt not in SUPPORTED_FORMATS:
        choices = ", ".join(SUPPORTED_FORMATS)
        raise ValueError(f"Unsupported format '{fmt}'. Choose one of: {choices}")

    if fmt == "srt":
        return write_srt(segments, path)

    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if fmt == "txt":
            text = "\n".join(seg.text for seg in segments if seg.text)
            path.write_text(text + "\n" if text else "", encoding="utf-8")
        else:
            subs = pysubs2.SSAFile()
            for seg in segments:
                subs.events.append(
                    pysubs2.SSAEvent(
                        start=pysubs2.make_time(s=seg.start),
                        end=pysubs2.make_time(s=seg.end),
                        text=seg.text,
                    )
                )
            subs.save(str(path), format_=fmt)
    except OSError as e:
        raise WriteFailed(f"Could not write subtitle file {path}: {e}") from e
    return path
