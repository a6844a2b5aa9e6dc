"""Conversion between second offsets and SRT timestamps (HH:MM:SS,mmm)."""

from __future__ import annotations

import math
import re

_CODE_RE = re.compile(r"^(\d{2,}):(\d{2}):(\d{2}),(\d{3})$")


def seconds_to_code(seconds: float) -> str:
    """Format a non-negative second offset as an SRT timestamp.

    Hours are not wrapped: 100 hours renders as ``100:00:00,000``.

    Raises:
        ValueError: If seconds is negative or not finite.
    """
    if not math.isfinite(seconds) or seconds < 0:
        raise ValueError(f"Timestamp must be a non-negative finite number, got {seconds!r}")

    whole = int(seconds)
    millis = round((seconds - whole) * 1000)
    if millis >= 1000:  # remainder rounded up to a full second
        whole += 1
        millis -= 1000

    hours = whole // 3600
    minutes = (whole % 3600) // 60
    secs = whole % 60
    return f"{hours:02d}:{minutes:02d}:{secs:02d},{millis:03d}"


def code_to_seconds(hours: int, minutes: int, seconds: int, millis: int) -> float:
    """Convert timestamp fields back to a second offset."""
    return hours * 3600 + minutes * 60 + seconds + millis / 1000.0


def parse_code(code: str) -> tuple[int, int, int, int]:
    """Split an SRT timestamp into (hours, minutes, seconds, milliseconds).

    Raises:
        ValueError: If the string is not a valid timestamp.
    """
    match = _CODE_RE.match(code.strip())
    if match is None:
        raise ValueError(f"Invalid SRT timestamp: {code!r}")
    hours, minutes, seconds, millis = (int(g) for g in match.groups())
    return hours, minutes, seconds, millis
