"""Demo transcription used when no real backend is wanted or available."""

from __future__ import annotations

from pathlib import Path

from audiosrt.core.models import Segment


def demo_segments(audio_path: Path) -> list[Segment]:
    """Return a fixed five-segment transcript mentioning the audio file name."""
    name = Path(audio_path).stem
    return [
        Segment(0.0, 3.5, f"Welcome to the transcription of the audio file {name}."),
        Segment(3.5, 7.2, "This subtitle file was generated in demo mode."),
        Segment(7.2, 11.8, "In real use, the speech recognition results would appear here."),
        Segment(11.8, 15.3, "Install whisper.cpp or Python whisper to get real transcriptions."),
        Segment(15.3, 18.0, "Thank you for using audio-to-srt!"),
    ]
