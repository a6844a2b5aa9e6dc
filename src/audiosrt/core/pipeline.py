"""Pipeline orchestrator — locate a backend, transcribe, write subtitles."""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape

from audiosrt.core.config import AppConfig
from audiosrt.core.errors import InputNotFound, NoBackendAvailable
from audiosrt.core.models import RunOptions, Segment
from audiosrt.subtitles.writer import save_subtitles
from audiosrt.transcriber import backends
from audiosrt.transcriber.demo import demo_segments
from audiosrt.utils.console import console


def transcribe_audio(audio_path: Path, config: AppConfig, demo: bool = False) -> list[Segment]:
    """Produce segments for an audio file.

    Uses the demo transcript when requested; otherwise the first available
    backend in priority order.

    Raises:
        NoBackendAvailable: If no backend is found and demo fallback is off.
    """
    if demo:
        console.print(
            f"[yellow]Demo mode:[/yellow] generating a sample transcript for "
            f"{escape(str(audio_path))}"
        )
        return demo_segments(audio_path)

    descriptor = backends.locate_backend(config)
    if descriptor is None:
        if config.demo_fallback:
            console.print("[yellow]No Whisper backend found, falling back to demo mode.[/yellow]")
            return demo_segments(audio_path)
        raise NoBackendAvailable(
            "No usable Whisper backend found. Install whisper.cpp or the Python "
            "whisper library, or run with --demo."
        )

    console.print(f"[dim]Using backend {descriptor.kind.value}: {escape(descriptor.path)}[/dim]")
    return backends.transcribe(descriptor, audio_path, config)


def run(options: RunOptions, config: AppConfig) -> list[Segment]:
    """Run the full conversion for one audio file.

    Args:
        options: Input/output paths, demo flag and output format.
        config: Application config.

    Returns:
        The segments that were written.

    Raises:
        AudioSrtError: Any failure along the way; nothing is retried.
    """
    input_path = Path(options.input_path)
    if not input_path.exists():
        raise InputNotFound(f"Input file not found: {input_path}")

    console.print(f"[bold]Processing audio file:[/bold] {escape(str(input_path))}")
    segments = transcribe_audio(input_path, config, demo=options.demo)
    console.print(f"[green]Transcription complete:[/green] {len(segments)} segments")

    output_path = save_subtitles(segments, options.output_path, fmt=options.fmt)
    console.print(f"[green]Saved:[/green] {escape(str(output_path))}")
    return segments
