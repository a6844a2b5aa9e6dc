"""audio-to-srt CLI entry point."""

import typer

from audiosrt.cli.transcribe import transcribe

app = typer.Typer(
    name="audio-to-srt",
    help="Convert audio files to SRT subtitles using Whisper.",
    add_completion=False,
)

app.command()(transcribe)
