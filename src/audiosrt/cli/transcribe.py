"""audio-to-srt command — transcribe an audio file to subtitles."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.markup import escape

from audiosrt import __version__
from audiosrt.core.config import load_config
from audiosrt.core.errors import AudioSrtError
from audiosrt.core.models import RunOptions
from audiosrt.core.pipeline import run
from audiosrt.subtitles.writer import SUPPORTED_FORMATS
from audiosrt.utils.console import err_console


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"audio-to-srt {__version__}")
        raise typer.Exit()


def transcribe(
    input_path: Annotated[
        Path,
        typer.Option("--input", "-t", help="Input audio file path."),
    ],
    output_path: Annotated[
        Path,
        typer.Option("--output", "-o", help="Output subtitle file path."),
    ],
    demo: Annotated[
        bool,
        typer.Option("--demo", help="Generate a sample transcript instead of running Whisper."),
    ] = False,
    fmt: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: srt, vtt, ass, txt."),
    ] = "srt",
    language: Annotated[
        Optional[str],
        typer.Option("--language", "-l", help="Spoken language code passed to the backend."),
    ] = None,
    timeout: Annotated[
        Optional[float],
        typer.Option("--timeout", help="Seconds to wait for the backend before giving up."),
    ] = None,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Convert an audio file to subtitles using a locally installed Whisper."""
    # Does not override existing env vars — shell exports take precedence
    load_dotenv(override=False)

    if fmt.lower() not in SUPPORTED_FORMATS:
        choices = ", ".join(SUPPORTED_FORMATS)
        err_console.print(
            f"[red]Unsupported format '{escape(fmt)}'.[/red] Choose one of: {choices}."
        )
        raise typer.Exit(1)

    try:
        config = load_config(language=language, timeout=timeout)
    except ValidationError as e:
        err_console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    try:
        run(
            RunOptions(input_path=input_path, output_path=output_path, demo=demo, fmt=fmt),
            config,
        )
    except AudioSrtError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
