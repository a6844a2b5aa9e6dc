"""Transcription via the `whisper` command installed on the system."""

from __future__ import annotations

import tempfile
from pathlib import Path

from audiosrt.core.config import AppConfig
from audiosrt.core.models import Segment
from audiosrt.subtitles.parser import parse_srt_file
from audiosrt.transcriber.process import run_command
from audiosrt.utils.console import console


def build_command(
    executable: str, audio_path: Path, output_dir: Path, config: AppConfig
) -> list[str]:
    cmd = [
        executable,
        "--output_format",
        "srt",
        "--output_dir",
        str(output_dir),
    ]
    if config.system_whisper.model:
        cmd.extend(["--model", config.system_whisper.model])
    if config.language:
        cmd.extend(["--language", config.language])
    cmd.append(str(audio_path))
    return cmd


def transcribe(audio_path: Path, executable: str, config: AppConfig) -> list[Segment]:
    """Transcribe audio with the whisper CLI.

    The CLI names its output after the audio file: <stem>.srt in the
    output directory.
    """
    audio_path = Path(audio_path)

    with tempfile.TemporaryDirectory(prefix="whisper_output") as tmp:
        output_dir = Path(tmp)
        cmd = build_command(executable, audio_path, output_dir, config)

        console.print(f"[bold]Transcribing with whisper CLI:[/bold] {executable}")
        run_command(cmd, "whisper", timeout=config.timeout)

        return parse_srt_file(output_dir / f"{audio_path.stem}.srt")
