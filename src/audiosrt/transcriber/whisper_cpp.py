"""Transcription via a locally built whisper.cpp binary."""

from __future__ import annotations

import tempfile
from pathlib import Path

from audiosrt.core.config import AppConfig
from audiosrt.core.errors import ModelNotFound
from audiosrt.core.models import Segment
from audiosrt.subtitles.parser import parse_srt_file
from audiosrt.transcriber.process import run_command
from audiosrt.utils.console import console


def build_command(
    executable: str, audio_path: Path, output_base: Path, config: AppConfig
) -> list[str]:
    """Build the whisper.cpp argument list; output lands at <output_base>.srt."""
    cmd = [
        executable,
        "-m",
        str(config.whisper_cpp.model_path),
        "-f",
        str(audio_path),
        "-of",
        str(output_base),
        "--output-srt",
    ]
    if config.language:
        cmd.extend(["-l", config.language])
    return cmd


def transcribe(audio_path: Path, executable: str, config: AppConfig) -> list[Segment]:
    """Transcribe audio with whisper.cpp.

    Raises:
        ModelNotFound: If the configured ggml model file does not exist.
        ProcessExecutionFailed: If whisper.cpp exits non-zero.
        OutputParseFailed: If the SRT output is missing or unreadable.
    """
    model_path = Path(config.whisper_cpp.model_path)
    if not model_path.is_file():
        raise ModelNotFound(f"whisper.cpp model file not found: {model_path}")

    with tempfile.TemporaryDirectory(prefix="whisper_output") as tmp:
        output_base = Path(tmp) / "output"
        cmd = build_command(executable, audio_path, output_base, config)

        console.print(f"[bold]Transcribing with whisper.cpp:[/bold] {executable}")
        run_command(cmd, "whisper.cpp", timeout=config.timeout)

        return parse_srt_file(output_base.with_suffix(".srt"))
