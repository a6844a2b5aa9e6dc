"""Transcription via the openai-whisper library in a separate interpreter.

The interpreter found by the locator may not be the one running this
program, so a small script is written to a temp file and executed there.
It prints the segments as a JSON array on stdout.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from audiosrt.core.config import AppConfig
from audiosrt.core.models import Segment
from audiosrt.subtitles.parser import parse_segments_json
from audiosrt.transcriber.process import run_command
from audiosrt.utils.console import console

WHISPER_SCRIPT = """\
import json
import sys

import whisper

audio_path, model_name = sys.argv[1], sys.argv[2]
language = sys.argv[3] if len(sys.argv) > 3 else None

model = whisper.load_model(model_name)
result = model.transcribe(audio_path, language=language)

segments = [
    {"start": seg["start"], "end": seg["end"], "text": seg["text"].strip()}
    for seg in result["segments"]
]
print(json.dumps(segments))
"""


def build_command(
    interpreter: str, script_path: Path, audio_path: Path, config: AppConfig
) -> list[str]:
    cmd = [interpreter, str(script_path), str(audio_path), config.python_whisper.model]
    if config.language:
        cmd.append(config.language)
    return cmd


def transcribe(audio_path: Path, interpreter: str, config: AppConfig) -> list[Segment]:
    """Transcribe audio by running the embedded whisper script.

    Raises:
        ProcessExecutionFailed: If the script exits non-zero.
        OutputParseFailed: If stdout is not a JSON array of segments.
    """
    with tempfile.TemporaryDirectory(prefix="whisper_script") as tmp:
        script_path = Path(tmp) / "whisper_script.py"
        script_path.write_text(WHISPER_SCRIPT, encoding="utf-8")
        cmd = build_command(interpreter, script_path, audio_path, config)

        console.print(
            f"[bold]Transcribing with Python whisper:[/bold] {interpreter} "
            f"(model {config.python_whisper.model})"
        )
        result = run_command(cmd, "Python whisper", timeout=config.timeout, merge_stderr=False)

    return parse_segments_json(result.stdout)
