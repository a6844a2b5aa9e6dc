"""Probes for locally available transcription backends.

Each probe returns the path or command to invoke, or None when the
backend is not usable. Probes never raise.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from audiosrt.core.config import AppConfig


def find_whisper_cpp(config: AppConfig) -> str | None:
    """Find a whisper.cpp binary: local build outputs first, then PATH."""
    for candidate in config.whisper_cpp.local_paths:
        if Path(candidate).is_file():
            return candidate

    for candidate in config.whisper_cpp.system_paths:
        resolved = shutil.which(candidate)
        if resolved is not None:
            return resolved
    return None


def find_system_whisper(config: AppConfig) -> str | None:
    """Find the openai-whisper CLI on PATH."""
    return shutil.which(config.system_whisper.command)


def find_python_whisper(config: AppConfig) -> str | None:
    """Find an interpreter on PATH that can `import whisper`."""
    for name in config.python_whisper.interpreters:
        interpreter = shutil.which(name)
        if interpreter is None:
            continue
        if _can_import_whisper(interpreter, config.python_whisper.probe_timeout):
            return interpreter
    return None


def _can_import_whisper(interpreter: str, timeout: float) -> bool:
    try:
        result = subprocess.run(
            [interpreter, "-c", "import whisper"],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            timeout=timeout,
        )
    except (OSError, subprocess.TimeoutExpired):
        return False
    return result.returncode == 0
