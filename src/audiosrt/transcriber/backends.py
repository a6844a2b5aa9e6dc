"""Transcription backends, in discovery priority order.

Each backend pairs a locator probe with the adapter that drives it.
Local whisper.cpp builds come first, then the system whisper CLI, then
the heavier Python library.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from audiosrt.core.config import AppConfig
from audiosrt.core.models import BackendDescriptor, BackendKind, Segment
from audiosrt.transcriber import locator, python_whisper, system_whisper, whisper_cpp

Probe = Callable[[AppConfig], Optional[str]]
Adapter = Callable[[Path, str, AppConfig], list[Segment]]


@dataclass(frozen=True)
class Backend:
    kind: BackendKind
    probe: Probe
    transcribe: Adapter


BACKENDS: tuple[Backend, ...] = (
    Backend(BackendKind.WHISPER_CPP, locator.find_whisper_cpp, whisper_cpp.transcribe),
    Backend(BackendKind.SYSTEM_WHISPER, locator.find_system_whisper, system_whisper.transcribe),
    Backend(BackendKind.PYTHON_WHISPER, locator.find_python_whisper, python_whisper.transcribe),
)


def locate_backend(config: AppConfig) -> BackendDescriptor | None:
    """Return the first available backend, or None if none is installed."""
    for backend in BACKENDS:
        path = backend.probe(config)
        if path is not None:
            return BackendDescriptor(kind=backend.kind, path=path)
    return None


def get_backend(kind: BackendKind) -> Backend:
    for backend in BACKENDS:
        if backend.kind == kind:
            return backend
    raise KeyError(kind)


def transcribe(descriptor: BackendDescriptor, audio_path: Path, config: AppConfig) -> list[Segment]:
    """Run the adapter matching a located backend."""
    return get_backend(descriptor.kind).transcribe(audio_path, descriptor.path, config)
