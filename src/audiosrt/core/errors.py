"""Error kinds raised by audio-to-srt.

Every error derives from AudioSrtError so the CLI can report it as a
single message and exit non-zero. There is no retry logic anywhere.
"""

from __future__ import annotations


class AudioSrtError(Exception):
    """Base class for all audio-to-srt failures."""


class InputNotFound(AudioSrtError, FileNotFoundError):
    """The input audio file does not exist."""


class NoBackendAvailable(AudioSrtError):
    """No transcription backend could be located."""


class ModelNotFound(AudioSrtError, FileNotFoundError):
    """The whisper.cpp model file is missing."""


class ProcessExecutionFailed(AudioSrtError):
    """An external backend process failed.

    Attributes:
        returncode: Exit status, or None if the process never ran to completion.
        output: Captured output of the process (may be empty).
    """

    def __init__(self, message: str, returncode: int | None = None, output: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.output = output


class CertificateVerificationFailed(ProcessExecutionFailed):
    """The backend failed to download its model due to TLS verification."""


class ProcessTimedOut(ProcessExecutionFailed):
    """The backend process exceeded the configured execution deadline."""


class OutputParseFailed(AudioSrtError):
    """Backend output could not be parsed into segments."""


class WriteFailed(AudioSrtError, OSError):
    """The subtitle file could not be written."""
