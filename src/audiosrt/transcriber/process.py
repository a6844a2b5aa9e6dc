"""Running backend processes and classifying their failures."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass

from audiosrt.core.errors import (
    CertificateVerificationFailed,
    ProcessExecutionFailed,
    ProcessTimedOut,
)

# Substrings printed by Python's ssl module when a model download fails
# certificate verification. Matching third-party output is a heuristic:
# a change in the backend's error text silently disables it.
_CERTIFICATE_SIGNATURES = ("CERTIFICATE_VERIFY_FAILED", "certificate verify failed")

_CERTIFICATE_HELP = (
    "Possible solutions:\n"
    "1. Run in demo mode with --demo\n"
    "2. Download the Whisper model manually\n"
    "3. Configure a network proxy (HTTPS_PROXY)"
)


@dataclass
class CommandResult:
    """Output of a successful backend process."""

    stdout: str
    stderr: str


def run_command(
    cmd: list[str],
    name: str,
    timeout: float | None = None,
    merge_stderr: bool = True,
) -> CommandResult:
    """Run a backend command and wait for it to exit.

    Args:
        cmd: Command and arguments.
        name: Backend name used in error messages.
        timeout: Seconds to wait before killing the process, or None to wait forever.
        merge_stderr: Capture stderr together with stdout. When False, stderr
            is kept separately so stdout can carry a machine-readable payload.

    Raises:
        ProcessTimedOut: If the deadline expires.
        CertificateVerificationFailed: If the failure output shows a TLS error.
        ProcessExecutionFailed: If the process cannot start or exits non-zero.
    """
    try:
        result = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT if merge_stderr else subprocess.PIPE,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        output = _decode(e.output)
        raise ProcessTimedOut(
            f"{name} did not finish within {timeout:g} seconds", output=output
        ) from e
    except OSError as e:
        raise ProcessExecutionFailed(f"Could not start {name}: {e}") from e

    stdout = _decode(result.stdout)
    stderr = _decode(result.stderr)
    if result.returncode != 0:
        raise classify_failure(name, result.returncode, "\n".join(p for p in (stdout, stderr) if p))
    return CommandResult(stdout=stdout, stderr=stderr)


def classify_failure(name: str, returncode: int, output: str) -> ProcessExecutionFailed:
    """Build the error for a failed backend run from its exit status and output."""
    if any(sig in output for sig in _CERTIFICATE_SIGNATURES):
        return CertificateVerificationFailed(
            f"{name} could not download its model (SSL certificate verification failed).\n"
            f"{_CERTIFICATE_HELP}\n\nExit status: {returncode}",
            returncode=returncode,
            output=output,
        )
    return ProcessExecutionFailed(
        f"{name} failed with exit status {returncode}\nOutput: {output.strip()}",
        returncode=returncode,
        output=output,
    )


def _decode(data: bytes | str | None) -> str:
    if data is None:
        return ""
    if isinstance(data, str):
        return data
    return data.decode(errors="replace")
