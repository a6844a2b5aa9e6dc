"""Configuration system for audio-to-srt.

Layered config loading (lowest to highest priority):
1. Built-in defaults below
2. ~/.config/audiosrt/config.toml (user-level)
3. ./audiosrt.toml (project-level)
4. Environment variables (AUDIOSRT_WHISPER_CPP__MODEL_PATH, etc.)
5. CLI flags
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

_USER_CONFIG = Path.home() / ".config" / "audiosrt" / "config.toml"
_PROJECT_CONFIG = Path("audiosrt.toml")


class WhisperCppConfig(BaseModel):
    # Checked by file existence, relative to the working directory
    local_paths: list[str] = [
        "./whisper.cpp/build/bin/whisper-cli",
        "./whisper.cpp/build/bin/main",
        "./whisper.cpp/main",
    ]
    # Resolved through PATH (absolute paths are checked for executability)
    system_paths: list[str] = [
        "whisper.cpp",
        "whisper-cli",
        "/usr/local/bin/whisper.cpp",
        "/opt/homebrew/bin/whisper.cpp",
    ]
    model_path: Path = Path("./whisper.cpp/models/ggml-base.bin")


class SystemWhisperConfig(BaseModel):
    command: str = "whisper"
    model: str | None = None  # None lets the CLI pick its own default


class PythonWhisperConfig(BaseModel):
    interpreters: list[str] = ["python3", "python"]
    model: str = "base"
    probe_timeout: float = 30.0  # seconds allowed for `import whisper`


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="AUDIOSRT_",
        env_nested_delimiter="__",
    )

    whisper_cpp: WhisperCppConfig = WhisperCppConfig()
    system_whisper: SystemWhisperConfig = SystemWhisperConfig()
    python_whisper: PythonWhisperConfig = PythonWhisperConfig()
    language: str | None = None
    timeout: float | None = None  # deadline for backend processes; None waits forever
    demo_fallback: bool = False  # use demo output when no backend is found

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # First source wins: CLI overrides, then env vars, then TOML files
        return init_settings, env_settings, _TomlFilesSource(settings_cls)


class _TomlFilesSource(PydanticBaseSettingsSource):
    """Settings source merging the user-level and project-level TOML files."""

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        # Unused: __call__ returns the merged files as a whole
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        data: dict = {}
        for path in (_USER_CONFIG, _PROJECT_CONFIG):
            data = _deep_merge(data, _load_toml(path))
        return data


def _load_toml(path: Path) -> dict:
    """Load a TOML file if it exists, return empty dict otherwise."""
    if path.is_file():
        with open(path, "rb") as f:
            return tomllib.load(f)
    return {}


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base."""
    merged = base.copy()
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(**cli_overrides: object) -> AppConfig:
    """Load configuration from all layers and merge.

    Args:
        **cli_overrides: Direct overrides from CLI flags. Keys can be
            dot-separated (e.g. python_whisper.model="small").
    """
    overrides: dict = {}
    for key, value in cli_overrides.items():
        if value is None:
            continue
        parts = key.split(".")
        target = overrides
        for part in parts[:-1]:
            target = target.setdefault(part, {})
        target[parts[-1]] = value

    return AppConfig(**overrides)
