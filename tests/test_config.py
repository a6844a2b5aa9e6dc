"""Tests for configuration system."""

from pathlib import Path

import pytest

from audiosrt.core.config import _deep_merge, load_config


@pytest.fixture
def toml_files(tmp_path: Path, monkeypatch):
    user = tmp_path / "user.toml"
    project = tmp_path / "project.toml"
    monkeypatch.setattr("audiosrt.core.config._USER_CONFIG", user)
    monkeypatch.setattr("audiosrt.core.config._PROJECT_CONFIG", project)
    return user, project


def test_defaults(toml_files):
    config = load_config()
    assert config.whisper_cpp.model_path == Path("./whisper.cpp/models/ggml-base.bin")
    assert config.whisper_cpp.local_paths[0] == "./whisper.cpp/build/bin/whisper-cli"
    assert config.system_whisper.command == "whisper"
    assert config.python_whisper.interpreters == ["python3", "python"]
    assert config.python_whisper.model == "base"
    assert config.timeout is None
    assert config.demo_fallback is False


def test_cli_overrides(toml_files):
    config = load_config(**{"python_whisper.model": "small", "language": "fr", "timeout": 60.0})
    assert config.python_whisper.model == "small"
    assert config.language == "fr"
    assert config.timeout == 60.0


def test_cli_override_none_ignored(toml_files):
    overridden = load_config(language=None, timeout=None)
    assert overridden.language is None
    assert overridden.timeout is None


def test_project_toml_overrides_user_toml(toml_files):
    user, project = toml_files
    user.write_text('language = "de"\n[python_whisper]\nmodel = "tiny"\nprobe_timeout = 5\n')
    project.write_text('[python_whisper]\nmodel = "medium"\n')
    config = load_config()
    assert config.language == "de"
    assert config.python_whisper.model == "medium"
    assert config.python_whisper.probe_timeout == 5.0


def test_env_overrides_toml(toml_files, monkeypatch):
    _, project = toml_files
    project.write_text('timeout = 10\n[system_whisper]\ncommand = "whisper-a"\n')
    monkeypatch.setenv("AUDIOSRT_TIMEOUT", "30")
    monkeypatch.setenv("AUDIOSRT_SYSTEM_WHISPER__COMMAND", "whisper-b")
    config = load_config()
    assert config.timeout == 30.0
    assert config.system_whisper.command == "whisper-b"


def test_cli_overrides_env(toml_files, monkeypatch):
    monkeypatch.setenv("AUDIOSRT_LANGUAGE", "es")
    assert load_config(language="pt").language == "pt"


def test_deep_merge():
    base = {"a": {"b": 1, "c": 2}, "d": 3}
    override = {"a": {"b": 10, "e": 5}, "f": 6}
    result = _deep_merge(base, override)
    assert result == {"a": {"b": 10, "c": 2, "e": 5}, "d": 3, "f": 6}


def test_deep_merge_no_mutation():
    """Deep merge does not mutate the base dict."""
    base = {"a": {"b": 1}}
    override = {"a": {"c": 2}}
    _deep_merge(base, override)
    assert "c" not in base["a"]
