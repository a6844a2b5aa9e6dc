"""Shared test fixtures."""

from pathlib import Path

import pytest

from audiosrt.core.config import AppConfig

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def sample_srt(fixtures_dir: Path) -> Path:
    return fixtures_dir / "sample.srt"


@pytest.fixture
def audio_file(tmp_path: Path) -> Path:
    """An input file that exists; its contents are never decoded."""
    path = tmp_path / "clip.mp3"
    path.write_bytes(b"\x00" * 16)
    return path


@pytest.fixture
def config(tmp_path: Path, monkeypatch) -> AppConfig:
    """Config isolated from user/project TOML files and AUDIOSRT_* env vars."""
    monkeypatch.setattr("audiosrt.core.config._USER_CONFIG", tmp_path / "missing-user.toml")
    monkeypatch.setattr("audiosrt.core.config._PROJECT_CONFIG", tmp_path / "missing-project.toml")
    return AppConfig()
