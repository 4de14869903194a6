"""Tests for configuration loading and environment overrides."""

import pytest
from pydantic import ValidationError

from robotarena import ArenaSettings, PersistenceSettings
from robotarena.core.geometry import Bounds


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run from an empty directory so no .env file leaks in."""
    monkeypatch.chdir(tmp_path)


def test_arena_defaults():
    settings = ArenaSettings()
    assert settings.bounds == Bounds(500.0, 500.0)
    assert settings.spawn_margin == 10.0
    assert settings.teleport_margin == 10.0
    assert settings.seed is None
    assert settings.history_size == 0
    assert settings.log_level == "INFO"


def test_arena_env_overrides(monkeypatch):
    monkeypatch.setenv("ARENA_WIDTH", "800")
    monkeypatch.setenv("ARENA_SEED", "7")
    monkeypatch.setenv("ARENA_LOG_LEVEL", "DEBUG")

    settings = ArenaSettings()

    assert settings.bounds == Bounds(800.0, 500.0)
    assert settings.seed == 7
    assert settings.log_level == "DEBUG"


def test_explicit_values_beat_env(monkeypatch):
    monkeypatch.setenv("ARENA_SEED", "7")
    assert ArenaSettings(seed=3).seed == 3


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("ARENA_HISTORY_SIZE=50\nUNRELATED=1\n")
    assert ArenaSettings().history_size == 50


@pytest.mark.parametrize(
    ("name", "value"),
    [("ARENA_WIDTH", "0"), ("ARENA_HISTORY_SIZE", "-1"), ("ARENA_LOG_LEVEL", "LOUD")],
)
def test_invalid_values_rejected(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        ArenaSettings()


def test_persistence_defaults_and_env(monkeypatch):
    settings = PersistenceSettings()
    assert (settings.default_speed, settings.default_heading) == (2.0, 0.0)
    assert settings.encoding == "utf-8"

    monkeypatch.setenv("ARENA_PERSIST_DEFAULT_SPEED", "3.5")
    assert PersistenceSettings().default_speed == 3.5


def test_unknown_encoding_rejected(monkeypatch):
    monkeypatch.setenv("ARENA_PERSIST_ENCODING", "not-a-codec")
    with pytest.raises(ValidationError, match="unknown encoding"):
        PersistenceSettings()

    assert PersistenceSettings(encoding="latin-1").encoding == "latin-1"
