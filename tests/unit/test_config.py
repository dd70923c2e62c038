"""Configuration tests."""

import pytest

from gridforge.core import get_settings
from gridforge.core.config import Settings


def test_settings_defaults():
    """Test default settings load correctly."""
    settings = Settings()

    assert settings.default_dialect == "basalt"
    assert settings.import_priority == ["basalt", "pixelui", "primeui"]
    assert settings.canvas_preset == "computer"
    assert settings.json_indent == 2
    assert settings.max_source_bytes == 1_048_576
    assert settings.json_logs is False


def test_settings_cached():
    """get_settings returns one shared instance."""
    assert get_settings() is get_settings()


def test_settings_from_environment(monkeypatch):
    """GRIDFORGE_ variables override defaults."""
    monkeypatch.setenv("GRIDFORGE_DEFAULT_DIALECT", "PrimeUI")
    monkeypatch.setenv("GRIDFORGE_EMIT_COMMENTS", "false")
    settings = Settings()
    assert settings.default_dialect == "primeui"
    assert settings.emit_comments is False


def test_settings_validation():
    """Test settings validation."""
    with pytest.raises(Exception):
        Settings(json_indent=12)

    with pytest.raises(Exception):
        Settings(default_dialect="qt")

    with pytest.raises(Exception):
        Settings(import_priority=["basalt", "swing"])
