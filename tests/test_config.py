"""Tests for settings loading."""

import logging

from ferry.config import FerrySettings, load_settings
from ferry.markup import MarkupEngine


class TestFerrySettings:
    """Test FerrySettings fields."""

    def test_defaults(self, settings):
        """Test default markers are non-ASCII."""
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.mention_marker == "＠"
        assert settings.channel_marker == "＃"

    def test_env_override(self, monkeypatch):
        """Test FERRY_ prefixed variables override defaults."""
        monkeypatch.setenv("FERRY_DEBUG", "true")
        monkeypatch.setenv("FERRY_MENTION_MARKER", "👤")
        settings = FerrySettings(_env_file=None)
        assert settings.debug is True
        assert settings.mention_marker == "👤"

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "true")
        assert FerrySettings(_env_file=None).debug is False


class TestLoadSettings:
    """Test load_settings()."""

    def test_ascii_marker_warns(self, monkeypatch, caplog):
        """Test an ASCII marker is accepted but logged as a warning."""
        monkeypatch.setenv("FERRY_MENTION_MARKER", "@")
        with caplog.at_level(logging.WARNING, logger="ferry.config"):
            settings = load_settings()
        assert settings.mention_marker == "@"
        assert any("MENTION_MARKER" in record.getMessage() for record in caplog.records)

    def test_default_markers_quiet(self, monkeypatch, caplog):
        """Test the default markers log nothing."""
        monkeypatch.delenv("FERRY_MENTION_MARKER", raising=False)
        monkeypatch.delenv("FERRY_CHANNEL_MARKER", raising=False)
        with caplog.at_level(logging.WARNING, logger="ferry.config"):
            load_settings()
        assert caplog.records == []

    def test_engine_uses_configured_markers(self):
        """Test an engine renders mentions with its own settings."""
        settings = FerrySettings(_env_file=None, mention_marker="👤", channel_marker="📺")
        engine = MarkupEngine(settings)
        assert engine.convert("<@1> in <#2>") == "👤User1 in 📺Channel2"
