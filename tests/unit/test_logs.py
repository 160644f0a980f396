"""Tests for log helper functions."""

import time

import pytest

from alertform.core.logs import log, warn
from alertform.core.models import LogEntry


class TestLog:
    """Tests for log() helper function."""

    @pytest.mark.core
    def test_log_creates_log_entry_with_level_and_message(self) -> None:
        """Log creates a LogEntry with the given level and message."""
        entry = log("INFO", "Expression loaded")
        assert isinstance(entry, LogEntry)
        assert entry.level == "INFO"
        assert entry.message == "Expression loaded"

    @pytest.mark.core
    def test_log_auto_captures_timestamp(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Log automatically captures current timestamp."""
        monkeypatch.setattr(time, "time", lambda: 1702300000.0)
        entry = log("INFO", "Test message")
        assert entry.timestamp == 1702300000.0

    @pytest.mark.core
    def test_log_accepts_attributes_as_kwargs(self) -> None:
        """Log accepts attributes as keyword arguments."""
        entry = log("WARN", "Parse failed", source="up >", offset=4)
        assert entry.attributes == {"source": "up >", "offset": 4}

    @pytest.mark.core
    def test_log_defaults_to_empty_attributes(self) -> None:
        entry = log("DEBUG", "Debug message")
        assert entry.attributes == {}


class TestLevelHelpers:
    """Tests for the level shortcut helpers."""

    @pytest.mark.core
    def test_warn_uses_warn_level(self) -> None:
        entry = warn("Cannot parse", source="x")
        assert entry.level == "WARN"
        assert entry.attributes == {"source": "x"}
