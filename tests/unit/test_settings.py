"""Tests for settings constants."""

import importlib

import settings


class TestConstants:
    def test_environment_is_ignored(self, monkeypatch):
        monkeypatch.setenv("CONGRESO_CHAMBER_SIZE", "abc")
        monkeypatch.setenv("CONGRESO_LOG_LEVEL", "TRACE")
        reloaded = importlib.reload(settings)
        assert reloaded.CHAMBER_SIZE == 350
        assert reloaded.LOG_LEVEL == "INFO"
        assert reloaded.DEFAULT_REFERENCE_CODE == "GS"

    def test_no_os_dependency(self):
        assert not hasattr(settings, "os")
