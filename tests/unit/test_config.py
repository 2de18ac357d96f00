"""
Unit tests for settings and logging configuration.
"""

import pytest
import structlog

from beacon_api import __version__
from beacon_api.config import Settings, get_settings
from beacon_api.utils.logging import SERVICE_NAME, cascade_context, configure_logging


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Test environment-driven settings."""

    def test_cors_origins_split(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
        assert Settings().cors_origins == ["http://a.test", "http://b.test"]

    def test_api_workers_from_env(self, monkeypatch):
        monkeypatch.setenv("API_WORKERS", "3")
        assert Settings().api_workers == 3

    def test_api_workers_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("API_WORKERS", "0")
        with pytest.raises(ValueError):
            Settings()

    def test_environment_label(self, monkeypatch):
        monkeypatch.setenv("TESTING", "false")
        monkeypatch.setenv("DEV_MODE", "false")
        assert Settings().environment == "production"
        monkeypatch.setenv("DEV_MODE", "true")
        assert Settings().environment == "development"

    def test_unused_flags_removed(self):
        assert "debug" not in Settings.model_fields


class TestCascadeLogContext:
    """Test the cascade context processor."""

    def test_stamps_service_and_limits(self):
        processor = cascade_context(max_depth=3, cutoff=10.0)
        event = processor(None, "info", {"event": "cascade_propagation_completed"})

        assert event["service"] == SERVICE_NAME
        assert event["service_version"] == __version__
        assert event["cascade_max_depth"] == 3
        assert event["cascade_cutoff"] == 10.0

    def test_does_not_override_explicit_keys(self):
        processor = cascade_context(max_depth=3, cutoff=10.0)
        event = processor(None, "info", {"event": "x", "cascade_max_depth": 1})

        assert event["cascade_max_depth"] == 1

    def test_configure_logging_installs_processor(self, monkeypatch, fresh_settings):
        monkeypatch.setenv("CASCADE_MAX_DEPTH", "2")
        configure_logging()

        names = [getattr(p, "__name__", "") for p in structlog.get_config()["processors"]]
        assert "add_cascade_context" in names
