"""Tests for logging configuration."""

import logging

from stockroom.config import Settings
from stockroom.config.logging import QUIET_LOGGERS, app_context, configure_logging


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestAppContext:
    def test_stamps_service_identity_and_backend(self):
        settings = _settings(environment="production")
        add_context = app_context(settings)

        event = add_context(None, "info", {"event": "product_created"})

        assert event["app"] == settings.app_name
        assert event["version"] == settings.app_version
        assert event["environment"] == "production"
        assert event["storage_backend"] == "memory"

    def test_keeps_fields_bound_by_caller(self):
        add_context = app_context(_settings())
        event = add_context(None, "info", {"event": "x", "environment": "override"})
        assert event["environment"] == "override"


class TestConfigureLogging:
    def test_sets_root_level_and_quiets_libraries(self):
        configure_logging(_settings(log_level="DEBUG"))

        assert logging.getLogger().level == logging.DEBUG
        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

        configure_logging(_settings())
        assert logging.getLogger().level == logging.INFO
