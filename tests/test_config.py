"""Tests for startup configuration checks and logging setup."""

import io
import json
import logging

import pytest

from seo_checker.core import config
from seo_checker.core.config import validate_settings_for_production
from seo_checker.core.logging import JSONFormatter, setup_logging
from seo_checker.core.sentry import init_sentry


@pytest.fixture
def patch_settings(monkeypatch):
    def _patch(**values):
        for name, value in values.items():
            monkeypatch.setattr(config.settings, name, value)

    return _patch


class TestValidateSettings:
    def test_development_defaults_pass(self, patch_settings):
        patch_settings(app_env="development", app_debug=True, allowed_origins="*", fetch_timeout=10.0)
        validate_settings_for_production()

    def test_non_positive_timeout(self, patch_settings):
        patch_settings(fetch_timeout=0)
        with pytest.raises(SystemExit, match="FETCH_TIMEOUT"):
            validate_settings_for_production()

    def test_negative_nltk_retry_interval(self, patch_settings):
        patch_settings(fetch_timeout=10.0, nltk_retry_interval=-1.0)
        with pytest.raises(SystemExit, match="NLTK_RETRY_INTERVAL"):
            validate_settings_for_production()

    def test_production_rejects_wildcard_cors_and_debug(self, patch_settings):
        patch_settings(app_env="production", app_debug=True, allowed_origins="*", fetch_timeout=10.0)
        with pytest.raises(SystemExit) as exc_info:
            validate_settings_for_production()
        message = str(exc_info.value)
        assert "ALLOWED_ORIGINS" in message
        assert "APP_DEBUG" in message

    def test_production_ok(self, patch_settings):
        patch_settings(app_env="production", app_debug=False, allowed_origins="https://seo.example.com")
        validate_settings_for_production()


class TestLogging:
    def test_json_formatter(self):
        record = logging.LogRecord("seo_checker.test", logging.WARNING, __file__, 1, "fetch %s", ("failed",), None)
        record.target_url = "https://example.com"
        data = json.loads(JSONFormatter().format(record))
        assert data["level"] == "WARNING"
        assert data["message"] == "fetch failed"
        assert data["target_url"] == "https://example.com"

    def test_setup_logging_writes_to_stream(self, patch_settings):
        patch_settings(log_json=True, log_level="INFO")
        stream = io.StringIO()
        setup_logging(stream=stream)
        try:
            logging.getLogger("seo_checker.test").info("hello")
            assert json.loads(stream.getvalue().splitlines()[-1])["message"] == "hello"
        finally:
            setup_logging()


def test_sentry_disabled_without_dsn(patch_settings):
    patch_settings(sentry_dsn="")
    assert init_sentry() is False
