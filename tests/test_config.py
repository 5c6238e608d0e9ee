"""Tests for settings and logging configuration."""

from datetime import timedelta

import pytest
import structlog
from pydantic import ValidationError

from colors_api.config import Environment, LogLevel, Settings, get_settings
from colors_api.domain.colors import ThemeOption
from colors_api.logging_config import (
    LogContext,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.app_name == "Colors API"
        assert settings.api_port == 3000
        assert settings.session_ttl == timedelta(hours=24)
        assert settings.default_gray_theme is ThemeOption.AUTO
        assert settings.is_development is True

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COLORS_API_PORT", "8080")
        monkeypatch.setenv("COLORS_SESSION_TTL_HOURS", "6")
        monkeypatch.setenv("COLORS_DEFAULT_GRAY_THEME", "blue")

        settings = Settings()

        assert settings.api_port == 8080
        assert settings.session_ttl == timedelta(hours=6)
        assert settings.default_gray_theme is ThemeOption.BLUE

    def test_ttl_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Settings(session_ttl_hours=0)

    def test_invalid_default_theme_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(default_background_theme="purple")

    def test_environment_flags(self) -> None:
        settings = Settings(environment=Environment.PRODUCTION)

        assert settings.is_production is True
        assert settings.is_development is False
        assert settings.is_testing is False

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestLogging:
    @pytest.mark.parametrize("log_format", ["console", "json"])
    def test_configure_logging(self, log_format: str) -> None:
        configure_logging(Settings(log_format=log_format, log_level=LogLevel.DEBUG))

        logger = get_logger("colors_api.tests")
        logger.info("configured", log_format=log_format)

    def test_configure_logging_with_file(self, tmp_path) -> None:
        log_file = tmp_path / "logs" / "colors.log"

        configure_logging(Settings(log_file=log_file))

        assert log_file.parent.exists()

    def test_log_context_binds_and_unbinds(self) -> None:
        clear_context()

        with LogContext(session_id="abc"):
            assert structlog.contextvars.get_contextvars()["session_id"] == "abc"

        assert "session_id" not in structlog.contextvars.get_contextvars()

    def test_clear_context(self) -> None:
        bind_context(request_id="1234")
        clear_context()

        assert structlog.contextvars.get_contextvars() == {}
