"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging function
- get_module_logger function
- Test logging suppression in test environment
"""

import logging

import pytest
import structlog

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
    _is_test_environment,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_bound_logger(self, mock_settings):
        """configure_logging returns a logger with the usual methods."""
        result = configure_logging(settings=mock_settings)

        assert result is not None
        assert hasattr(result, "info")
        assert hasattr(result, "debug")
        assert hasattr(result, "warning")
        assert hasattr(result, "error")

    def test_configure_logging_accepts_overrides(self, mock_settings):
        """configure_logging accepts log_level and is_production."""
        assert configure_logging(settings=mock_settings, log_level="DEBUG") is not None
        assert configure_logging(settings=mock_settings, is_production=True) is not None

    def test_configure_logging_idempotent(self, mock_settings):
        """Multiple configure_logging calls are safe."""
        logger1 = configure_logging(settings=mock_settings)
        logger2 = configure_logging(settings=mock_settings)

        assert logger1 is not None
        assert logger2 is not None

    def test_configure_logging_suppresses_in_test_env(self, mock_settings):
        """In test environment, root logger level is set high to suppress output."""
        configure_logging(settings=mock_settings)

        root_logger = logging.getLogger()
        assert root_logger.level >= logging.CRITICAL


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger function."""

    def test_get_module_logger_returns_bound_logger(self, mock_settings):
        configure_logging(settings=mock_settings)

        logger = get_module_logger()

        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    def test_logging_methods_dont_raise(self, mock_settings):
        """Logging methods execute without raising exceptions."""
        configure_logging(settings=mock_settings)

        log = get_module_logger().bind(parser="json")

        log.debug("i18n_language_loaded", lang="en", file_count=2)
        log.info("i18n_configured", default_lang="en")
        log.warning("i18n_invalid_file_format")
        log.error("i18n_parse_failed", error="boom")

    def test_standard_structlog_pattern(self, mock_settings):
        configure_logging(settings=mock_settings)

        logger = structlog.get_logger()
        log = logger.bind(component="registry")

        assert hasattr(log, "info")
