"""Tests for bbcloud.logging (BBCloudLogging, level/format from config)."""

import logging

import pytest

from bbcloud.config import LoggingConfig
from bbcloud.logging import DEFAULT_FORMAT, HTTP_LOGGERS, LEVELS, BBCloudLogging, _resolve_level


class TestResolveLevel:
    """_resolve_level maps level names to logging constants."""

    @pytest.mark.parametrize("name", ["DEBUG", "INFO", "WARNING", "ERROR"])
    def test_known_levels(self, name: str) -> None:
        assert _resolve_level(name) == getattr(logging, name)

    def test_case_and_whitespace_normalized(self) -> None:
        assert _resolve_level("debug") == logging.DEBUG
        assert _resolve_level("  error\t") == logging.ERROR

    def test_unknown_level_returns_info(self) -> None:
        """CRITICAL and TRACE are not supported and fall back to INFO."""
        assert _resolve_level("TRACE") == logging.INFO
        assert _resolve_level("CRITICAL") == logging.INFO
        assert _resolve_level("") == logging.INFO


class TestBBCloudLogging:
    """BBCloudLogging applies LoggingConfig to the root logger."""

    def test_setup_sets_root_level_from_config(self) -> None:
        for level_name, expected_num in LEVELS.items():
            BBCloudLogging(LoggingConfig(level=level_name, format="%(message)s")).setup()
            assert logging.root.level == expected_num

    def test_setup_applies_format(self) -> None:
        custom = "%(name)s | %(message)s"
        BBCloudLogging(LoggingConfig(level="INFO", format=custom)).setup()
        formatter = logging.root.handlers[0].formatter
        assert formatter is not None
        assert formatter._fmt == custom

    def test_empty_format_uses_default(self) -> None:
        BBCloudLogging(LoggingConfig(level="INFO", format="")).setup()
        formatter = logging.root.handlers[0].formatter
        assert formatter is not None
        assert formatter._fmt == DEFAULT_FORMAT

    def test_http_loggers_quiet_unless_debug(self) -> None:
        BBCloudLogging(LoggingConfig(level="INFO")).setup()
        for name in HTTP_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING
        BBCloudLogging(LoggingConfig(level="DEBUG")).setup()
        for name in HTTP_LOGGERS:
            assert logging.getLogger(name).level == logging.DEBUG
