"""Tests for logging setup."""

import logging

import pytest

from rofi_bookmarks.logging_config import setup_logging


@pytest.fixture
def app_logger():
    logger = logging.getLogger("rofi_bookmarks")
    saved_handlers, saved_level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


class TestSetupLogging:
    def test_repeated_setup_keeps_one_handler(self, app_logger):
        setup_logging()
        setup_logging()
        assert len(app_logger.handlers) == 1

    def test_debug_level(self, app_logger):
        setup_logging(debug=True)
        assert app_logger.level == logging.DEBUG

    def test_info_level_by_default(self, app_logger):
        setup_logging(debug=True)
        setup_logging()
        assert app_logger.level == logging.INFO
        assert len(app_logger.handlers) == 1
