"""Tests for the logging setup."""

import logging

import pytest

from civic_pulse_api.app.core.logging_config import APP_LOGGER, setup_logging


@pytest.fixture
def restore_levels():
    names = [APP_LOGGER, "civic_tests.noisy"]
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


class TestSetupLogging:

    def test_sets_app_level_and_quiets_libraries(self, restore_levels):
        setup_logging("info", quiet=["civic_tests.noisy"])

        assert logging.getLogger(APP_LOGGER).level == logging.INFO
        assert logging.getLogger("civic_tests.noisy").level == logging.WARNING

    def test_debug_leaves_libraries_alone(self, restore_levels):
        logging.getLogger("civic_tests.noisy").setLevel(logging.NOTSET)

        setup_logging("DEBUG", quiet=["civic_tests.noisy"])

        assert logging.getLogger(APP_LOGGER).level == logging.DEBUG
        assert logging.getLogger("civic_tests.noisy").level == logging.NOTSET

    def test_unknown_level_falls_back_to_info(self, restore_levels):
        setup_logging("chatty", quiet=[])
        assert logging.getLogger(APP_LOGGER).level == logging.INFO
