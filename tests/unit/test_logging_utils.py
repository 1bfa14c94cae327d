"""
Unit tests for logger setup.
"""

import logging

import pytest

from quantity_measurement.utils.logging_utils import LOGGER_NAME, reset_logger, setup_logger


@pytest.fixture(autouse=True)
def clean_logger():
    reset_logger()
    yield
    reset_logger()


class TestSetupLogger:

    def test_level_applied(self):
        logger = setup_logger("DEBUG")
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG

    def test_level_case_insensitive(self):
        assert setup_logger("error").level == logging.ERROR

    def test_unknown_level_falls_back_to_warning(self):
        assert setup_logger("CHATTY").level == logging.WARNING

    def test_does_not_propagate(self):
        assert setup_logger().propagate is False

    def test_no_duplicate_handlers(self):
        setup_logger("INFO")
        logger = setup_logger("INFO")
        assert len(logger.handlers) == 1

    def test_child_loggers_use_handlers(self):
        setup_logger("INFO")
        child = logging.getLogger(f"{LOGGER_NAME}.ui.menus")
        assert child.getEffectiveLevel() == logging.INFO

    def test_log_file(self, tmp_path):
        log_path = tmp_path / "logs" / "session.log"
        logger = setup_logger("INFO", log_path)
        assert len(logger.handlers) == 2

        logging.getLogger(f"{LOGGER_NAME}.ui.menus").warning("Cannot divide by a zero quantity")
        for handler in logger.handlers:
            handler.flush()

        text = log_path.read_text(encoding="utf-8")
        assert "Logging to file" in text
        assert "WARNING" in text
        assert "quantity_measurement.ui.menus | Cannot divide by a zero quantity" in text


class TestResetLogger:

    def test_removes_handlers(self):
        setup_logger("DEBUG")
        reset_logger()
        logger = logging.getLogger(LOGGER_NAME)
        assert logger.handlers == []
        assert logger.level == logging.NOTSET
        assert logger.propagate is True
