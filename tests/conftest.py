"""Shared pytest fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_pagewarden_logging():
    """setup_logging() reconfigures loggers globally; undo it after each test."""
    pagewarden_logger = logging.getLogger("pagewarden")
    selenium_logger = logging.getLogger("selenium")
    saved = (
        pagewarden_logger.handlers[:],
        pagewarden_logger.level,
        pagewarden_logger.propagate,
        selenium_logger.level,
    )

    yield

    handlers, level, propagate, selenium_level = saved
    for handler in pagewarden_logger.handlers:
        if handler not in handlers:
            handler.close()
    pagewarden_logger.handlers = handlers
    pagewarden_logger.setLevel(level)
    pagewarden_logger.propagate = propagate
    selenium_logger.setLevel(selenium_level)
