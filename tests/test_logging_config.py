"""Tests for the logging setup."""
import logging
from Calculator.logging_config import configure_logging


def test_configure_logging_sets_root_level():
    try:
        assert configure_logging("debug") == logging.DEBUG
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("Calculator.config_manager").level == logging.INFO
    finally:
        configure_logging("INFO")


def test_configure_logging_unknown_level_defaults_to_info():
    assert configure_logging("chatty") == logging.INFO
