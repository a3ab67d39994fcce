"""Pytest configuration for test logging."""
from Calculator import config_manager
from Calculator.logging_config import configure_logging

configure_logging(config_manager.load_setting_value("log_level"))
