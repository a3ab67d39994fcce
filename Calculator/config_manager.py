# config_manager.py
"""Settings for the calculator.

Settings live in ``config.json`` at the project root and are merged over
DEFAULT_SETTINGS, so a missing or partial file still yields every key.
Environment variables (optionally from a ``.env`` file) take precedence:

- CALCULATOR_CONFIG: alternative path of the settings file
- LOG_LEVEL: overrides the "log_level" setting
"""
import os
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_SETTINGS = {
    "decimal_places": 2,
    "implicit_multiplication": True,
    "divide_by_zero_message": "cannot divide by zero!",
    "log_level": "INFO",
}


def config_path():
    """Return the settings file path (CALCULATOR_CONFIG wins over the default)."""
    override = os.getenv("CALCULATOR_CONFIG")
    if override:
        return Path(override)
    return PROJECT_ROOT / "config.json"


def load_setting_value(key_value):
    settings_dict = dict(DEFAULT_SETTINGS)
    path = config_path()
    try:
        with open(path, 'r', encoding= 'utf-8') as f:
            settings_dict.update(json.load(f))

    except FileNotFoundError:
        logger.debug("No settings file at %s, using defaults", path)
    except json.JSONDecodeError as e:
        logger.warning("Settings file %s is not valid JSON (%s), using defaults", path, e)

    env_level = os.getenv("LOG_LEVEL")
    if env_level:
        settings_dict["log_level"] = env_level

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value)


def save_setting(settings_dict):
    path = config_path()
    with open(path, 'w', encoding= 'utf-8') as f:
        json.dump(settings_dict, f, indent=4)
    logger.info("Settings saved to %s", path)
    return settings_dict
