"""Centralized logging configuration."""
import logging


def configure_logging(level: str = "INFO"):
    """Configure the root logger once for the CLI and the test suite."""
    log_level = getattr(logging, str(level).upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s [%(levelname)8s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        force=True  # Override any existing configuration
    )

    # Settings loading is chatty at DEBUG; keep the engine's trace readable
    logging.getLogger("Calculator.config_manager").setLevel(max(log_level, logging.INFO))
    logging.getLogger().setLevel(log_level)
    return log_level
