"""Shared fixtures: every test runs against default settings."""
import pytest


@pytest.fixture(autouse=True)
def default_settings(tmp_path, monkeypatch):
    """Point the settings loader at a file that does not exist."""
    monkeypatch.setenv("CALCULATOR_CONFIG", str(tmp_path / "missing_config.json"))
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    return tmp_path
