"""
Unit test configuration.

Runs every unit test from an empty working directory so pydantic-settings
never reads the project's real .env file. Tests control config exclusively
through monkeypatch.setenv().
"""

import pytest


@pytest.fixture(autouse=True)
def disable_dotenv_loading(monkeypatch, tmp_path):
    """Prevent WebhookSettings / AppSettings from loading a local .env."""
    monkeypatch.chdir(tmp_path)
