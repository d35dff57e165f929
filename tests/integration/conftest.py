"""Pytest configuration for integration tests.

All tests in this directory are automatically marked as integration tests.
"""

import logging

import pytest


def pytest_collection_modifyitems(items):
    """Mark all tests in integration directory as integration tests."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def isolated_cli(tmp_path, monkeypatch):
    """Run each CLI test from an empty directory with no settings file."""
    from configster.core.config import clear_settings_cache

    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    (work / ".git").mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    clear_settings_cache()
    yield work
    clear_settings_cache()
    # setup_logging() binds a handler to the runner's stderr; drop it
    logger = logging.getLogger("configster")
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)
