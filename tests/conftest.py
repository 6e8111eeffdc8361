"""Pytest configuration and shared fixtures for svan-monads tests."""

import pytest


@pytest.fixture
def fresh_config():
    """Reset the global configuration and log hooks around a test."""
    from svan_monads._config import reset_config
    from svan_monads._logging import clear_log_hooks

    reset_config()
    clear_log_hooks()
    yield
    reset_config()
    clear_log_hooks()


@pytest.fixture
def calls():
    """Recorder for callbacks that must run zero or one time."""
    return []
