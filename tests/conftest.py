"""
Pytest configuration and fixtures for test isolation.
"""
import logging
import os

import pytest

from gatekeeper.config.environment import EnvironmentVariables
from gatekeeper.validation.engine import ContentValidator
from tests.fixtures.manifests import make_manifest


@pytest.fixture(autouse=True, scope="function")
def reset_environment(monkeypatch):
    """Start every test without validator environment overrides."""
    original_env = os.environ.copy()
    for variable in EnvironmentVariables.get_all_variables():
        monkeypatch.delenv(variable, raising=False)
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def restore_root_handlers():
    """Remove logging handlers installed by CLI runs during a test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def validator():
    """A fresh validator with its own statistics."""
    return ContentValidator()


@pytest.fixture
def valid_manifest():
    return make_manifest()
