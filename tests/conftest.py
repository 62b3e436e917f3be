"""Pytest configuration and shared fixtures."""

import pytest
from dotenv import load_dotenv

from searchkit.configuration import Configuration
from searchkit.configuration import config as shared_config

# Load .env file (LOG_CONFIG and friends)
load_dotenv()


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "global_state: tests that mutate the shared configuration")


@pytest.fixture(autouse=True)
def restore_global_config():
    """Snapshot the shared configuration and put it back after each test."""
    saved_options = shared_config.options_snapshot()
    saved_predicates = shared_config.predicates.copy()
    yield shared_config
    shared_config.restore_options(saved_options)
    shared_config.predicates.restore(saved_predicates)


@pytest.fixture
def fresh_config():
    """A private Configuration with the default predicate set."""
    return Configuration()


@pytest.fixture
def bare_config():
    """A private Configuration with an empty registry."""
    return Configuration(load_defaults=False)
