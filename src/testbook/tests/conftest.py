"""
Core pytest configuration for the entire test suite.

This module holds only what every test module needs: quiet third-party loggers,
a test Settings object and the session-wide logging setup.

Domain-specific fixtures live in:
- tests/test_fixtures/user_fixtures.py   (fake users, stub transports, HTTP clients)
"""

from __future__ import annotations

# -------------------------------
# Standard library imports
# -------------------------------
import logging

# -------------------------------
# Early logging tuning
# -------------------------------
# Keep this block above the project imports so nothing logs during collection.
NOISY_LOGGERS = (
    "faker",
    "faker.factory",
    "asyncio",
    "httpx",
    "httpcore",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

# -------------------------------
# Third-party / project imports
# -------------------------------
import pytest
from pytest import FixtureRequest

from testbook.config.settings import Settings, get_settings
from testbook.core.logging.builder import setup_logging

logger = logging.getLogger(__name__)

TEST_API_BASE_URL = "https://users.test"


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings used by the whole session: stdout logging, DEBUG level, a fake user API.
    Built explicitly rather than through get_settings() so a developer's .env
    cannot change what the tests see.
    """
    return Settings(
        ENV="testing",
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="json",
        LOG_TO_STDOUT=True,
        USER_API_BASE_URL=TEST_API_BASE_URL,
        USER_API_TIMEOUT=1.0,
        _env_file=None,
    )


# The `autouse=True` part means that this fixture will be automatically used by pytest
# without explicitly including it in your test function parameters.
@pytest.fixture(scope="session", autouse=True)
def configure_logging(request: FixtureRequest, test_settings: Settings):
    """
    Install the package logging configuration for the whole test session.

    dictConfig replaces the root handlers, which drops pytest's capture handler;
    it is re-attached afterwards so `caplog.records` keeps working.
    """
    setup_logging(test_settings)

    caplog_plugin = request.config.pluginmanager.getplugin("logging-plugin")
    handler = getattr(caplog_plugin, "caplog_handler", None) if caplog_plugin else None
    if handler is not None:
        logging.getLogger().addHandler(handler)

    yield


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """get_settings() is lru_cached; tests that patch the environment need a fresh read."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# Fixtures shared through test_fixtures/
from .test_fixtures.user_fixtures import (  # noqa: E402,F401
    fake_user,
    fake_users,
    user_api,
    stub_client,
)
