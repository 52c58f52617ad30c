"""Fixtures for infrastructure.logging tests."""

import pytest
import structlog
from unittest.mock import Mock

from infrastructure.configuration import Settings
from infrastructure.logging.setup import configure_logging


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.PREFIX = "dev-"
    settings.GIT_SHA = "abc123"
    settings.is_production = False
    return settings


@pytest.fixture
def restore_logging():
    """Reapply the suppressed test configuration after a test reconfigures logging."""
    yield
    structlog.contextvars.clear_contextvars()
    configure_logging()
