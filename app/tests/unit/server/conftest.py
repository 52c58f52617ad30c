"""Fixtures for server module unit tests."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_settings():
    """Create a mock settings object."""
    settings = MagicMock()
    settings.is_production = False
    settings.PREFIX = "dev-"
    settings.GIT_SHA = "abc123"
    settings.chat.backend = "memory"
    settings.dispatch.fcm_enabled = False
    settings.model_dump.return_value = {
        "PREFIX": "dev-",
        "chat": {"backend": "memory"},
    }
    return settings


@pytest.fixture
def mock_services():
    """Mock provider results used by the lifespan."""
    services = MagicMock()
    services.dispatcher.get_available_channels.return_value = ["expo"]
    return services
