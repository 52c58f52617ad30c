"""Test fixtures for push notification infrastructure tests."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_expo_settings():
    """Mock ExpoSettings with the production defaults."""
    mock = MagicMock()
    mock.EXPO_PUSH_URL = "https://exp.host/--/api/v2/push/send"
    mock.EXPO_ACCESS_TOKEN = None
    mock.EXPO_ANDROID_CHANNEL_ID = "fcm_fallback_notification_channel"
    mock.EXPO_BODY_MAX_LENGTH = 100
    return mock


@pytest.fixture
def mock_session():
    """Mock requests session answering with a successful Expo ticket."""
    session = MagicMock()
    session.headers = {}
    response = MagicMock()
    response.raise_for_status.return_value = None
    response.json.return_value = {"data": {"status": "ok", "id": "ticket-1"}}
    session.post.return_value = response
    return session


@pytest.fixture
def mock_firebase_manager():
    """Mock FirebaseAppManager handing out a sentinel app."""
    manager = MagicMock()
    manager.get_app.return_value = MagicMock(name="firebase_app")
    return manager
