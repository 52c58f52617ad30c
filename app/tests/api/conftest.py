"""Fixtures for API tests.

Routes run against the real application with the reply service swapped for
one wired to in-memory backends and mock push channels.
"""

import pytest
from fastapi.testclient import TestClient

from api.dependencies.rate_limits import get_limiter
from infrastructure.notifications import PushDispatcher, TokenKind
from infrastructure.services.providers import get_reply_service
from modules.chat import InMemoryMessageStore, InMemoryUserDirectory, ReplyService
from server.server import handler


@pytest.fixture(autouse=True)
def disable_rate_limits():
    limiter = get_limiter()
    limiter.enabled = False
    yield limiter
    limiter.enabled = True
    limiter.reset()


@pytest.fixture
def directory(user_factory):
    return InMemoryUserDirectory(
        [
            user_factory(
                "u1", username="alice", profile_url="https://example.com/alice.png"
            ),
            user_factory("u2", username="bob", device_token="ExponentPushToken[xyz]"),
            user_factory("u3", username="carol", device_token="fcm-registration-1"),
        ]
    )


@pytest.fixture
def store():
    return InMemoryMessageStore()


@pytest.fixture
def expo_channel(channel_factory):
    return channel_factory(name="expo", kind=TokenKind.RELAY)


@pytest.fixture
def fcm_channel(channel_factory):
    return channel_factory(name="fcm", kind=TokenKind.PROVIDER)


@pytest.fixture
def reply_service(directory, store, expo_channel, fcm_channel, fixed_clock):
    dispatcher = PushDispatcher(channels=[expo_channel, fcm_channel])
    service = ReplyService(directory, store, dispatcher, clock=fixed_clock)
    yield service
    service.shutdown()
    dispatcher.shutdown()


@pytest.fixture
def client(reply_service):
    handler.dependency_overrides[get_reply_service] = lambda: reply_service
    yield TestClient(handler, raise_server_exceptions=False)
    handler.dependency_overrides.clear()
