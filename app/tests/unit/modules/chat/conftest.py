"""Fixtures for chat module tests."""

from unittest.mock import MagicMock

import pytest

from infrastructure.notifications import PushDispatcher
from infrastructure.operations import OperationResult
from modules.chat import InMemoryMessageStore, InMemoryUserDirectory, ReplyService


@pytest.fixture
def directory(user_factory):
    """Directory seeded with u1 (alice, no device) and u2 (bob, Expo token)."""
    return InMemoryUserDirectory(
        [
            user_factory(
                "u1", username="alice", profile_url="https://example.com/alice.png"
            ),
            user_factory("u2", username="bob", device_token="ExponentPushToken[xyz]"),
        ]
    )


@pytest.fixture
def store():
    return InMemoryMessageStore()


@pytest.fixture
def mock_dispatcher():
    dispatcher = MagicMock(spec=PushDispatcher)
    dispatcher.dispatch.return_value = OperationResult.success()
    return dispatcher


@pytest.fixture
def service(directory, store, mock_dispatcher, fixed_clock):
    service = ReplyService(
        directory=directory,
        store=store,
        dispatcher=mock_dispatcher,
        lookup_workers=2,
        clock=fixed_clock,
    )
    yield service
    service.shutdown()


@pytest.fixture
def mock_firestore_client():
    """Mock Firestore client with chainable collection/document references."""
    return MagicMock()
