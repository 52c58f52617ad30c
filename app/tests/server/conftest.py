"""Fixtures for application wiring tests."""

import pytest
from fastapi.testclient import TestClient

from api.dependencies.rate_limits import get_limiter
from infrastructure.notifications import PushDispatcher
from infrastructure.services.providers import get_reply_service
from modules.chat import InMemoryMessageStore, InMemoryUserDirectory, ReplyService
from server.server import handler


@pytest.fixture(autouse=True)
def disable_rate_limits():
    limiter = get_limiter()
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
def client():
    dispatcher = PushDispatcher(channels=[])
    service = ReplyService(InMemoryUserDirectory(), InMemoryMessageStore(), dispatcher)
    handler.dependency_overrides[get_reply_service] = lambda: service
    yield TestClient(handler, raise_server_exceptions=False)
    handler.dependency_overrides.clear()
    service.shutdown()
    dispatcher.shutdown()
