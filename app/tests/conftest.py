import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.services`) works during pytest collection
# whatever directory pytest is invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from datetime import datetime, timezone  # noqa: E402
from typing import Optional  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402

from infrastructure.notifications import (  # noqa: E402
    DeliveryOutcome,
    NotificationStatus,
    PushChannel,
    PushNotification,
    TokenKind,
)
from infrastructure.operations import OperationResult  # noqa: E402
from modules.chat import User  # noqa: E402

FIXED_NOW = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    """Clock returning a constant UTC timestamp."""
    return lambda: FIXED_NOW


@pytest.fixture
def user_factory():
    """Factory for chat users.

    Example:
        sender = user_factory("u1", username="alice")
        recipient = user_factory("u2", device_token="ExponentPushToken[xyz]")
    """

    def _factory(
        user_id: str = "u1",
        username: Optional[str] = None,
        device_token: Optional[str] = None,
        profile_url: Optional[str] = None,
    ) -> User:
        return User(
            user_id=user_id,
            username=username or f"user-{user_id}",
            device_token=device_token,
            profile_url=profile_url,
        )

    return _factory


@pytest.fixture
def notification_factory():
    """Factory for PushNotification instances with sensible defaults."""

    def _factory(**overrides) -> PushNotification:
        fields = {
            "token": "ExponentPushToken[xyz]",
            "title": "alice",
            "body": "hello",
            "room_id": "r1",
            "recipient_id": "u2",
            "sender_id": "u1",
            "profile_url": "https://example.com/alice.png",
        }
        fields.update(overrides)
        return PushNotification(**fields)

    return _factory


@pytest.fixture
def channel_factory():
    """Factory for mock push channels.

    The returned channel answers ``send`` with a successful DeliveryOutcome
    unless ``result`` or ``side_effect`` is given.
    """

    def _factory(
        name: str = "expo",
        kind: TokenKind = TokenKind.RELAY,
        result: Optional[OperationResult] = None,
        side_effect=None,
    ) -> MagicMock:
        channel = MagicMock(spec=PushChannel)
        channel.channel_name = name
        channel.token_kind = kind
        channel.send.return_value = result or OperationResult.success(
            data=DeliveryOutcome(
                channel=name, status=NotificationStatus.SENT, external_id="id-1"
            )
        )
        if side_effect is not None:
            channel.send.side_effect = side_effect
        return channel

    return _factory
