"""Push notification core models.

Platform-agnostic push models. The chat feature builds a ``PushNotification``
(the notification intent); infrastructure picks the channel and reports a
``DeliveryOutcome``.

Uses Pydantic BaseModel for:
- Runtime input validation
- Type safety with proper error messages
- Consistency with the API layer (modules/chat/schemas.py)
"""

from typing import Optional, Dict, Any
from enum import Enum
from pydantic import BaseModel, field_validator


class TokenKind(Enum):
    """Device token variants, resolved once by ``classify_token``.

    RELAY tokens are Expo push tokens delivered through the Expo relay.
    PROVIDER tokens are FCM registration tokens delivered directly.
    NONE means the recipient has no usable token; nothing is sent.
    """

    RELAY = "relay"
    PROVIDER = "provider"
    NONE = "none"


class NotificationStatus(Enum):
    """Push delivery status as reported by the channel."""

    SENT = "sent"
    FAILED = "failed"


class PushNotification(BaseModel):
    """Notification intent for exactly one recipient device.

    Ephemeral: exists only for the duration of a dispatch call.

    Attributes:
        token: Recipient device token (Expo or FCM format)
        title: Notification title (sender display name for replies)
        body: Notification body (raw reply text, channels may truncate)
        room_id: Conversation the notification belongs to
        recipient_id: Recipient user id
        sender_id: Sender user id
        profile_url: Sender profile image reference

    Example:
        notification = PushNotification(
            token="ExponentPushToken[xyz]",
            title="alice",
            body="hello",
            room_id="r1",
            recipient_id="u2",
            sender_id="u1",
            profile_url="https://example.com/alice.png",
        )
    """

    token: Optional[str] = None
    title: str
    body: str
    room_id: str
    recipient_id: str
    sender_id: str
    profile_url: Optional[str] = None

    @field_validator("token")
    @classmethod
    def normalize_token(cls, v: Optional[str]) -> Optional[str]:
        """Strip surrounding whitespace. A blank token becomes None."""
        if v is None:
            return None
        return v.strip() or None

    def context_data(self) -> Dict[str, str]:
        """Identifiers the client app needs to open the conversation.

        Keys follow the mobile client's wire names. Missing values are sent
        as empty strings since FCM data payloads only accept strings.
        """
        return {
            "recipientsUserId": self.recipient_id,
            "sendersUserId": self.sender_id,
            "roomId": self.room_id,
            "profileUrl": self.profile_url or "",
        }


class DeliveryOutcome(BaseModel):
    """Result payload of a single push delivery attempt.

    Carried in ``OperationResult.data`` by channels and the dispatcher.

    Attributes:
        channel: Channel name used ("expo" or "fcm")
        status: Delivery status (SENT, FAILED)
        external_id: Provider id (Expo ticket id, FCM message name)
        platform_response: Raw provider response, passed through for debugging
    """

    channel: str
    status: NotificationStatus
    external_id: Optional[str] = None
    platform_response: Optional[Dict[str, Any]] = None

    @property
    def is_success(self) -> bool:
        return self.status == NotificationStatus.SENT
