"""Push notification dispatch.

Single-recipient push delivery with token-based routing:
- Expo push tokens -> Expo relay (ExpoChannel)
- Native registration tokens -> Firebase Cloud Messaging (FcmChannel)
- No token -> nothing sent

Usage:
    from infrastructure.notifications import PushDispatcher, PushNotification

    result = dispatcher.dispatch(
        PushNotification(
            token=recipient.device_token,
            title=sender.username,
            body=reply_text,
            room_id=room_id,
            recipient_id=recipient.user_id,
            sender_id=sender.user_id,
            profile_url=sender.profile_url,
        )
    )
"""

# Models
from infrastructure.notifications.models import (
    DeliveryOutcome,
    NotificationStatus,
    PushNotification,
    TokenKind,
)

# Token classification
from infrastructure.notifications.tokens import classify_token

# Dispatcher
from infrastructure.notifications.dispatcher import PushDispatcher

# Channel interface and implementations
from infrastructure.notifications.channels.base import PushChannel
from infrastructure.notifications.channels.expo import ExpoChannel
from infrastructure.notifications.channels.fcm import FcmChannel

__all__ = [
    # Models
    "DeliveryOutcome",
    "NotificationStatus",
    "PushNotification",
    "TokenKind",
    # Classification
    "classify_token",
    # Dispatcher
    "PushDispatcher",
    # Channels
    "PushChannel",
    "ExpoChannel",
    "FcmChannel",
]
