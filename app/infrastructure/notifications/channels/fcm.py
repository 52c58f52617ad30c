"""Firebase Cloud Messaging channel."""

from typing import TYPE_CHECKING

import structlog
from firebase_admin import messaging

from infrastructure.notifications.channels.base import PushChannel
from infrastructure.notifications.models import (
    DeliveryOutcome,
    NotificationStatus,
    PushNotification,
    TokenKind,
)
from infrastructure.operations import OperationResult, classify_firebase_error

if TYPE_CHECKING:
    from infrastructure.clients.firebase import FirebaseAppManager

logger = structlog.get_logger()


class FcmChannel(PushChannel):
    """Direct FCM channel for native device registration tokens.

    Sends a data-only message: title and body travel in the data bag and the
    native notification block is left out, so the mobile app renders the
    notification itself.

    Args:
        firebase: Manager owning the Firebase app to send through
    """

    def __init__(self, firebase: "FirebaseAppManager") -> None:
        self._firebase = firebase
        logger.info("initialized_push_channel", channel="fcm")

    @property
    def channel_name(self) -> str:
        return "fcm"

    @property
    def token_kind(self) -> TokenKind:
        return TokenKind.PROVIDER

    def build_message(self, notification: PushNotification) -> messaging.Message:
        """Build the FCM message for a notification. The body is not truncated."""
        data = {
            "title": notification.title,
            "body": notification.body,
            **notification.context_data(),
        }
        return messaging.Message(
            token=notification.token,
            data=data,
            android=messaging.AndroidConfig(priority="high"),
        )

    def send(self, notification: PushNotification) -> OperationResult:
        try:
            message = self.build_message(notification)
            message_id = messaging.send(message, app=self._firebase.get_app())
        except Exception as exc:
            result = classify_firebase_error(exc)
            logger.error(
                "fcm_push_failed",
                room_id=notification.room_id,
                recipient_id=notification.recipient_id,
                error=result.message,
                error_code=result.error_code,
            )
            return result

        logger.info(
            "fcm_push_sent",
            room_id=notification.room_id,
            recipient_id=notification.recipient_id,
            message_id=message_id,
        )
        return OperationResult.success(
            data=DeliveryOutcome(
                channel=self.channel_name,
                status=NotificationStatus.SENT,
                external_id=message_id,
            ),
            message="Sent through Firebase Cloud Messaging",
        )
