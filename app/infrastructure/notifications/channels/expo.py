"""Expo push relay channel."""

from typing import Any, Dict, Optional, TYPE_CHECKING

import requests
import structlog

from infrastructure.notifications.channels.base import PushChannel
from infrastructure.notifications.models import (
    DeliveryOutcome,
    NotificationStatus,
    PushNotification,
    TokenKind,
)
from infrastructure.operations import (
    OperationResult,
    OperationStatus,
    classify_http_error,
)

if TYPE_CHECKING:
    from infrastructure.configuration.integrations.expo import ExpoSettings

logger = structlog.get_logger()

ELLIPSIS = "..."


def truncate_body(body: str, max_length: int = 100) -> str:
    """Cut the body to ``max_length`` characters plus an ellipsis when longer."""
    if len(body) <= max_length:
        return body
    return body[:max_length] + ELLIPSIS


class ExpoChannel(PushChannel):
    """Expo push relay channel.

    Posts one message per call to the Expo push API. Title and body are
    native notification fields, so the OS renders the notification.

    Args:
        settings: Expo integration settings
        timeout_seconds: HTTP timeout for the relay call
        session: Optional requests session (connection pooling, tests)
    """

    def __init__(
        self,
        settings: "ExpoSettings",
        timeout_seconds: float = 5.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._settings = settings
        self._timeout = timeout_seconds
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/json",
                "Accept-Encoding": "gzip, deflate",
                "Content-Type": "application/json",
            }
        )
        if settings.EXPO_ACCESS_TOKEN:
            self._session.headers["Authorization"] = (
                f"Bearer {settings.EXPO_ACCESS_TOKEN}"
            )
        logger.info("initialized_push_channel", channel="expo")

    @property
    def channel_name(self) -> str:
        return "expo"

    @property
    def token_kind(self) -> TokenKind:
        return TokenKind.RELAY

    def build_message(self, notification: PushNotification) -> Dict[str, Any]:
        """Build the Expo push message for a notification."""
        return {
            "to": notification.token,
            "title": notification.title,
            "body": truncate_body(
                notification.body, self._settings.EXPO_BODY_MAX_LENGTH
            ),
            "data": notification.context_data(),
            "sound": "default",
            "priority": "high",
            "channelId": self._settings.EXPO_ANDROID_CHANNEL_ID,
        }

    def send(self, notification: PushNotification) -> OperationResult:
        message = self.build_message(notification)

        try:
            response = self._session.post(
                self._settings.EXPO_PUSH_URL,
                json=message,
                timeout=self._timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            result = classify_http_error(exc)
            logger.error(
                "expo_push_failed",
                room_id=notification.room_id,
                recipient_id=notification.recipient_id,
                error=result.message,
                error_code=result.error_code,
            )
            return result
        except ValueError as exc:
            logger.error(
                "expo_push_invalid_response",
                room_id=notification.room_id,
                error=str(exc),
            )
            return OperationResult.transient_error(
                "Expo returned a non-JSON response", error_code="INVALID_RESPONSE"
            )

        return self._ticket_result(notification, payload)

    def _ticket_result(
        self, notification: PushNotification, payload: Dict[str, Any]
    ) -> OperationResult:
        """Translate the Expo push ticket into an OperationResult.

        Expo answers 200 even when it rejects a message; the verdict lives
        in ``data.status`` (or top-level ``errors`` for request errors).
        """
        ticket = payload.get("data") or {}
        if isinstance(ticket, list):
            ticket = ticket[0] if ticket else {}

        if payload.get("errors") or ticket.get("status") == "error":
            details = ticket.get("details") or {}
            error_code = details.get("error") or "EXPO_REJECTED"
            status = (
                OperationStatus.NOT_FOUND
                if error_code == "DeviceNotRegistered"
                else OperationStatus.PERMANENT_ERROR
            )
            message = ticket.get("message") or "Expo rejected the push message"
            logger.warning(
                "expo_push_rejected",
                room_id=notification.room_id,
                recipient_id=notification.recipient_id,
                error_code=error_code,
                error=message,
            )
            return OperationResult.error(
                status,
                message,
                error_code=error_code,
                data=DeliveryOutcome(
                    channel=self.channel_name,
                    status=NotificationStatus.FAILED,
                    platform_response=payload,
                ),
            )

        logger.info(
            "expo_push_sent",
            room_id=notification.room_id,
            recipient_id=notification.recipient_id,
            ticket_id=ticket.get("id"),
        )
        return OperationResult.success(
            data=DeliveryOutcome(
                channel=self.channel_name,
                status=NotificationStatus.SENT,
                external_id=ticket.get("id"),
                platform_response=payload,
            ),
            message="Sent through Expo push relay",
        )
