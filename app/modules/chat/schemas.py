"""API request schemas for the chat endpoints.

Field names are snake_case in Python and camelCase on the wire, matching the
mobile client's payloads.
"""

from typing import Annotated, Optional

from pydantic import ConfigDict, Field, field_validator

from infrastructure.models import InfrastructureModel
from infrastructure.notifications import PushNotification

# Firestore document ids: non-empty and no path separators
DocumentId = Annotated[str, Field(min_length=1, max_length=1500, pattern=r"^[^/]+$")]


class ReplyRequest(InfrastructureModel):
    """Body of POST /api/reply."""

    # Reply text is stored exactly as typed
    model_config = ConfigDict(str_strip_whitespace=False)

    senders_user_id: DocumentId = Field(alias="sendersUserId")
    recipients_user_id: DocumentId = Field(alias="recipientsUserId")
    room_id: DocumentId = Field(alias="roomId")
    reply_text: str = Field(alias="replyText", min_length=1)


class MarkAsReadRequest(InfrastructureModel):
    """Body of POST /api/markAsRead.

    ``senders_user_id`` is the acting user: messages they sent are left alone.
    """

    senders_user_id: DocumentId = Field(alias="sendersUserId")
    room_id: DocumentId = Field(alias="roomId")


class SendNotificationRequest(InfrastructureModel):
    """Body of POST /api/sendNotification."""

    model_config = ConfigDict(str_strip_whitespace=False)

    recipients_token: str = Field(alias="recipientsToken", min_length=1)
    title: str
    body: str
    room_id: str = Field(alias="roomId")
    recipients_user_id: str = Field(alias="recipientsUserId")
    senders_user_id: str = Field(alias="sendersUserId")
    profile_url: Optional[str] = Field(default=None, alias="profileUrl")

    def to_notification(self) -> PushNotification:
        return PushNotification(
            token=self.recipients_token.strip(),
            title=self.title,
            body=self.body,
            room_id=self.room_id,
            recipient_id=self.recipients_user_id,
            sender_id=self.senders_user_id,
            profile_url=self.profile_url,
        )

    @field_validator("recipients_token")
    @classmethod
    def validate_token_not_blank(cls, v: str) -> str:
        """Reject whitespace-only tokens."""
        if not v.strip():
            raise ValueError("recipientsToken cannot be blank")
        return v
