"""Datastore models for the chat module.

Lightweight dataclasses mirroring the Firestore document layout:

- ``users/{userId}``: username, deviceToken, profileUrl
- ``rooms/{roomId}``: lastMessage, lastMessageTimestamp, lastMessageSenderId
- ``rooms/{roomId}/messages/{messageId}``: content, senderId, senderName,
  createdAt, delivered, read
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class User:
    """Directory entry for a chat user.

    Attributes:
        user_id: Document id in the users collection
        username: Display name, used as the push title for replies
        device_token: Expo or FCM device token, if the user registered one
        profile_url: Profile image reference
    """

    user_id: str
    username: str
    device_token: Optional[str] = None
    profile_url: Optional[str] = None

    @property
    def has_device(self) -> bool:
        return bool(self.device_token and self.device_token.strip())

    @classmethod
    def from_document(cls, user_id: str, doc: Dict[str, Any]) -> "User":
        return cls(
            user_id=user_id,
            username=doc.get("username") or "",
            device_token=(doc.get("deviceToken") or "").strip() or None,
            profile_url=doc.get("profileUrl"),
        )


@dataclass
class Message:
    """A message in a conversation.

    ``delivered`` records that the message reached the datastore and is true
    at creation whatever happens to the push. ``read`` only ever moves from
    false to true.
    """

    content: str
    sender_id: str
    sender_name: str
    created_at: datetime
    delivered: bool = True
    read: bool = False

    def to_document(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "senderId": self.sender_id,
            "senderName": self.sender_name,
            "createdAt": self.created_at,
            "delivered": self.delivered,
            "read": self.read,
        }


@dataclass
class ConversationSummary:
    """Summary fields merged into the conversation document on every reply."""

    last_message: str
    last_message_timestamp: datetime
    last_message_sender_id: str

    def to_document(self) -> Dict[str, Any]:
        return {
            "lastMessage": self.last_message,
            "lastMessageTimestamp": self.last_message_timestamp,
            "lastMessageSenderId": self.last_message_sender_id,
        }


@dataclass(frozen=True)
class ReplyOutcome:
    """Result of a successful reply.

    Attributes:
        room_id: Conversation the reply was written to
        message_id: Generated id of the new message
        push_attempted: Whether a push dispatch was attempted. Its outcome is
            deliberately not part of the reply result.
    """

    room_id: str
    message_id: str
    push_attempted: bool
