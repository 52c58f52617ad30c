"""Message store adapters.

Append-only message writes, conversation summary merges and the batch
mark-as-read transaction.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import structlog
from google.api_core import exceptions as google_exceptions
from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from modules.chat.errors import WriteFailedError
from modules.chat.models import ConversationSummary, Message

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient
    from google.cloud.firestore import Query, Transaction

logger = structlog.get_logger()


class MessageStore(ABC):
    """Conversation and message persistence."""

    @abstractmethod
    def append_message(self, room_id: str, message: Message) -> str:
        """Write a new message under the conversation.

        The write is atomic per message. The identifier is generated by the
        store.

        Returns:
            The generated message id

        Raises:
            WriteFailedError: the write failed
        """
        pass

    @abstractmethod
    def upsert_conversation_summary(
        self, room_id: str, summary: ConversationSummary
    ) -> None:
        """Merge summary fields into the conversation record.

        Unrelated fields on the conversation are left untouched and the
        conversation is created when missing.

        Raises:
            WriteFailedError: the write failed
        """
        pass

    @abstractmethod
    def mark_unread_as_read(self, room_id: str, excluding_sender_id: str) -> int:
        """Flip ``read`` to true on every unread message not sent by the given user.

        All flags flip in one all-or-nothing transaction.

        Returns:
            Number of messages updated, 0 when nothing was unread

        Raises:
            WriteFailedError: the query or transaction failed
        """
        pass


@firestore.transactional
def _flip_read_flags(transaction: "Transaction", query: "Query") -> int:
    snapshots = query.get(transaction=transaction)
    for snapshot in snapshots:
        transaction.update(snapshot.reference, {"read": True})
    return len(snapshots)


class FirestoreMessageStore(MessageStore):
    """Message store backed by Firestore.

    Layout: ``{rooms}/{roomId}`` holds the summary, messages live in the
    ``{rooms}/{roomId}/{messages}`` subcollection under auto-generated ids.

    Args:
        client: Firestore client
        rooms_collection: Conversations collection name
        messages_collection: Messages subcollection name
    """

    def __init__(
        self,
        client: "FirestoreClient",
        rooms_collection: str = "rooms",
        messages_collection: str = "messages",
    ) -> None:
        self._client = client
        self._rooms_collection = rooms_collection
        self._messages_collection = messages_collection

    def _room(self, room_id: str):
        return self._client.collection(self._rooms_collection).document(room_id)

    def _messages(self, room_id: str):
        return self._room(room_id).collection(self._messages_collection)

    def append_message(self, room_id: str, message: Message) -> str:
        message_ref = self._messages(room_id).document()
        try:
            message_ref.set(message.to_document())
        except google_exceptions.GoogleAPIError as exc:
            logger.error(
                "message_write_failed",
                room_id=room_id,
                sender_id=message.sender_id,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise WriteFailedError(room_id=room_id) from exc

        logger.debug("message_written", room_id=room_id, message_id=message_ref.id)
        return message_ref.id

    def upsert_conversation_summary(
        self, room_id: str, summary: ConversationSummary
    ) -> None:
        try:
            self._room(room_id).set(summary.to_document(), merge=True)
        except google_exceptions.GoogleAPIError as exc:
            logger.error(
                "conversation_summary_write_failed",
                room_id=room_id,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise WriteFailedError(
                "Failed to update conversation", room_id=room_id
            ) from exc

    def mark_unread_as_read(self, room_id: str, excluding_sender_id: str) -> int:
        query = self._messages(room_id).where(
            filter=FieldFilter("senderId", "!=", excluding_sender_id)
        ).where(filter=FieldFilter("read", "==", False))

        try:
            return _flip_read_flags(self._client.transaction(), query)
        # The transactional wrapper raises ValueError once its retries run out
        except (google_exceptions.GoogleAPIError, ValueError) as exc:
            logger.error(
                "mark_as_read_failed",
                room_id=room_id,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise WriteFailedError(
                "Failed to mark messages as read", room_id=room_id
            ) from exc
