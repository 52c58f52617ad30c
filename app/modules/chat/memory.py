"""In-memory chat backends for local development and tests.

Mirror the Firestore document layout with plain dictionaries guarded by a
lock, so the batch mark-as-read stays all-or-nothing.
"""

import uuid
from copy import deepcopy
from threading import Lock
from typing import Any, Dict, Iterable, List, Optional, Tuple

from modules.chat.directory import UserDirectory
from modules.chat.models import ConversationSummary, Message, User
from modules.chat.store import MessageStore


class InMemoryUserDirectory(UserDirectory):
    """User directory held in a dictionary keyed by user id."""

    def __init__(self, users: Optional[Iterable[User]] = None) -> None:
        self._users: Dict[str, User] = {user.user_id: user for user in users or []}
        self._lock = Lock()

    def add_user(self, user: User) -> None:
        with self._lock:
            self._users[user.user_id] = user

    def get_user_details(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)


class InMemoryMessageStore(MessageStore):
    """Message store held in dictionaries keyed like the Firestore paths."""

    def __init__(self) -> None:
        self._rooms: Dict[str, Dict[str, Any]] = {}
        self._messages: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self._lock = Lock()

    def append_message(self, room_id: str, message: Message) -> str:
        message_id = uuid.uuid4().hex
        with self._lock:
            self._messages.setdefault(room_id, {})[message_id] = message.to_document()
        return message_id

    def upsert_conversation_summary(
        self, room_id: str, summary: ConversationSummary
    ) -> None:
        with self._lock:
            self._rooms.setdefault(room_id, {}).update(summary.to_document())

    def mark_unread_as_read(self, room_id: str, excluding_sender_id: str) -> int:
        with self._lock:
            unread = [
                doc
                for doc in self._messages.get(room_id, {}).values()
                if doc["senderId"] != excluding_sender_id and doc["read"] is False
            ]
            for doc in unread:
                doc["read"] = True
            return len(unread)

    def get_room(self, room_id: str) -> Optional[Dict[str, Any]]:
        """Snapshot of the conversation document, None when missing."""
        with self._lock:
            room = self._rooms.get(room_id)
            return deepcopy(room) if room is not None else None

    def set_room(self, room_id: str, doc: Dict[str, Any]) -> None:
        """Replace the conversation document (seeding test and dev data)."""
        with self._lock:
            self._rooms[room_id] = deepcopy(doc)

    def list_messages(self, room_id: str) -> List[Tuple[str, Dict[str, Any]]]:
        """Snapshot of ``(message_id, document)`` pairs in insertion order."""
        with self._lock:
            return [
                (message_id, deepcopy(doc))
                for message_id, doc in self._messages.get(room_id, {}).items()
            ]
