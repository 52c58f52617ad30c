"""Chat module: user lookup, message persistence and the reply flow."""

from modules.chat.directory import FirestoreUserDirectory, UserDirectory
from modules.chat.errors import (
    ChatError,
    LookupFailedError,
    UserNotFoundError,
    WriteFailedError,
)
from modules.chat.factory import create_chat_backends
from modules.chat.memory import InMemoryMessageStore, InMemoryUserDirectory
from modules.chat.models import ConversationSummary, Message, ReplyOutcome, User
from modules.chat.service import ReplyService
from modules.chat.store import FirestoreMessageStore, MessageStore

__all__ = [
    "ChatError",
    "ConversationSummary",
    "FirestoreMessageStore",
    "FirestoreUserDirectory",
    "InMemoryMessageStore",
    "InMemoryUserDirectory",
    "LookupFailedError",
    "Message",
    "MessageStore",
    "ReplyOutcome",
    "ReplyService",
    "User",
    "UserDirectory",
    "UserNotFoundError",
    "WriteFailedError",
    "create_chat_backends",
]
