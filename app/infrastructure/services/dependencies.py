"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated
from fastapi import Depends
from infrastructure.configuration import Settings
from infrastructure.notifications import PushDispatcher
from modules.chat import MessageStore, ReplyService, UserDirectory
from infrastructure.services.providers import (
    get_settings,
    get_user_directory,
    get_message_store,
    get_push_dispatcher,
    get_reply_service,
)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Chat datastore adapters (Firestore or in-memory per CHAT_STORE_BACKEND)
UserDirectoryDep = Annotated[UserDirectory, Depends(get_user_directory)]
MessageStoreDep = Annotated[MessageStore, Depends(get_message_store)]

# Push dispatcher with the enabled channels registered
PushDispatcherDep = Annotated[PushDispatcher, Depends(get_push_dispatcher)]

# Reply orchestration
ReplyServiceDep = Annotated[ReplyService, Depends(get_reply_service)]

__all__ = [
    "SettingsDep",
    "UserDirectoryDep",
    "MessageStoreDep",
    "PushDispatcherDep",
    "ReplyServiceDep",
]
