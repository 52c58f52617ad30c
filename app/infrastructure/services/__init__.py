"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    UserDirectoryDep,
    MessageStoreDep,
    PushDispatcherDep,
    ReplyServiceDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_firebase_manager,
    get_user_directory,
    get_message_store,
    get_push_dispatcher,
    get_reply_service,
)

__all__ = [
    "SettingsDep",
    "UserDirectoryDep",
    "MessageStoreDep",
    "PushDispatcherDep",
    "ReplyServiceDep",
    "get_settings",
    "get_firebase_manager",
    "get_user_directory",
    "get_message_store",
    "get_push_dispatcher",
    "get_reply_service",
]
