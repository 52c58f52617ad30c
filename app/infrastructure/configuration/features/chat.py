"""Chat feature settings."""

from typing import Literal

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class ChatFeatureSettings(FeatureSettings):
    """Chat datastore configuration.

    Environment Variables:
        CHAT_STORE_BACKEND: 'firestore' (default) or 'memory'
        CHAT_USERS_COLLECTION: Users collection name (default: users)
        CHAT_ROOMS_COLLECTION: Conversations collection name (default: rooms)
        CHAT_MESSAGES_COLLECTION: Messages subcollection name (default: messages)
        CHAT_LOOKUP_WORKERS: Threads used for concurrent user lookups

    Store Backends:
        - firestore: Cloud Firestore through the Firebase Admin SDK (production)
        - memory: In-process dictionaries (development, testing)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.chat.backend == "memory":
            ...
        ```
    """

    backend: Literal["firestore", "memory"] = Field(
        default="firestore",
        alias="CHAT_STORE_BACKEND",
        description="Datastore backend for users, rooms and messages",
    )
    users_collection: str = Field(default="users", alias="CHAT_USERS_COLLECTION")
    rooms_collection: str = Field(default="rooms", alias="CHAT_ROOMS_COLLECTION")
    messages_collection: str = Field(
        default="messages", alias="CHAT_MESSAGES_COLLECTION"
    )
    lookup_workers: int = Field(
        default=4,
        alias="CHAT_LOOKUP_WORKERS",
        ge=2,
        description="Worker threads for concurrent sender/recipient lookups",
    )
