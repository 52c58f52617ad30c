"""Chat backend factory.

Selects the user directory and message store implementations from the
``CHAT_STORE_BACKEND`` setting.
"""

from typing import TYPE_CHECKING, Optional, Tuple

import structlog

from modules.chat.directory import FirestoreUserDirectory, UserDirectory
from modules.chat.memory import InMemoryMessageStore, InMemoryUserDirectory
from modules.chat.store import FirestoreMessageStore, MessageStore

if TYPE_CHECKING:
    from infrastructure.clients.firebase import FirebaseAppManager
    from infrastructure.configuration import ChatFeatureSettings

logger = structlog.get_logger()


def create_chat_backends(
    settings: "ChatFeatureSettings",
    firebase: Optional["FirebaseAppManager"] = None,
) -> Tuple[UserDirectory, MessageStore]:
    """Build the user directory and message store for the configured backend.

    Args:
        settings: Chat feature settings
        firebase: Firebase app manager, required for the firestore backend

    Returns:
        ``(directory, store)`` sharing the same backend

    Raises:
        ValueError: firestore backend selected without a Firebase manager
    """
    if settings.backend == "memory":
        logger.info("chat_backend_selected", backend="memory")
        return InMemoryUserDirectory(), InMemoryMessageStore()

    if firebase is None:
        raise ValueError("The firestore chat backend requires a Firebase app manager")

    client = firebase.firestore_client()
    logger.info(
        "chat_backend_selected",
        backend="firestore",
        users_collection=settings.users_collection,
        rooms_collection=settings.rooms_collection,
    )
    return (
        FirestoreUserDirectory(client, collection=settings.users_collection),
        FirestoreMessageStore(
            client,
            rooms_collection=settings.rooms_collection,
            messages_collection=settings.messages_collection,
        ),
    )
