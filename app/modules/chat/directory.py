"""User directory adapters.

Read-only lookup of chat users by id.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

import structlog
from google.api_core import exceptions as google_exceptions

from modules.chat.errors import LookupFailedError
from modules.chat.models import User

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

logger = structlog.get_logger()


class UserDirectory(ABC):
    """Read-only user lookup."""

    @abstractmethod
    def get_user_details(self, user_id: str) -> Optional[User]:
        """Fetch a user by id.

        Args:
            user_id: Non-empty user identifier

        Returns:
            The user, or None when no such user exists (not an error)

        Raises:
            LookupFailedError: the datastore could not be read
        """
        pass


class FirestoreUserDirectory(UserDirectory):
    """User directory backed by the Firestore users collection.

    Args:
        client: Firestore client
        collection: Users collection name
    """

    def __init__(self, client: "FirestoreClient", collection: str = "users") -> None:
        self._client = client
        self._collection = collection

    def get_user_details(self, user_id: str) -> Optional[User]:
        try:
            snapshot = self._client.collection(self._collection).document(user_id).get()
        except google_exceptions.GoogleAPIError as exc:
            logger.error(
                "user_lookup_failed",
                user_id=user_id,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise LookupFailedError(user_id=user_id) from exc

        if not snapshot.exists:
            logger.debug("user_not_found", user_id=user_id)
            return None

        return User.from_document(snapshot.id, snapshot.to_dict() or {})
