"""Firebase Admin SDK application lifecycle.

The Firebase app is process-wide state. ``FirebaseAppManager`` owns it with
an explicit initialize/shutdown lifecycle driven by the FastAPI lifespan, and
hands out the Firestore and messaging handles bound to that app.
"""

from threading import Lock
from typing import TYPE_CHECKING, Any, Dict, Optional

import firebase_admin
import structlog
from firebase_admin import credentials, firestore

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient
    from infrastructure.configuration.integrations.firebase import FirebaseSettings

logger = structlog.get_logger()

DEFAULT_APP_NAME = "chat-relay"


class FirebaseAppManager:
    """Owns the Firebase app used by the Firestore store and the FCM channel.

    Args:
        settings: Firebase integration settings
        app_name: Name the app is registered under in ``firebase_admin``
    """

    def __init__(
        self,
        settings: "FirebaseSettings",
        app_name: str = DEFAULT_APP_NAME,
    ) -> None:
        self._settings = settings
        self._app_name = app_name
        self._app: Optional[firebase_admin.App] = None
        self._lock = Lock()
        self._logger = logger.bind(component="firebase_app_manager")

    @property
    def is_initialized(self) -> bool:
        return self._app is not None

    def _build_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {
            "httpTimeout": self._settings.FIREBASE_HTTP_TIMEOUT_SECONDS,
        }
        if self._settings.FIREBASE_PROJECT_ID:
            options["projectId"] = self._settings.FIREBASE_PROJECT_ID
        return options

    def initialize(self) -> firebase_admin.App:
        """Initialize the Firebase app once. Safe to call repeatedly.

        Raises:
            FileNotFoundError, ValueError: service account file missing or invalid
        """
        with self._lock:
            if self._app is not None:
                return self._app

            credential = credentials.Certificate(
                self._settings.FIREBASE_CREDENTIALS_FILE
            )
            self._app = firebase_admin.initialize_app(
                credential,
                options=self._build_options(),
                name=self._app_name,
            )
            self._logger.info(
                "firebase_app_initialized",
                app_name=self._app_name,
                project_id=self._app.project_id,
            )
            return self._app

    def get_app(self) -> firebase_admin.App:
        """Return the Firebase app, initializing it on first use."""
        if self._app is None:
            return self.initialize()
        return self._app

    def firestore_client(self) -> "FirestoreClient":
        """Return the Firestore client bound to the managed app."""
        return firestore.client(app=self.get_app())

    def shutdown(self) -> None:
        """Delete the Firebase app. Idempotent."""
        with self._lock:
            if self._app is None:
                return
            firebase_admin.delete_app(self._app)
            self._app = None
            self._logger.info("firebase_app_deleted", app_name=self._app_name)
