"""Firebase integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class FirebaseSettings(IntegrationSettings):
    """Firebase Admin SDK configuration.

    The same Firebase app backs both the Firestore chat datastore and the
    Cloud Messaging (FCM) push channel.

    Environment Variables:
        FIREBASE_CREDENTIALS_FILE: Path to the service account JSON key
        FIREBASE_PROJECT_ID: Optional project id override
        FIREBASE_HTTP_TIMEOUT_SECONDS: HTTP timeout for Admin SDK calls

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        credentials_file = settings.firebase.FIREBASE_CREDENTIALS_FILE
        ```
    """

    FIREBASE_CREDENTIALS_FILE: str = Field(
        default="serviceAccountKey.json", alias="FIREBASE_CREDENTIALS_FILE"
    )
    FIREBASE_PROJECT_ID: str | None = Field(default=None, alias="FIREBASE_PROJECT_ID")
    FIREBASE_HTTP_TIMEOUT_SECONDS: float = Field(
        default=5.0, alias="FIREBASE_HTTP_TIMEOUT_SECONDS"
    )
