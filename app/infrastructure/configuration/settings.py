"""Chat relay configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Integration settings
from infrastructure.configuration.integrations import (
    FirebaseSettings,
    ExpoSettings,
)

# Feature settings
from infrastructure.configuration.features import ChatFeatureSettings

# Infrastructure settings
from infrastructure.configuration.infrastructure import (
    DispatchSettings,
    ServerSettings,
)


class Settings(BaseSettings):
    """Chat relay configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.
    Settings are organized by concern:

    - **Integrations**: External services (Firebase, Expo push relay)
    - **Features**: Feature module configurations (chat datastore)
    - **Infrastructure**: Core system configurations (push dispatch, server)

    Environment Variables:
        PREFIX: Environment prefix, empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        credentials = settings.firebase.FIREBASE_CREDENTIALS_FILE
        timeout = settings.dispatch.timeout_seconds

        if settings.is_production:
            # Production-specific logic...
        ```
    """

    # Application-level settings
    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    # Integration settings
    firebase: FirebaseSettings
    expo: ExpoSettings

    # Feature settings
    chat: ChatFeatureSettings

    # Infrastructure settings
    dispatch: DispatchSettings
    server: ServerSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            # Integrations
            "firebase": FirebaseSettings,
            "expo": ExpoSettings,
            # Features
            "chat": ChatFeatureSettings,
            # Infrastructure
            "dispatch": DispatchSettings,
            "server": ServerSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
