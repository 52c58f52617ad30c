"""Infrastructure configuration module - public API.

Centralized configuration management for the chat relay using Pydantic
BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    DispatchSettings: Push dispatch settings class (for testing)
    ChatFeatureSettings: Chat datastore settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    push_url = settings.expo.EXPO_PUSH_URL
    backend = settings.chat.backend
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.features.chat import ChatFeatureSettings
from infrastructure.configuration.infrastructure.dispatch import DispatchSettings

__all__ = ["Settings", "ChatFeatureSettings", "DispatchSettings"]
