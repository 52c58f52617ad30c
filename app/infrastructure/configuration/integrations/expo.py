"""Expo push service integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class ExpoSettings(IntegrationSettings):
    """Expo push relay configuration.

    Environment Variables:
        EXPO_PUSH_URL: Expo push send endpoint
        EXPO_ACCESS_TOKEN: Optional access token when enhanced push security is on
        EXPO_ANDROID_CHANNEL_ID: Android notification channel id sent with each push
        EXPO_BODY_MAX_LENGTH: Maximum body length before truncation

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        push_url = settings.expo.EXPO_PUSH_URL
        ```
    """

    EXPO_PUSH_URL: str = Field(
        default="https://exp.host/--/api/v2/push/send", alias="EXPO_PUSH_URL"
    )
    EXPO_ACCESS_TOKEN: str | None = Field(default=None, alias="EXPO_ACCESS_TOKEN")
    EXPO_ANDROID_CHANNEL_ID: str = Field(
        default="fcm_fallback_notification_channel", alias="EXPO_ANDROID_CHANNEL_ID"
    )
    EXPO_BODY_MAX_LENGTH: int = Field(default=100, alias="EXPO_BODY_MAX_LENGTH")
