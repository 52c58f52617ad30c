"""Push dispatch infrastructure settings."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class DispatchSettings(InfrastructureSettings):
    """Push dispatch configuration.

    Push delivery is best effort: requests wait at most ``timeout_seconds``
    for a channel to answer before the outcome is recorded as a timeout.

    Environment Variables:
        PUSH_TIMEOUT_SECONDS: Upper bound on waiting for a push send (default: 5)
        PUSH_MAX_WORKERS: Worker threads for push sends (default: 8)
        PUSH_FCM_ENABLED: Register the FCM channel (default: True)
        PUSH_EXPO_ENABLED: Register the Expo channel (default: True)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        timeout = settings.dispatch.timeout_seconds
        ```
    """

    timeout_seconds: float = Field(
        default=5.0,
        alias="PUSH_TIMEOUT_SECONDS",
        gt=0,
        description="Maximum seconds a request waits for a push send",
    )
    max_workers: int = Field(
        default=8,
        alias="PUSH_MAX_WORKERS",
        ge=1,
        description="Worker threads used for push sends",
    )
    fcm_enabled: bool = Field(
        default=True,
        alias="PUSH_FCM_ENABLED",
        description="Deliver provider tokens through Firebase Cloud Messaging",
    )
    expo_enabled: bool = Field(
        default=True,
        alias="PUSH_EXPO_ENABLED",
        description="Deliver relay tokens through the Expo push service",
    )
