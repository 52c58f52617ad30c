"""HTTP server infrastructure settings."""

from typing import List

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """Server and application runtime configuration.

    Environment Variables:
        PORT: Port the HTTP server listens on (default: 3000)
        CORS_ALLOW_ORIGINS: Comma separated list of allowed origins (default: *)
        RATE_LIMIT_DEFAULT: Default rate limit for chat endpoints
        RATE_LIMIT_HEALTH: Rate limit for health and version endpoints

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        origins = settings.server.cors_origins
        ```
    """

    PORT: int = Field(default=3000, alias="PORT")
    CORS_ALLOW_ORIGINS: str = Field(default="*", alias="CORS_ALLOW_ORIGINS")
    RATE_LIMIT_DEFAULT: str = Field(default="60/minute", alias="RATE_LIMIT_DEFAULT")
    # Load balancer health checks hit /health every few seconds
    RATE_LIMIT_HEALTH: str = Field(default="50/minute", alias="RATE_LIMIT_HEALTH")

    @property
    def cors_origins(self) -> List[str]:
        """Allowed CORS origins parsed from the comma separated setting."""
        return [
            origin.strip()
            for origin in self.CORS_ALLOW_ORIGINS.split(",")
            if origin.strip()
        ]
