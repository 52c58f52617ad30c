"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.chat import ChatFeatureSettings

__all__ = [
    "ChatFeatureSettings",
]
