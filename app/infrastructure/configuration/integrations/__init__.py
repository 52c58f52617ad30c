"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.firebase import FirebaseSettings
from infrastructure.configuration.integrations.expo import ExpoSettings

__all__ = [
    "FirebaseSettings",
    "ExpoSettings",
]
