"""Firebase client management."""

from infrastructure.clients.firebase.app import FirebaseAppManager

__all__ = ["FirebaseAppManager"]
