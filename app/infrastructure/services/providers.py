"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache
from typing import List, Tuple

from infrastructure.clients.firebase import FirebaseAppManager
from infrastructure.configuration import Settings
from infrastructure.notifications import (
    ExpoChannel,
    FcmChannel,
    PushChannel,
    PushDispatcher,
)
from modules.chat import (
    MessageStore,
    ReplyService,
    UserDirectory,
    create_chat_backends,
)


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process,
    even if called from multiple packages.

    Infrastructure packages should use this directly to ensure singleton consistency:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/version")
        def get_version(settings: SettingsDep):
            return {"version": settings.GIT_SHA}

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_firebase_manager() -> FirebaseAppManager:
    """
    Get application-scoped Firebase app manager singleton.

    The manager is created uninitialized; the application lifespan (or the
    first Firestore/FCM call) initializes it.

    Returns:
        FirebaseAppManager: Cached manager bound to the Firebase settings.
    """
    return FirebaseAppManager(settings=get_settings().firebase)


@lru_cache
def _get_chat_backends() -> Tuple[UserDirectory, MessageStore]:
    settings = get_settings()
    firebase = None if settings.chat.backend == "memory" else get_firebase_manager()
    return create_chat_backends(settings.chat, firebase=firebase)


def get_user_directory() -> UserDirectory:
    """
    Get the application-scoped user directory.

    Returns:
        UserDirectory: Firestore or in-memory directory per CHAT_STORE_BACKEND.
    """
    return _get_chat_backends()[0]


def get_message_store() -> MessageStore:
    """
    Get the application-scoped message store.

    Returns:
        MessageStore: Firestore or in-memory store per CHAT_STORE_BACKEND.
    """
    return _get_chat_backends()[1]


@lru_cache
def get_push_dispatcher() -> PushDispatcher:
    """
    Get application-scoped push dispatcher singleton.

    Channels are registered according to the dispatch settings. A token whose
    channel is disabled is reported as undeliverable, never sent.

    Returns:
        PushDispatcher: Cached dispatcher with its channels registered.

    Usage:
        @router.post("/notify")
        def notify(dispatcher: PushDispatcherDep):
            result = dispatcher.dispatch(notification)
            if not result.is_success:
                ...
    """
    settings = get_settings()
    channels: List[PushChannel] = []
    if settings.dispatch.expo_enabled:
        channels.append(
            ExpoChannel(settings.expo, timeout_seconds=settings.dispatch.timeout_seconds)
        )
    if settings.dispatch.fcm_enabled:
        channels.append(FcmChannel(get_firebase_manager()))
    return PushDispatcher(
        channels=channels,
        timeout_seconds=settings.dispatch.timeout_seconds,
        max_workers=settings.dispatch.max_workers,
    )


@lru_cache
def get_reply_service() -> ReplyService:
    """
    Get application-scoped reply service singleton.

    Returns:
        ReplyService: Cached service wired with the directory, store and dispatcher.

    Usage:
        @router.post("/reply")
        def reply(request: ReplyRequest, service: ReplyServiceDep):
            service.reply(request)
    """
    settings = get_settings()
    return ReplyService(
        directory=get_user_directory(),
        store=get_message_store(),
        dispatcher=get_push_dispatcher(),
        lookup_workers=settings.chat.lookup_workers,
    )
