"""
Unit tests for dependency injection providers.

Tests cover:
- get_settings() caching behavior
- Chat backend, dispatcher and reply service wiring
- Dependency override pattern for testing
"""

import pytest
from unittest.mock import MagicMock, patch
from fastapi.testclient import TestClient
from fastapi import FastAPI

from infrastructure.configuration import Settings
from infrastructure.notifications import PushDispatcher, TokenKind
from infrastructure.services import providers
from infrastructure.services.dependencies import ReplyServiceDep, SettingsDep
from modules.chat import InMemoryMessageStore, InMemoryUserDirectory, ReplyService

CACHED_PROVIDERS = (
    providers.get_settings,
    providers.get_firebase_manager,
    providers._get_chat_backends,
    providers.get_push_dispatcher,
    providers.get_reply_service,
)


@pytest.fixture
def clean_providers(monkeypatch):
    """Fresh provider caches on the in-memory backend."""
    monkeypatch.setenv("CHAT_STORE_BACKEND", "memory")
    for provider in CACHED_PROVIDERS:
        provider.cache_clear()
    yield
    if providers.get_push_dispatcher.cache_info().currsize:
        providers.get_push_dispatcher().shutdown()
    if providers.get_reply_service.cache_info().currsize:
        providers.get_reply_service().shutdown()
    for provider in CACHED_PROVIDERS:
        provider.cache_clear()


@pytest.mark.unit
class TestGetSettings:
    def test_get_settings_returns_cached_instance(self, clean_providers):
        result = providers.get_settings()

        assert isinstance(result, Settings)
        assert providers.get_settings() is result

    def test_get_settings_cache_can_be_cleared(self, clean_providers):
        instance1 = providers.get_settings()
        providers.get_settings.cache_clear()

        assert providers.get_settings() is not instance1


@pytest.mark.unit
class TestChatProviders:
    def test_memory_backends_are_shared(self, clean_providers):
        directory = providers.get_user_directory()
        store = providers.get_message_store()

        assert isinstance(directory, InMemoryUserDirectory)
        assert isinstance(store, InMemoryMessageStore)
        assert providers.get_user_directory() is directory
        assert providers.get_message_store() is store

    def test_memory_backend_does_not_touch_firebase(self, clean_providers):
        with patch.object(providers, "get_firebase_manager") as mock_manager:
            providers.get_message_store()

        mock_manager.assert_not_called()

    def test_firestore_backend_uses_firebase_manager(
        self, clean_providers, monkeypatch
    ):
        monkeypatch.setenv("CHAT_STORE_BACKEND", "firestore")
        providers.get_settings.cache_clear()

        with patch.object(
            providers, "get_firebase_manager"
        ) as mock_manager, patch.object(
            providers, "create_chat_backends", return_value=("dir", "store")
        ) as mock_create:
            assert providers.get_user_directory() == "dir"

        mock_create.assert_called_once_with(
            providers.get_settings().chat, firebase=mock_manager.return_value
        )

    def test_reply_service_is_wired(self, clean_providers):
        service = providers.get_reply_service()

        assert isinstance(service, ReplyService)
        assert providers.get_reply_service() is service
        assert service._store is providers.get_message_store()
        assert service._dispatcher is providers.get_push_dispatcher()


@pytest.mark.unit
class TestPushDispatcherProvider:
    def test_both_channels_registered(self, clean_providers):
        dispatcher = providers.get_push_dispatcher()

        assert isinstance(dispatcher, PushDispatcher)
        assert set(dispatcher.channels) == {TokenKind.RELAY, TokenKind.PROVIDER}
        assert dispatcher.timeout_seconds == 5.0

    def test_disabled_fcm_channel(self, clean_providers, monkeypatch):
        monkeypatch.setenv("PUSH_FCM_ENABLED", "false")
        monkeypatch.setenv("PUSH_TIMEOUT_SECONDS", "2.5")

        dispatcher = providers.get_push_dispatcher()

        assert dispatcher.get_available_channels() == ["expo"]
        assert dispatcher.timeout_seconds == 2.5


@pytest.mark.unit
class TestDependencyOverridePattern:
    def test_settings_dep_with_dependency_override(self):
        app = FastAPI()

        @app.get("/config")
        def get_config(settings: SettingsDep) -> dict:
            return {"prefix": settings.PREFIX}

        mock_settings = MagicMock()
        mock_settings.PREFIX = "test-"
        app.dependency_overrides[providers.get_settings] = lambda: mock_settings

        response = TestClient(app).get("/config")

        assert response.json() == {"prefix": "test-"}

    def test_reply_service_dep_with_dependency_override(self):
        app = FastAPI()

        @app.post("/read")
        def read(service: ReplyServiceDep) -> dict:
            return {"count": service.mark_as_read("r1", "u2")}

        mock_service = MagicMock()
        mock_service.mark_as_read.return_value = 4
        app.dependency_overrides[providers.get_reply_service] = lambda: mock_service

        response = TestClient(app).post("/read")

        assert response.json() == {"count": 4}
