"""Unit tests for server.lifespan module."""

from contextlib import ExitStack
from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI

from server import lifespan as lifespan_module

MODULE = "server.lifespan"


@pytest.fixture
def patched_providers(mock_settings, mock_services):
    with ExitStack() as stack:
        stack.enter_context(
            patch(f"{MODULE}.get_settings", return_value=mock_settings)
        )
        stack.enter_context(
            patch(
                f"{MODULE}.get_firebase_manager",
                return_value=mock_services.firebase,
            )
        )
        stack.enter_context(
            patch(
                f"{MODULE}.get_push_dispatcher",
                return_value=mock_services.dispatcher,
            )
        )
        stack.enter_context(
            patch(
                f"{MODULE}.get_reply_service",
                return_value=mock_services.reply_service,
            )
        )
        yield mock_services


@pytest.mark.unit
class TestRequiresFirebase:
    def test_memory_backend_without_fcm(self, mock_settings):
        assert lifespan_module._requires_firebase(mock_settings) is False

    def test_firestore_backend(self, mock_settings):
        mock_settings.chat.backend = "firestore"

        assert lifespan_module._requires_firebase(mock_settings) is True

    def test_fcm_channel(self, mock_settings):
        mock_settings.dispatch.fcm_enabled = True

        assert lifespan_module._requires_firebase(mock_settings) is True


@pytest.mark.unit
class TestListConfigs:
    def test_logs_settings_sections(self, mock_settings):
        logger = MagicMock()

        lifespan_module._list_configs(mock_settings, logger)

        logger.info.assert_any_call(
            "configuration_initialized", base_settings=[{"PREFIX": "dev-"}]
        )
        logger.info.assert_any_call(
            "configuration_loaded", config_setting="chat", keys=["backend"]
        )


@pytest.mark.unit
class TestLifespan:
    async def test_startup_and_shutdown_without_firebase(self, patched_providers):
        app = FastAPI()

        async with lifespan_module.lifespan(app):
            assert app.state.reply_service is patched_providers.reply_service
            assert app.state.available_channels == ["expo"]
            patched_providers.dispatcher.shutdown.assert_not_called()

        patched_providers.firebase.initialize.assert_not_called()
        patched_providers.reply_service.shutdown.assert_called_once_with()
        patched_providers.dispatcher.shutdown.assert_called_once_with(wait=True)
        patched_providers.firebase.shutdown.assert_not_called()

    async def test_firebase_lifecycle(self, patched_providers, mock_settings):
        mock_settings.chat.backend = "firestore"
        app = FastAPI()

        async with lifespan_module.lifespan(app):
            patched_providers.firebase.initialize.assert_called_once_with()

        patched_providers.firebase.shutdown.assert_called_once_with()

    async def test_dispatcher_drains_before_firebase_shutdown(
        self, patched_providers, mock_settings
    ):
        mock_settings.dispatch.fcm_enabled = True
        calls = []
        patched_providers.dispatcher.shutdown.side_effect = (
            lambda wait: calls.append("dispatcher")
        )
        patched_providers.firebase.shutdown.side_effect = lambda: calls.append(
            "firebase"
        )

        async with lifespan_module.lifespan(FastAPI()):
            pass

        assert calls == ["dispatcher", "firebase"]

    async def test_missing_credentials_fail_startup(
        self, patched_providers, mock_settings
    ):
        mock_settings.chat.backend = "firestore"
        patched_providers.firebase.initialize.side_effect = FileNotFoundError(
            "serviceAccountKey.json"
        )

        with pytest.raises(FileNotFoundError):
            async with lifespan_module.lifespan(FastAPI()):
                pass
