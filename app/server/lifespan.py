from contextlib import asynccontextmanager
from typing import AsyncIterator, TYPE_CHECKING

from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.logging.setup import configure_logging
from infrastructure.services import (
    get_firebase_manager,
    get_push_dispatcher,
    get_reply_service,
    get_settings,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _get_logger(settings: "Settings") -> BoundLogger:
    return configure_logging(settings=settings)


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


def _requires_firebase(settings: "Settings") -> bool:
    return settings.chat.backend == "firestore" or settings.dispatch.fcm_enabled


def _initialize_firebase(settings: "Settings", logger: BoundLogger) -> None:
    if not _requires_firebase(settings):
        logger.info("firebase_skipped", reason="not_required")
        return
    # Fail fast: a missing service account means no datastore and no FCM
    get_firebase_manager().initialize()


def _shutdown_services(settings: "Settings", logger: BoundLogger) -> None:
    # Drain in-flight pushes before the Firebase app they may use goes away
    get_reply_service().shutdown()
    get_push_dispatcher().shutdown(wait=True)
    logger.info("push_dispatcher_stopped")

    if _requires_firebase(settings):
        get_firebase_manager().shutdown()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logger = _get_logger(settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)

    _initialize_firebase(settings, logger)
    app.state.reply_service = get_reply_service()
    app.state.available_channels = get_push_dispatcher().get_available_channels()
    logger.info(
        "push_channels_registered", channels=app.state.available_channels
    )

    yield

    logger.info("application_shutdown")
    _shutdown_services(settings, logger)
