"""Exception handlers rendering errors as ``{"success": false, "error": ...}``."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from infrastructure.logging import get_module_logger
from infrastructure.models import ErrorResponse
from modules.chat.errors import ChatError

logger = get_module_logger()


def _error_response(status_code: int, error: str, error_code: str, details=None):
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error=error, error_code=error_code, details=details
        ).model_dump(exclude_none=True),
    )


async def chat_error_handler(request: Request, exc: ChatError) -> JSONResponse:
    log = logger.warning if exc.status_code < 500 else logger.error
    log(
        "chat_request_failed",
        path=request.url.path,
        error_code=exc.error_code,
        status_code=exc.status_code,
        **exc.context,
    )
    return _error_response(exc.status_code, exc.message, exc.error_code)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Field locations and messages only; raw input values stay out of the response
    details = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
    logger.info("request_validation_failed", path=request.url.path, errors=details)
    return _error_response(400, "Invalid request body", "VALIDATION_ERROR", details)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled_request_error",
        path=request.url.path,
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return _error_response(500, "Internal server error", "INTERNAL_ERROR")


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the API error handlers to the application."""
    app.add_exception_handler(ChatError, chat_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
