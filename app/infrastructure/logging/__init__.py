"""Structured logging infrastructure.

Centralized logging configuration and utilities for the chat relay using
structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_request_context(): Context manager for request-scoped logging
    - get_correlation_id(): Get current correlation ID from context

Example:
    from infrastructure.logging import (
        configure_logging,
        get_module_logger,
        bind_request_context,
    )

    # At application startup
    configure_logging(settings=settings)

    # In a module
    logger = get_module_logger()
    logger.info("module_initialized")

    # In request handler
    with bind_request_context(correlation_id="req-123"):
        logger.info("processing_request")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_request_context,
    get_correlation_id,
)

from infrastructure.logging.formatters import (
    add_app_info,
    mask_sensitive_data,
    truncate_large_values,
    add_environment_info,
    SENSITIVE_PATTERNS,
)

__all__ = [
    # Setup
    "configure_logging",
    "get_module_logger",
    # Context
    "bind_request_context",
    "get_correlation_id",
    # Formatters
    "add_app_info",
    "mask_sensitive_data",
    "truncate_large_values",
    "add_environment_info",
    "SENSITIVE_PATTERNS",
]
