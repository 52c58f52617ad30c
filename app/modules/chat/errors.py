"""Errors for the chat module.

Each error carries the HTTP status and the public message the API layer
renders. The public message is fixed text; underlying exception details go
to the logs only.
"""

from typing import Any, Optional


class ChatError(Exception):
    """Base class for chat errors surfaced to API callers."""

    status_code: int = 500
    error_code: str = "CHAT_ERROR"
    public_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, **context: Any):
        super().__init__(message or self.public_message)
        self.message = message or self.public_message
        self.context = context


class UserNotFoundError(ChatError):
    """Sender or recipient does not exist. Nothing was written."""

    status_code = 404
    error_code = "USER_NOT_FOUND"
    public_message = "One or both users not found"


class LookupFailedError(ChatError):
    """The user directory could not be read (connectivity, permissions)."""

    error_code = "LOOKUP_FAILED"
    public_message = "Failed to look up users"


class WriteFailedError(ChatError):
    """A datastore write or transaction failed.

    A message write that succeeded before the failure is not retracted.
    """

    error_code = "WRITE_FAILED"
    public_message = "Failed to save message"
