"""Standard API response wrappers for consistent response formatting.

Every chat endpoint answers with ``{"success": true, "message": ...}`` or
``{"success": false, "error": ...}``; these models define both shapes.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Generic success response wrapper.

    Attributes:
        success: Whether the operation succeeded
        message: Human-readable outcome
        data: Optional response payload

    Example:
        >>> APIResponse(success=True, message="Reply sent successfully").model_dump(
        ...     exclude_none=True
        ... )
        {'success': True, 'message': 'Reply sent successfully'}
    """

    success: bool = Field(default=True, description="Whether the operation succeeded")
    message: str | None = Field(default=None, description="Human-readable outcome")
    data: T | None = Field(default=None, description="Optional response payload")


class ErrorResponse(BaseModel):
    """Standard error response wrapper.

    ``error`` is always a fixed human-readable message; exception text and
    stack traces never end up here.

    Attributes:
        success: Always False for error responses
        error: Human-readable error message
        error_code: Machine-readable error code
        details: Optional additional error details (e.g., validation errors)

    Example:
        >>> ErrorResponse(
        ...     error="One or both users not found", error_code="USER_NOT_FOUND"
        ... ).model_dump(exclude_none=True)
        {'success': False, 'error': 'One or both users not found', 'error_code': 'USER_NOT_FOUND'}
    """

    success: bool = Field(default=False, description="Always False for error responses")
    error: str = Field(..., description="Human-readable error message")
    error_code: str | None = Field(
        default=None, description="Machine-readable error code"
    )
    details: dict[str, Any] | list[Any] | None = Field(
        default=None, description="Optional additional error details"
    )
