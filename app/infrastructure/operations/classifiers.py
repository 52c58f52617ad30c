"""Error classifiers for push provider exceptions.

Converts provider-specific exceptions (Expo over ``requests``, FCM over the
Firebase Admin SDK) into standardized OperationResult objects so channels
never have to raise.

Usage:
    from infrastructure.operations.classifiers import classify_http_error

    try:
        response = session.post(url, json=payload, timeout=5)
        response.raise_for_status()
    except requests.RequestException as exc:
        return classify_http_error(exc)
"""

from typing import Optional

import requests
from firebase_admin import exceptions as firebase_exceptions
from firebase_admin import messaging

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus


def _retry_after_seconds(response: Optional[requests.Response]) -> int:
    retry_after = 60
    if response is None:
        return retry_after
    header_value = response.headers.get("retry-after")
    if header_value:
        try:
            retry_after = int(header_value)
        except (ValueError, TypeError):
            pass
    return retry_after


def classify_http_error(exc: Exception) -> OperationResult:
    """Classify ``requests`` errors into OperationResult.

    Status Code Mapping:
    - Timeout / connection failure: TRANSIENT_ERROR
    - 429: Rate limiting -> TRANSIENT_ERROR with retry_after
    - 401/403: UNAUTHORIZED
    - 404: NOT_FOUND
    - 5xx: TRANSIENT_ERROR
    - Other 4xx: PERMANENT_ERROR

    Args:
        exc: Exception raised while calling an HTTP push relay

    Returns:
        OperationResult with appropriate status, message and error_code
    """
    if isinstance(exc, requests.Timeout):
        return OperationResult.transient_error(
            "Push relay request timed out", error_code="TIMEOUT"
        )

    if not isinstance(exc, requests.HTTPError):
        return OperationResult.transient_error(
            f"Connection error: {type(exc).__name__}: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    response = exc.response
    status_code: Optional[int] = response.status_code if response is not None else None

    if status_code == 429:
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            "Push relay rate limited",
            error_code="RATE_LIMITED",
            retry_after=_retry_after_seconds(response),
        )

    if status_code in (401, 403):
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            "Push relay rejected credentials",
            error_code="UNAUTHORIZED",
        )

    if status_code == 404:
        return OperationResult.error(
            OperationStatus.NOT_FOUND,
            "Push relay endpoint not found",
            error_code="NOT_FOUND",
        )

    if status_code and 500 <= status_code < 600:
        return OperationResult.transient_error(
            f"Push relay server error ({status_code})",
            error_code="SERVER_ERROR",
        )

    return OperationResult.permanent_error(
        f"Push relay client error ({status_code})",
        error_code="HTTP_ERROR",
    )


def classify_firebase_error(exc: Exception) -> OperationResult:
    """Classify Firebase Admin SDK errors into OperationResult.

    Error Mapping:
    - UnregisteredError: device token no longer valid -> NOT_FOUND
    - SenderIdMismatchError: token belongs to another project -> PERMANENT_ERROR
    - QuotaExceededError / RESOURCE_EXHAUSTED: TRANSIENT_ERROR with retry_after
    - UNAVAILABLE / DEADLINE_EXCEEDED / INTERNAL / UNKNOWN: TRANSIENT_ERROR
    - UNAUTHENTICATED / PERMISSION_DENIED: UNAUTHORIZED
    - INVALID_ARGUMENT and ValueError (malformed message): PERMANENT_ERROR

    Args:
        exc: Exception raised by ``firebase_admin.messaging``

    Returns:
        OperationResult with appropriate status, message and error_code
    """
    if isinstance(exc, messaging.UnregisteredError):
        return OperationResult.error(
            OperationStatus.NOT_FOUND,
            "Device token is not registered",
            error_code="UNREGISTERED",
        )

    if isinstance(exc, messaging.SenderIdMismatchError):
        return OperationResult.permanent_error(
            "Device token belongs to a different sender",
            error_code="SENDER_ID_MISMATCH",
        )

    if isinstance(exc, messaging.QuotaExceededError):
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            "FCM quota exceeded",
            error_code="RATE_LIMITED",
            retry_after=60,
        )

    if isinstance(exc, ValueError):
        return OperationResult.permanent_error(
            f"Invalid push message: {str(exc)}",
            error_code="INVALID_MESSAGE",
        )

    if not isinstance(exc, firebase_exceptions.FirebaseError):
        return OperationResult.transient_error(
            f"FCM error: {type(exc).__name__}: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    code = exc.code
    if code == firebase_exceptions.RESOURCE_EXHAUSTED:
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            "FCM rate limited",
            error_code="RATE_LIMITED",
            retry_after=60,
        )

    if code in (
        firebase_exceptions.UNAVAILABLE,
        firebase_exceptions.DEADLINE_EXCEEDED,
        firebase_exceptions.INTERNAL,
        firebase_exceptions.UNKNOWN,
    ):
        return OperationResult.transient_error(
            f"FCM temporarily unavailable ({code})",
            error_code="SERVER_ERROR",
        )

    if code in (
        firebase_exceptions.UNAUTHENTICATED,
        firebase_exceptions.PERMISSION_DENIED,
    ):
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            "FCM rejected credentials",
            error_code="UNAUTHORIZED",
        )

    if code == firebase_exceptions.NOT_FOUND:
        return OperationResult.error(
            OperationStatus.NOT_FOUND,
            "FCM target not found",
            error_code="NOT_FOUND",
        )

    return OperationResult.permanent_error(
        f"FCM rejected message ({code})",
        error_code="FCM_ERROR",
    )
