"""Push dispatcher with token-based channel routing.

Routes a single notification to exactly one channel, chosen by the kind of
the recipient's device token:

- Expo push tokens go to the Expo relay channel
- any other non-blank token goes to the FCM channel
- a missing token sends nothing

Delivery is best effort. ``dispatch`` never raises: channel exceptions and
timeouts come back as failed OperationResults, which callers are free to
ignore. Sends run on a managed worker pool so the caller waits at most
``timeout_seconds``; ``shutdown`` waits for sends still in flight.

Usage Example:
    from infrastructure.notifications import PushDispatcher, PushNotification

    dispatcher = PushDispatcher(
        channels=[expo_channel, fcm_channel],
        timeout_seconds=5,
    )

    result = dispatcher.dispatch(notification)
    if not result.is_success:
        logger.warning("push_not_delivered", error_code=result.error_code)
"""

import contextvars
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from threading import Lock
from typing import Dict, Iterable, List, Optional

import structlog

from infrastructure.notifications.channels.base import PushChannel
from infrastructure.notifications.models import PushNotification, TokenKind
from infrastructure.notifications.tokens import classify_token
from infrastructure.operations import OperationResult

logger = structlog.get_logger()


class PushDispatcher:
    """Single-recipient push dispatcher.

    Attributes:
        channels: Dict mapping TokenKind to the PushChannel delivering it
        timeout_seconds: Maximum time dispatch() waits for a channel
        max_workers: Size of the send worker pool

    Example:
        dispatcher = PushDispatcher(channels=[ExpoChannel(settings.expo)])
        result = dispatcher.dispatch(notification)
    """

    def __init__(
        self,
        channels: Iterable[PushChannel],
        timeout_seconds: float = 5.0,
        max_workers: int = 8,
    ):
        self.channels: Dict[TokenKind, PushChannel] = {
            channel.token_kind: channel for channel in channels
        }
        self.timeout_seconds = timeout_seconds
        self.max_workers = max_workers

        self._executor: Optional[ThreadPoolExecutor] = None
        self._executor_lock = Lock()
        self._shutdown = False

        logger.info(
            "initialized_push_dispatcher",
            channels=self.get_available_channels(),
            timeout_seconds=timeout_seconds,
        )

    def dispatch(self, notification: PushNotification) -> OperationResult:
        """Deliver a notification through the channel matching its token.

        Args:
            notification: Notification intent for one device

        Returns:
            OperationResult. On success ``data`` holds a DeliveryOutcome.
            Failures use error codes NO_TOKEN, CHANNEL_UNAVAILABLE,
            DISPATCHER_SHUTDOWN, DISPATCH_TIMEOUT, CHANNEL_EXCEPTION or the
            channel's own classification.
        """
        kind = classify_token(notification.token)

        if kind is TokenKind.NONE:
            logger.info(
                "push_skipped_no_device",
                room_id=notification.room_id,
                recipient_id=notification.recipient_id,
            )
            return OperationResult.permanent_error(
                "Recipient has no device token", error_code="NO_TOKEN"
            )

        channel = self.channels.get(kind)
        if channel is None:
            logger.warning(
                "push_channel_not_available",
                route=kind.value,
                available_channels=self.get_available_channels(),
            )
            return OperationResult.permanent_error(
                f"No push channel registered for {kind.value} tokens",
                error_code="CHANNEL_UNAVAILABLE",
            )

        executor = self._get_or_create_executor()
        if executor is None:
            logger.warning("push_dispatcher_shut_down", channel=channel.channel_name)
            return OperationResult.transient_error(
                "Push dispatcher is shut down", error_code="DISPATCHER_SHUTDOWN"
            )

        # Worker threads get a copy of the request's logging context
        ctx = contextvars.copy_context()
        future = executor.submit(ctx.run, self._send_guarded, channel, notification)

        try:
            result = future.result(timeout=self.timeout_seconds)
        except FuturesTimeoutError:
            # Only a send still queued can be cancelled; a running one finishes
            cancelled = future.cancel()
            logger.warning(
                "push_dispatch_timed_out",
                channel=channel.channel_name,
                room_id=notification.room_id,
                timeout_seconds=self.timeout_seconds,
                cancelled=cancelled,
            )
            return OperationResult.transient_error(
                f"Push send did not finish within {self.timeout_seconds}s",
                error_code="DISPATCH_TIMEOUT",
            )

        logger.info(
            "push_dispatched",
            channel=channel.channel_name,
            room_id=notification.room_id,
            recipient_id=notification.recipient_id,
            success=result.is_success,
            error_code=result.error_code,
        )
        return result

    def _send_guarded(
        self, channel: PushChannel, notification: PushNotification
    ) -> OperationResult:
        try:
            return channel.send(notification)
        except Exception as e:
            logger.error(
                "push_channel_exception",
                channel=channel.channel_name,
                room_id=notification.room_id,
                error=str(e),
                exc_info=True,
            )
            return OperationResult.transient_error(
                f"Channel exception: {type(e).__name__}",
                error_code="CHANNEL_EXCEPTION",
            )

    def _get_or_create_executor(self) -> Optional[ThreadPoolExecutor]:
        """Lazily create the worker pool. Returns None once shut down."""
        with self._executor_lock:
            if self._shutdown:
                return None
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.max_workers,
                    thread_name_prefix="push-dispatch",
                )
                logger.debug(
                    "created_push_executor", max_workers=self.max_workers
                )
            return self._executor

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting sends and wait for in-flight ones. Idempotent.

        Args:
            wait: Block until queued and running sends complete
        """
        with self._executor_lock:
            self._shutdown = True
            executor = self._executor
            self._executor = None

        if executor is not None:
            executor.shutdown(wait=wait)
            logger.info("push_dispatcher_shutdown", waited=wait)

    def get_available_channels(self) -> List[str]:
        """Names of registered channels."""
        return [channel.channel_name for channel in self.channels.values()]
