"""Reply orchestration for the chat module.

Coordinates the user directory, message store and push dispatcher into the
end-to-end reply flow:

1. Resolving: sender and recipient are looked up concurrently. A missing
   user ends the flow before anything is written.
2. Persisting: the message is appended and the conversation summary merged.
   A failure here is surfaced and the recipient is never notified.
3. Notifying: when the recipient has a device token the push dispatcher is
   invoked. Its result is logged and discarded.
4. Done: the reply succeeds whatever happened in step 3.
"""

import contextvars
from concurrent.futures import ThreadPoolExecutor, wait
from datetime import datetime, timezone
from typing import Callable, Optional, Tuple

from infrastructure.logging import get_module_logger
from infrastructure.notifications import PushDispatcher, PushNotification
from infrastructure.operations import OperationResult
from modules.chat.directory import UserDirectory
from modules.chat.errors import UserNotFoundError, WriteFailedError
from modules.chat.models import ConversationSummary, Message, ReplyOutcome, User
from modules.chat.schemas import ReplyRequest
from modules.chat.store import MessageStore

logger = get_module_logger()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ReplyService:
    """Reply and read-state orchestration.

    Args:
        directory: User directory adapter
        store: Message store adapter
        dispatcher: Push dispatcher
        lookup_workers: Threads for concurrent user lookups
        clock: Returns the current time (UTC)
    """

    def __init__(
        self,
        directory: UserDirectory,
        store: MessageStore,
        dispatcher: PushDispatcher,
        lookup_workers: int = 4,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._directory = directory
        self._store = store
        self._dispatcher = dispatcher
        self._clock = clock
        self._lookup_executor = ThreadPoolExecutor(
            max_workers=lookup_workers, thread_name_prefix="user-lookup"
        )

    def reply(self, request: ReplyRequest) -> ReplyOutcome:
        """Persist a reply and notify the recipient.

        Raises:
            UserNotFoundError: sender or recipient missing, nothing written
            LookupFailedError: the directory could not be read
            WriteFailedError: the message or summary write failed
        """
        sender, recipient = self._resolve_participants(
            request.senders_user_id, request.recipients_user_id
        )
        if sender is None or recipient is None:
            logger.info(
                "reply_user_not_found",
                room_id=request.room_id,
                sender_id=request.senders_user_id,
                recipient_id=request.recipients_user_id,
                sender_found=sender is not None,
                recipient_found=recipient is not None,
            )
            raise UserNotFoundError()

        message_id = self._persist(request, sender)

        push_attempted = False
        if recipient.has_device:
            push_attempted = True
            # Push is a side channel: the result never changes the reply outcome
            _ = self._notify(request, sender, recipient)
        else:
            logger.info(
                "reply_recipient_without_device",
                room_id=request.room_id,
                recipient_id=recipient.user_id,
            )

        logger.info(
            "reply_completed",
            room_id=request.room_id,
            message_id=message_id,
            push_attempted=push_attempted,
        )
        return ReplyOutcome(
            room_id=request.room_id,
            message_id=message_id,
            push_attempted=push_attempted,
        )

    def mark_as_read(self, room_id: str, acting_user_id: str) -> int:
        """Mark every unread message the acting user received in a room as read.

        Returns:
            Number of messages marked. 0 means there was nothing unread.

        Raises:
            WriteFailedError: the batch update failed
        """
        count = self._store.mark_unread_as_read(room_id, acting_user_id)
        logger.info(
            "messages_marked_read",
            room_id=room_id,
            user_id=acting_user_id,
            count=count,
        )
        return count

    def send_notification(self, notification: PushNotification) -> OperationResult:
        """Dispatch a push notification directly, outside the reply flow."""
        return self._dispatcher.dispatch(notification)

    def shutdown(self) -> None:
        """Release the lookup worker pool."""
        self._lookup_executor.shutdown(wait=True)

    def _resolve_participants(
        self, sender_id: str, recipient_id: str
    ) -> Tuple[Optional[User], Optional[User]]:
        # Each worker runs in its own copy of the request's logging context
        futures = [
            self._lookup_executor.submit(
                contextvars.copy_context().run,
                self._directory.get_user_details,
                user_id,
            )
            for user_id in (sender_id, recipient_id)
        ]
        # Both lookups settle before either result is inspected
        wait(futures)
        sender_future, recipient_future = futures
        return sender_future.result(), recipient_future.result()

    def _persist(self, request: ReplyRequest, sender: User) -> str:
        now = self._clock()
        message = Message(
            content=request.reply_text,
            sender_id=sender.user_id,
            sender_name=sender.username,
            created_at=now,
        )
        message_id = self._store.append_message(request.room_id, message)

        try:
            self._store.upsert_conversation_summary(
                request.room_id,
                ConversationSummary(
                    last_message=request.reply_text,
                    last_message_timestamp=now,
                    last_message_sender_id=sender.user_id,
                ),
            )
        except WriteFailedError:
            # The message write stands; the reply as a whole is reported failed
            logger.error(
                "reply_summary_not_updated",
                room_id=request.room_id,
                message_id=message_id,
            )
            raise

        return message_id

    def _notify(
        self, request: ReplyRequest, sender: User, recipient: User
    ) -> OperationResult:
        result = self._dispatcher.dispatch(
            PushNotification(
                token=recipient.device_token,
                title=sender.username,
                body=request.reply_text,
                room_id=request.room_id,
                recipient_id=recipient.user_id,
                sender_id=sender.user_id,
                profile_url=sender.profile_url,
            )
        )
        if not result.is_success:
            logger.warning(
                "reply_push_not_delivered",
                room_id=request.room_id,
                recipient_id=recipient.user_id,
                error_code=result.error_code,
                error=result.message,
            )
        return result
