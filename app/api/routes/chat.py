"""Chat endpoints: replies and read receipts."""

from fastapi import APIRouter, Request

from api.dependencies.rate_limits import default_limit, get_limiter
from infrastructure.logging import get_module_logger
from infrastructure.models import APIResponse
from infrastructure.services import ReplyServiceDep
from modules.chat.schemas import MarkAsReadRequest, ReplyRequest

router = APIRouter(tags=["Chat"])
limiter = get_limiter()
logger = get_module_logger()


@router.post("/reply", response_model=APIResponse, response_model_exclude_none=True)
@limiter.limit(default_limit)
def reply(
    request: Request,  # pylint: disable=unused-argument
    body: ReplyRequest,
    service: ReplyServiceDep,
) -> APIResponse:
    """Store a reply and notify the recipient.

    Push delivery is best effort: the response reports the stored reply,
    whatever happened to the notification.
    """
    service.reply(body)
    return APIResponse(message="Reply sent successfully")


@router.post(
    "/markAsRead", response_model=APIResponse, response_model_exclude_none=True
)
@limiter.limit(default_limit)
def mark_as_read(
    request: Request,  # pylint: disable=unused-argument
    body: MarkAsReadRequest,
    service: ReplyServiceDep,
) -> APIResponse:
    """Mark the messages the acting user received in a room as read."""
    count = service.mark_as_read(body.room_id, body.senders_user_id)
    if count == 0:
        return APIResponse(message="No unread messages found")
    return APIResponse(message=f"Marked {count} messages as read")
