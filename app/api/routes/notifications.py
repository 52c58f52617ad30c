"""Direct push notification endpoint."""

from fastapi import APIRouter, Request

from api.dependencies.rate_limits import default_limit, get_limiter
from infrastructure.logging import get_module_logger
from infrastructure.models import APIResponse
from infrastructure.services import ReplyServiceDep
from modules.chat.schemas import SendNotificationRequest

router = APIRouter(tags=["Notifications"])
limiter = get_limiter()
logger = get_module_logger()


@router.post(
    "/sendNotification", response_model=APIResponse, response_model_exclude_none=True
)
@limiter.limit(default_limit)
def send_notification(
    request: Request,  # pylint: disable=unused-argument
    body: SendNotificationRequest,
    service: ReplyServiceDep,
) -> APIResponse:
    """Send a push notification to a single device token.

    The token is routed exactly like reply notifications. Delivery is best
    effort, so a failed send is reported in the message, not as an error.
    """
    notification = body.to_notification()
    result = service.send_notification(notification)
    if not result.is_success:
        logger.warning(
            "notification_not_delivered",
            room_id=notification.room_id,
            recipient_id=notification.recipient_id,
            error_code=result.error_code,
        )
        return APIResponse(message="Notification was not delivered")
    return APIResponse(message="Notification sent successfully")
