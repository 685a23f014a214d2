"""Create notification use case."""

from typing import Optional

from pydantic import BaseModel

from letsconnect.application.usecase.base import BaseUseCase, CreatedResponse, parse_id
from letsconnect.domain.service import NotificationService
from letsconnect.domain.value import NotificationType, Principal, UserId


class CreateNotificationRequest(BaseModel):
    """Create notification request."""

    principal: Principal
    to_user: str
    type: NotificationType
    message: str
    post_id: Optional[str] = None


class CreateNotificationUseCase(BaseUseCase):
    """Use case for notifying another user of the caller's activity."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize create notification use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(self, request: CreateNotificationRequest) -> CreatedResponse:
        """Execute create notification flow.

        Raises:
            InvalidInputError: If an ID is invalid, the message is empty, or a
                like or comment notification has no post
            NotFoundError: If the recipient does not exist
        """
        post_id = parse_id(request.post_id, "Post") if request.post_id else None
        notification = await self.notification_service.create_notification(
            principal=request.principal,
            to_user=UserId(parse_id(request.to_user, "User")),
            type=request.type,
            message=request.message,
            post_id=post_id,
        )
        return CreatedResponse(
            message="Notification Created Successfully", id=str(notification.id)
        )
