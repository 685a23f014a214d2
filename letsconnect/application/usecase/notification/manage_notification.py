"""Mark read and delete notification use cases."""

from pydantic import BaseModel

from letsconnect.application.usecase.base import BaseUseCase, MessageResponse, parse_id
from letsconnect.domain.service import NotificationService
from letsconnect.domain.value import NotificationId, Principal


class NotificationRequest(BaseModel):
    """Request addressing one of the caller's notifications."""

    notification_id: str
    principal: Principal

    def parsed_notification_id(self) -> NotificationId:
        return NotificationId(parse_id(self.notification_id, "Notification"))


class MarkNotificationReadUseCase(BaseUseCase):
    """Use case for marking a notification as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: NotificationRequest) -> MessageResponse:
        await self.notification_service.mark_read(
            request.parsed_notification_id(), request.principal
        )
        return MessageResponse(message="Notification Successfully Mark as Read")


class DeleteNotificationUseCase(BaseUseCase):
    """Use case for deleting a notification."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: NotificationRequest) -> MessageResponse:
        await self.notification_service.delete_notification(
            request.parsed_notification_id(), request.principal
        )
        return MessageResponse(message="Notification Deleted Successfully")
