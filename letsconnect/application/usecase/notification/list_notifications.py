"""List notifications use case."""

from pydantic import BaseModel, Field

from letsconnect.application.usecase.base import BaseUseCase
from letsconnect.domain.model import Notification
from letsconnect.domain.service import NotificationService, total_pages
from letsconnect.domain.value import Principal


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    principal: Principal
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1)


class ListNotificationsResponse(BaseModel):
    """One page of the caller's notifications, newest first."""

    success: bool = True
    data: list[Notification]
    total: int
    total_pages: int
    page: int


class ListNotificationsUseCase(BaseUseCase):
    """Use case for reading the caller's latest notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        notifications, total = await self.notification_service.list_mine(
            request.principal, request.page, request.page_size
        )
        return ListNotificationsResponse(
            data=notifications,
            total=total,
            total_pages=total_pages(total, request.page_size),
            page=request.page,
        )
