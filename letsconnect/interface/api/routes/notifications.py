"""Notification routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from letsconnect.application.usecase.base import CreatedResponse, MessageResponse
from letsconnect.application.usecase.notification import (
    CreateNotificationRequest,
    CreateNotificationUseCase,
    DeleteNotificationUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkNotificationReadUseCase,
    NotificationRequest,
)
from letsconnect.config import PaginationSettings
from letsconnect.domain.service import JWTService
from letsconnect.domain.value import NotificationType
from letsconnect.interface.api.dependencies import (
    authenticate,
    read_token,
    resolve_page_size,
)

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


class NotificationAPIRequest(BaseModel):
    """API request for sending a notification."""

    to_user: str
    type: NotificationType
    message: str
    post_id: Optional[str] = None


@router.post(
    "", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED
)
async def create_notification(
    body: NotificationAPIRequest,
    create_notification_use_case: FromDishka[CreateNotificationUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(read_token),
) -> CreatedResponse:
    """Notify another user. The caller is recorded as the sender.

    Like and comment notifications must name the post.
    """
    principal = authenticate(jwt_service, token)
    return await create_notification_use_case.execute(
        CreateNotificationRequest(
            principal=principal,
            to_user=body.to_user,
            type=body.type,
            message=body.message,
            post_id=body.post_id,
        )
    )


@router.get("/mine", response_model=ListNotificationsResponse)
async def list_my_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    pagination: FromDishka[PaginationSettings],
    page: int = Query(default=1, ge=1),
    page_size: Optional[int] = Query(default=None, ge=1),
    token: str | None = Depends(read_token),
) -> ListNotificationsResponse:
    """Notifications sent to the caller, newest first."""
    principal = authenticate(jwt_service, token)
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(
            principal=principal,
            page=page,
            page_size=resolve_page_size(page_size, pagination),
        )
    )


@router.put("/{notification_id}/read", response_model=MessageResponse)
async def mark_notification_read(
    notification_id: str,
    mark_read_use_case: FromDishka[MarkNotificationReadUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(read_token),
) -> MessageResponse:
    principal = authenticate(jwt_service, token)
    return await mark_read_use_case.execute(
        NotificationRequest(notification_id=notification_id, principal=principal)
    )


@router.delete("/{notification_id}", response_model=MessageResponse)
async def delete_notification(
    notification_id: str,
    delete_notification_use_case: FromDishka[DeleteNotificationUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(read_token),
) -> MessageResponse:
    principal = authenticate(jwt_service, token)
    return await delete_notification_use_case.execute(
        NotificationRequest(notification_id=notification_id, principal=principal)
    )
