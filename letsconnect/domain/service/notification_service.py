"""Notification domain service."""

from typing import Optional
from uuid import UUID, uuid4

import logfire

from letsconnect.domain.error import (
    InvalidInputError,
    NotAuthorizedError,
    NotFoundError,
)
from letsconnect.domain.model import Notification
from letsconnect.domain.model.notification import NOTIFICATION_MESSAGE_MAX_LENGTH
from letsconnect.domain.repository import NotificationRepository, UserRepository
from letsconnect.domain.value import (
    NotificationId,
    NotificationType,
    Principal,
    UserId,
)

from .base import Service
from .pagination import page_offset


class NotificationService(Service):
    """Domain service for sending and reading notifications.

    The sender is always the authenticated caller. Only the recipient may
    read or delete a notification.
    """

    def __init__(
        self,
        notification_repository: NotificationRepository,
        user_repository: UserRepository,
    ) -> None:
        self.notification_repository = notification_repository
        self.user_repository = user_repository

    async def create_notification(
        self,
        principal: Principal,
        to_user: UserId,
        type: NotificationType,
        message: str,
        post_id: Optional[UUID] = None,
    ) -> Notification:
        """Send a notification from the caller to another user.

        Raises:
            InvalidInputError: If the message is empty or too long, or a like
                or comment notification has no post
            NotFoundError: If the recipient does not exist
        """
        with logfire.span(
            "notification_service.create_notification",
            from_user=str(principal.user_id),
            to_user=str(to_user),
            type=type.value,
        ):
            message = (message or "").strip()
            if not message:
                raise InvalidInputError("Please Enter All Required Fields")
            if len(message) > NOTIFICATION_MESSAGE_MAX_LENGTH:
                raise InvalidInputError(
                    f"Message must be at most {NOTIFICATION_MESSAGE_MAX_LENGTH} characters"
                )
            if type.needs_post and post_id is None:
                raise InvalidInputError("Please Enter Post Id First")
            if await self.user_repository.find_by_id(to_user) is None:
                raise NotFoundError("User", str(to_user))

            notification = Notification(
                id=NotificationId(uuid4()),
                from_user=principal.user_id,
                to_user=to_user,
                type=type,
                post_id=post_id,
                message=message,
            )
            saved = await self.notification_repository.save(notification)
            logfire.info("Notification created", notification_id=str(saved.id))
            return saved

    async def _own_notification(
        self, notification_id: NotificationId, principal: Principal
    ) -> Notification:
        notification = await self.notification_repository.find_by_id(notification_id)
        if notification is None:
            raise NotFoundError("Notification", str(notification_id))
        if notification.to_user != principal.user_id:
            raise NotAuthorizedError(
                "Notification", str(notification_id), str(principal.user_id)
            )
        return notification

    async def list_mine(
        self, principal: Principal, page: int, page_size: int
    ) -> tuple[list[Notification], int]:
        """The caller's notifications, newest first."""
        offset = page_offset(page, page_size)
        notifications = await self.notification_repository.find_for_recipient(
            principal.user_id, limit=page_size, offset=offset
        )
        total = await self.notification_repository.count_for_recipient(
            principal.user_id
        )
        return notifications, total

    async def mark_read(
        self, notification_id: NotificationId, principal: Principal
    ) -> Notification:
        with logfire.span(
            "notification_service.mark_read", notification_id=str(notification_id)
        ):
            notification = await self._own_notification(notification_id, principal)
            return await self.notification_repository.save(notification.mark_read())

    async def delete_notification(
        self, notification_id: NotificationId, principal: Principal
    ) -> None:
        with logfire.span(
            "notification_service.delete_notification",
            notification_id=str(notification_id),
        ):
            await self._own_notification(notification_id, principal)
            await self.notification_repository.delete(notification_id)
            logfire.info("Notification deleted", notification_id=str(notification_id))
