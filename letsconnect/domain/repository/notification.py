"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from letsconnect.domain.model import Notification
from letsconnect.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for notifications."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Insert or update a notification."""
        pass

    @abstractmethod
    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        pass

    @abstractmethod
    async def find_for_recipient(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[Notification]:
        """Find notifications sent to a user, newest first."""
        pass

    @abstractmethod
    async def count_for_recipient(self, user_id: UserId) -> int:
        pass

    @abstractmethod
    async def delete(self, notification_id: NotificationId) -> bool:
        """Delete a notification.

        Returns:
            True if a notification was deleted
        """
        pass
