"""In-memory notification repository for testing."""

from typing import Optional

from letsconnect.domain.model import Notification
from letsconnect.domain.repository import NotificationRepository
from letsconnect.domain.value import NotificationId, UserId

from .store import InMemoryDocumentStore


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self, store: Optional[InMemoryDocumentStore] = None) -> None:
        self.store = store or InMemoryDocumentStore()

    @property
    def _items(self) -> dict:
        return self.store.collection("notifications")

    def _for(self, user_id: UserId) -> list[Notification]:
        notifications = [n for n in self._items.values() if n.to_user == user_id]
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications

    async def save(self, notification: Notification) -> Notification:
        self._items[notification.id] = notification
        return notification

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        return self._items.get(notification_id)

    async def find_for_recipient(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> list[Notification]:
        return self._for(user_id)[offset : offset + limit]

    async def count_for_recipient(self, user_id: UserId) -> int:
        return len(self._for(user_id))

    async def delete(self, notification_id: NotificationId) -> bool:
        return self._items.pop(notification_id, None) is not None
