"""Notification entity."""

from datetime import datetime
from typing import Optional, Self
from uuid import UUID

from pydantic import Field

from letsconnect.domain.model.common import DomainModel
from letsconnect.domain.value import NotificationId, NotificationType, UserId

NOTIFICATION_MESSAGE_MAX_LENGTH = 255


class Notification(DomainModel):
    """Activity one user caused for another: a like, comment, follow or referral.

    ``post_id`` points at the post a like or comment was made on. It is a
    plain UUID because the post may have been deleted since.
    """

    id: NotificationId
    from_user: UserId
    to_user: UserId
    type: NotificationType
    post_id: Optional[UUID] = None
    message: str = Field(min_length=1, max_length=NOTIFICATION_MESSAGE_MAX_LENGTH)
    is_read: bool = False
    read_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def mark_read(self) -> Self:
        """Mark as read. Reading twice keeps the first read time."""
        if self.is_read:
            return self
        now = datetime.now()
        return self.model_copy(update={"is_read": True, "read_at": now, "updated_at": now})
