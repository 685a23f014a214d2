"""PostgreSQL implementation of Notification repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from letsconnect.domain.model import Notification
from letsconnect.domain.repository import NotificationRepository
from letsconnect.domain.value import NotificationId, UserId
from letsconnect.persistence.mappers import notification_to_dict, row_to_notification
from letsconnect.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        with logfire.span(
            "notification_repository.save", notification_id=str(notification.id)
        ):
            values = notification_to_dict(notification)
            exists = await self.session.execute(
                select(notifications_table.c.id).where(
                    notifications_table.c.id == notification.id
                )
            )
            if exists.first() is None:
                stmt = notifications_table.insert().values(**values)
            else:
                values.pop("id")
                stmt = (
                    notifications_table.update()
                    .where(notifications_table.c.id == notification.id)
                    .values(**values)
                )
            await self.session.execute(stmt)
            await self.session.flush()
            return notification

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    async def find_for_recipient(
        self, user_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[Notification]:
        with logfire.span(
            "notification_repository.find_for_recipient",
            user_id=str(user_id),
            limit=limit,
            offset=offset,
        ):
            stmt = (
                select(notifications_table)
                .where(notifications_table.c.to_user == user_id)
                .order_by(desc(notifications_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def count_for_recipient(self, user_id: UserId) -> int:
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(notifications_table.c.to_user == user_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def delete(self, notification_id: NotificationId) -> bool:
        stmt = notifications_table.delete().where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
