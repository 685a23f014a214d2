"""PostgreSQL implementation of Event repository."""

from datetime import datetime
from typing import List

from sqlalchemy import asc, desc, func, or_, select

from letsconnect.domain.model import Event
from letsconnect.domain.repository import EventRepository
from letsconnect.persistence.mappers import event_to_dict, row_to_event
from letsconnect.persistence.tables import events_table

from .engageable import PostgresEngageableRepository


def _recent(now: datetime):
    return (events_table.c.end_time.is_not(None), events_table.c.end_time <= now)


def _upcoming(now: datetime):
    return (or_(events_table.c.end_time.is_(None), events_table.c.end_time > now),)


class PostgresEventRepository(PostgresEngageableRepository[Event], EventRepository):
    """PostgreSQL implementation of EventRepository."""

    table = events_table
    resource = "Event"
    span_prefix = "event_repository"
    to_model = staticmethod(row_to_event)
    to_row = staticmethod(event_to_dict)

    async def find_recent(
        self, now: datetime, limit: int = 20, offset: int = 0
    ) -> List[Event]:
        stmt = (
            select(events_table)
            .where(*_recent(now))
            .order_by(desc(events_table.c.end_time))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_event(row._asdict()) for row in result.fetchall()]

    async def find_upcoming(
        self, now: datetime, limit: int = 20, offset: int = 0
    ) -> List[Event]:
        stmt = (
            select(events_table)
            .where(*_upcoming(now))
            .order_by(asc(events_table.c.start_time))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_event(row._asdict()) for row in result.fetchall()]

    async def count_recent(self, now: datetime) -> int:
        stmt = select(func.count()).select_from(events_table).where(*_recent(now))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_upcoming(self, now: datetime) -> int:
        stmt = select(func.count()).select_from(events_table).where(*_upcoming(now))
        result = await self.session.execute(stmt)
        return result.scalar() or 0
