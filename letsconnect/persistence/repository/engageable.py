"""PostgreSQL base repository for engageable content tables."""

from typing import Any, Callable, Dict, Optional, TypeVar
from uuid import UUID

import logfire
from sqlalchemy import Table, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from letsconnect.domain.error import ConcurrentModificationError, NotFoundError
from letsconnect.domain.model import Engageable, Reply
from letsconnect.domain.repository import EngageableRepository
from letsconnect.domain.value import CommentId

T = TypeVar("T", bound=Engageable)


class PostgresEngageableRepository(EngageableRepository[T]):
    """Whole-document reads and optimistic writes of one content table.

    Subclasses bind the table, the resource name used in errors and the
    row mappers.
    """

    table: Table
    resource: str
    span_prefix: str
    to_model: Callable[[Dict[str, Any]], T]
    to_row: Callable[[T], Dict[str, Any]]

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _row_to_model(self, row) -> T:
        return self.to_model(row._asdict())

    async def find_by_id(self, entity_id: UUID) -> Optional[T]:
        with logfire.span(f"{self.span_prefix}.find_by_id", entity_id=str(entity_id)):
            stmt = select(self.table).where(self.table.c.id == entity_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn(f"{self.resource} not found", entity_id=str(entity_id))
                return None
            return self._row_to_model(row)

    async def save(self, entity: T) -> T:
        with logfire.span(
            f"{self.span_prefix}.save",
            entity_id=str(entity.id),
            version=entity.version,
        ):
            values = self.to_row(entity)
            next_version = entity.version + 1
            values["version"] = next_version

            if entity.version == 0:
                await self.session.execute(insert(self.table).values(**values))
                await self.session.flush()
                return entity.model_copy(update={"version": next_version})

            values.pop("id")
            stmt = (
                update(self.table)
                .where(
                    self.table.c.id == entity.id,
                    self.table.c.version == entity.version,
                )
                .values(**values)
            )
            result = await self.session.execute(stmt)

            if result.rowcount == 0:
                exists = await self.session.execute(
                    select(self.table.c.id).where(self.table.c.id == entity.id)
                )
                if exists.first() is None:
                    raise NotFoundError(self.resource, str(entity.id))
                logfire.warn(
                    "Stale save rejected",
                    entity_id=str(entity.id),
                    expected_version=entity.version,
                )
                raise ConcurrentModificationError(
                    self.resource, str(entity.id), entity.version
                )

            await self.session.flush()
            return entity.model_copy(update={"version": next_version})

    async def delete(self, entity_id: UUID) -> bool:
        with logfire.span(f"{self.span_prefix}.delete", entity_id=str(entity_id)):
            stmt = self.table.delete().where(self.table.c.id == entity_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0

    async def increment_shares(self, entity_id: UUID) -> Optional[T]:
        """Atomically increment shares by 1 while sharing is still allowed."""
        with logfire.span(
            f"{self.span_prefix}.increment_shares", entity_id=str(entity_id)
        ):
            stmt = (
                update(self.table)
                .where(
                    self.table.c.id == entity_id,
                    self.table.c.allow_shares.is_(True),
                )
                .values(
                    shares=self.table.c.shares + 1,
                    version=self.table.c.version + 1,
                )
                .returning(*self.table.c)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return self._row_to_model(row) if row else None

    async def push_reply(
        self, entity_id: UUID, comment_id: CommentId, reply: Reply
    ) -> T:
        """Append a reply while holding the row lock."""
        with logfire.span(
            f"{self.span_prefix}.push_reply",
            entity_id=str(entity_id),
            comment_id=str(comment_id),
        ):
            stmt = (
                select(self.table).where(self.table.c.id == entity_id).with_for_update()
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            if not row:
                raise NotFoundError(self.resource, str(entity_id))

            entity = self._row_to_model(row)
            updated = entity.append_reply(comment_id, reply)
            values = self.to_row(updated)

            await self.session.execute(
                update(self.table)
                .where(self.table.c.id == entity_id)
                .values(
                    comments=values["comments"],
                    comments_count=values["comments_count"],
                    updated_at=values["updated_at"],
                    version=self.table.c.version + 1,
                )
            )
            await self.session.flush()
            return updated.model_copy(update={"version": entity.version + 1})
