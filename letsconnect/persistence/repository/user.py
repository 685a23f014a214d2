"""PostgreSQL implementation of User repository."""

from typing import Optional, Sequence

import logfire
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from letsconnect.domain.model import User
from letsconnect.domain.repository import UserRepository
from letsconnect.domain.value import UserId
from letsconnect.persistence.mappers import row_to_user, user_to_dict
from letsconnect.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        with logfire.span("user_repository.find_by_id", user_id=str(user_id)):
            stmt = select(users_table).where(users_table.c.id == user_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        if not user_ids:
            return []
        with logfire.span("user_repository.find_by_ids", count=len(user_ids)):
            stmt = select(users_table).where(users_table.c.id.in_(list(user_ids)))
            result = await self.session.execute(stmt)
            found = {
                user.id: user
                for user in (row_to_user(row._asdict()) for row in result.fetchall())
            }
            return [found[user_id] for user_id in user_ids if user_id in found]

    async def find_for_update(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Lock the users' rows until the transaction ends.

        Rows are locked in id order so two toggles over the same pair
        cannot deadlock.
        """
        with logfire.span("user_repository.find_for_update", count=len(user_ids)):
            stmt = (
                select(users_table)
                .where(users_table.c.id.in_(list(user_ids)))
                .order_by(users_table.c.id)
                .with_for_update()
            )
            result = await self.session.execute(stmt)
            users = [row_to_user(row._asdict()) for row in result.fetchall()]
            return {user.id: user for user in users}

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return user
