"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import List, Optional, Sequence

import logfire
from sqlalchemy import case, desc, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from letsconnect.domain.model import DeletedPost, Post
from letsconnect.domain.repository import DeletedPostRepository, PostRepository
from letsconnect.domain.value import PostCategory, PostId, UserId
from letsconnect.persistence.mappers import (
    deleted_post_to_dict,
    post_to_dict,
    row_to_deleted_post,
    row_to_post,
)
from letsconnect.persistence.tables import deleted_posts_table, posts_table

from .engageable import PostgresEngageableRepository


class PostgresPostRepository(PostgresEngageableRepository[Post], PostRepository):
    """PostgreSQL implementation of PostRepository."""

    table = posts_table
    resource = "Post"
    span_prefix = "post_repository"
    to_model = staticmethod(row_to_post)
    to_row = staticmethod(post_to_dict)

    def _filters(
        self,
        category: Optional[PostCategory],
        owner_id: Optional[UserId],
        owner_ids: Optional[Sequence[UserId]] = None,
    ) -> list:
        filters = []
        if category is not None:
            filters.append(posts_table.c.category == category.value)
        if owner_id is not None:
            filters.append(posts_table.c.owner_id == owner_id)
        if owner_ids is not None:
            filters.append(posts_table.c.owner_id.in_(list(owner_ids)))
        return filters

    async def find_all(
        self,
        category: Optional[PostCategory] = None,
        owner_id: Optional[UserId] = None,
        owner_ids: Optional[Sequence[UserId]] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Post]:
        with logfire.span(
            "post_repository.find_all",
            category=category.value if category else None,
            limit=limit,
            offset=offset,
        ):
            stmt = (
                select(posts_table)
                .where(*self._filters(category, owner_id, owner_ids))
                .order_by(desc(posts_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def count(
        self,
        category: Optional[PostCategory] = None,
        owner_id: Optional[UserId] = None,
        owner_ids: Optional[Sequence[UserId]] = None,
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(*self._filters(category, owner_id, owner_ids))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_popular(
        self, recent_since: datetime, limit: int = 20, offset: int = 0
    ) -> List[Post]:
        with logfire.span(
            "post_repository.find_popular",
            recent_since=recent_since.isoformat(),
            limit=limit,
            offset=offset,
        ):
            is_recent = case((posts_table.c.created_at >= recent_since, 1), else_=0)
            popularity = (
                posts_table.c.likes_count
                + posts_table.c.comments_count
                + posts_table.c.shares
            )
            stmt = (
                select(posts_table)
                .where(posts_table.c.category == PostCategory.USERS_POST.value)
                .order_by(
                    desc(is_recent), desc(popularity), desc(posts_table.c.created_at)
                )
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]


class PostgresDeletedPostRepository(DeletedPostRepository):
    """PostgreSQL archive of deleted user posts."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, deleted_post: DeletedPost) -> DeletedPost:
        with logfire.span(
            "deleted_post_repository.save",
            original_post_id=str(deleted_post.original_post_id),
        ):
            stmt = insert(deleted_posts_table).values(
                **deleted_post_to_dict(deleted_post)
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return deleted_post

    async def find_by_original_id(self, post_id: PostId) -> Optional[DeletedPost]:
        stmt = select(deleted_posts_table).where(
            deleted_posts_table.c.original_post_id == post_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_deleted_post(row._asdict()) if row else None
