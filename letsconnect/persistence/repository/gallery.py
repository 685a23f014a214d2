"""PostgreSQL implementation of Gallery repository."""

from typing import List, Optional

from sqlalchemy import desc, func, select

from letsconnect.domain.model import GalleryPost
from letsconnect.domain.repository import GalleryRepository
from letsconnect.domain.value import GalleryCategory, NewsType
from letsconnect.persistence.mappers import gallery_post_to_dict, row_to_gallery_post
from letsconnect.persistence.tables import gallery_posts_table

from .engageable import PostgresEngageableRepository


class PostgresGalleryRepository(
    PostgresEngageableRepository[GalleryPost], GalleryRepository
):
    """PostgreSQL implementation of GalleryRepository."""

    table = gallery_posts_table
    resource = "Post"
    span_prefix = "gallery_repository"
    to_model = staticmethod(row_to_gallery_post)
    to_row = staticmethod(gallery_post_to_dict)

    def _filters(
        self, category: Optional[GalleryCategory], news_type: Optional[NewsType]
    ) -> list:
        filters = []
        if category is not None:
            filters.append(gallery_posts_table.c.category == category.value)
        if news_type is not None:
            filters.append(gallery_posts_table.c.news_type == news_type.value)
        return filters

    async def find_all(
        self,
        category: Optional[GalleryCategory] = None,
        news_type: Optional[NewsType] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[GalleryPost]:
        stmt = (
            select(gallery_posts_table)
            .where(*self._filters(category, news_type))
            .order_by(desc(gallery_posts_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_gallery_post(row._asdict()) for row in result.fetchall()]

    async def count(
        self,
        category: Optional[GalleryCategory] = None,
        news_type: Optional[NewsType] = None,
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(gallery_posts_table)
            .where(*self._filters(category, news_type))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
