"""In-memory gallery repository for testing."""

from typing import Optional

from letsconnect.domain.model import GalleryPost
from letsconnect.domain.repository import GalleryRepository
from letsconnect.domain.value import GalleryCategory, NewsType

from .engageable import InMemoryEngageableRepository


class InMemoryGalleryRepository(
    InMemoryEngageableRepository[GalleryPost], GalleryRepository
):
    """In-memory implementation of GalleryRepository for testing."""

    collection_name = "gallery_posts"
    resource = "Post"

    def _matching(
        self, category: Optional[GalleryCategory], news_type: Optional[NewsType]
    ) -> list[GalleryPost]:
        posts = list(self._items.values())
        if category is not None:
            posts = [p for p in posts if p.category == category]
        if news_type is not None:
            posts = [p for p in posts if p.news_type == news_type]
        return posts

    async def find_all(
        self,
        category: Optional[GalleryCategory] = None,
        news_type: Optional[NewsType] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[GalleryPost]:
        posts = self._matching(category, news_type)
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts[offset : offset + limit]

    async def count(
        self,
        category: Optional[GalleryCategory] = None,
        news_type: Optional[NewsType] = None,
    ) -> int:
        return len(self._matching(category, news_type))
