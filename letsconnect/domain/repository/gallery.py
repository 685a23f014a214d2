"""Gallery repository interface."""

from abc import abstractmethod
from typing import List, Optional

from letsconnect.domain.model import GalleryPost
from letsconnect.domain.value import GalleryCategory, NewsType

from .engageable import EngageableRepository


class GalleryRepository(EngageableRepository[GalleryPost]):
    """Repository for the GalleryPost aggregate."""

    @abstractmethod
    async def find_all(
        self,
        category: Optional[GalleryCategory] = None,
        news_type: Optional[NewsType] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[GalleryPost]:
        """Find gallery posts, newest first."""
        pass

    @abstractmethod
    async def count(
        self,
        category: Optional[GalleryCategory] = None,
        news_type: Optional[NewsType] = None,
    ) -> int:
        pass
