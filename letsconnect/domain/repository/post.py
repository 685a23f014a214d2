"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from letsconnect.domain.model import DeletedPost, Post
from letsconnect.domain.value import PostCategory, PostId, UserId

from .engageable import EngageableRepository


class PostRepository(EngageableRepository[Post]):
    """Repository for the Post aggregate."""

    @abstractmethod
    async def find_all(
        self,
        category: Optional[PostCategory] = None,
        owner_id: Optional[UserId] = None,
        owner_ids: Optional[Sequence[UserId]] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts, newest first.

        Args:
            category: Filter by category (None for all)
            owner_id: Filter by author (None for all)
            owner_ids: Filter by any of several authors (None for all)
            limit: Maximum number of posts to return
            offset: Number of posts to skip
        """
        pass

    @abstractmethod
    async def count(
        self,
        category: Optional[PostCategory] = None,
        owner_id: Optional[UserId] = None,
        owner_ids: Optional[Sequence[UserId]] = None,
    ) -> int:
        """Count posts matching the same filters as find_all."""
        pass

    @abstractmethod
    async def find_popular(
        self, recent_since: datetime, limit: int = 20, offset: int = 0
    ) -> List[Post]:
        """Find usersPost posts ranked by recency, then popularity.

        Posts created at or after ``recent_since`` come first. Within each
        group the sum of likes, comments and shares decides, ties going to
        the newer post.
        """
        pass


class DeletedPostRepository(ABC):
    """Archive of user posts removed by their authors or staff."""

    @abstractmethod
    async def save(self, deleted_post: DeletedPost) -> DeletedPost:
        pass

    @abstractmethod
    async def find_by_original_id(self, post_id: PostId) -> Optional[DeletedPost]:
        pass
