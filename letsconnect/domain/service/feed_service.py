"""Feed domain service.

Ranked views over the usersPost category: the popularity feed everyone
sees and the feed of people the caller follows.
"""

from datetime import datetime, timedelta
from typing import Optional

import logfire

from letsconnect.domain.error import NotFoundError
from letsconnect.domain.model import Post
from letsconnect.domain.model.common import as_aware
from letsconnect.domain.repository import PostRepository, UserRepository
from letsconnect.domain.value import PostCategory, Principal

from .base import Service
from .pagination import page_offset

# Posts younger than this outrank older ones in the popularity feed
POPULAR_RECENT_WINDOW = timedelta(days=5)


class FeedService(Service):
    """Domain service for the popular and following feeds."""

    def __init__(
        self, post_repository: PostRepository, user_repository: UserRepository
    ) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository

    async def list_popular(
        self, page: int, page_size: int, now: Optional[datetime] = None
    ) -> tuple[list[Post], int]:
        """User posts, recent ones first, then by likes plus comments plus shares."""
        with logfire.span("feed_service.list_popular", page=page):
            offset = page_offset(page, page_size)
            recent_since = as_aware(now or datetime.now()) - POPULAR_RECENT_WINDOW
            posts = await self.post_repository.find_popular(
                recent_since, limit=page_size, offset=offset
            )
            total = await self.post_repository.count(category=PostCategory.USERS_POST)
            return posts, total

    async def list_following(
        self, principal: Principal, page: int, page_size: int
    ) -> tuple[list[Post], int]:
        """User posts by the people the caller follows, newest first."""
        with logfire.span(
            "feed_service.list_following", user_id=str(principal.user_id), page=page
        ):
            offset = page_offset(page, page_size)
            user = await self.user_repository.find_by_id(principal.user_id)
            if user is None:
                raise NotFoundError("User", str(principal.user_id))
            if not user.following:
                return [], 0

            posts = await self.post_repository.find_all(
                category=PostCategory.USERS_POST,
                owner_ids=user.following,
                limit=page_size,
                offset=offset,
            )
            total = await self.post_repository.count(
                category=PostCategory.USERS_POST, owner_ids=user.following
            )
            return posts, total
