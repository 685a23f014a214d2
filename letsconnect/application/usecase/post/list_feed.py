"""List feed use case."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from letsconnect.application.usecase.base import BaseUseCase
from letsconnect.domain.service import FeedService, total_pages
from letsconnect.domain.value import Principal

from .list_posts import ListPostsResponse


class PostFeed(str, Enum):
    """Ranked view of user posts."""

    POPULAR = "popular"
    FOLLOWING = "following"


class ListFeedRequest(BaseModel):
    """List feed request."""

    feed: PostFeed
    principal: Principal
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1)
    now: Optional[datetime] = None


class ListFeedUseCase(BaseUseCase):
    """Use case for the popularity feed and the following feed.

    The popularity feed puts posts from the last five days first and ranks
    each group by likes plus comments plus shares. The following feed lists
    posts by followed users, newest first.
    """

    def __init__(self, feed_service: FeedService) -> None:
        self.feed_service = feed_service

    async def execute(self, request: ListFeedRequest) -> ListPostsResponse:
        if request.feed == PostFeed.POPULAR:
            posts, total = await self.feed_service.list_popular(
                request.page, request.page_size, now=request.now
            )
        else:
            posts, total = await self.feed_service.list_following(
                request.principal, request.page, request.page_size
            )
        return ListPostsResponse(
            data=posts,
            total=total,
            total_pages=total_pages(total, request.page_size),
            page=request.page,
        )
