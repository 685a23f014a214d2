"""List posts use case."""

from typing import Optional

from pydantic import BaseModel, Field

from letsconnect.application.usecase.base import BaseUseCase, parse_id
from letsconnect.domain.model import Post
from letsconnect.domain.service import PostService, total_pages
from letsconnect.domain.value import PostCategory, UserId


class ListPostsRequest(BaseModel):
    """List posts request."""

    category: Optional[PostCategory] = None
    owner_id: Optional[str] = None
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1)


class ListPostsResponse(BaseModel):
    """One page of posts, newest first."""

    success: bool = True
    data: list[Post]
    total: int
    total_pages: int
    page: int


class ListPostsUseCase(BaseUseCase):
    """Use case for listing posts by category or by author."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        owner_id = (
            UserId(parse_id(request.owner_id, "User")) if request.owner_id else None
        )
        posts, total = await self.post_service.list_posts(
            request.page,
            request.page_size,
            category=request.category,
            owner_id=owner_id,
        )
        return ListPostsResponse(
            data=posts,
            total=total,
            total_pages=total_pages(total, request.page_size),
            page=request.page,
        )
