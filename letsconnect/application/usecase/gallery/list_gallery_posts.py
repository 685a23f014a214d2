"""List gallery posts use case."""

from typing import Optional

from pydantic import BaseModel, Field

from letsconnect.application.usecase.base import BaseUseCase
from letsconnect.domain.model import GalleryPost
from letsconnect.domain.service import GalleryService, total_pages
from letsconnect.domain.value import GalleryCategory, NewsType


class ListGalleryPostsRequest(BaseModel):
    """List gallery posts request."""

    category: Optional[GalleryCategory] = None
    news_type: Optional[NewsType] = None
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1)


class ListGalleryPostsResponse(BaseModel):
    """One page of gallery posts, newest first."""

    success: bool = True
    data: list[GalleryPost]
    total: int
    total_pages: int
    page: int


class ListGalleryPostsUseCase(BaseUseCase):
    """Use case for browsing the gallery by category and news type."""

    def __init__(self, gallery_service: GalleryService) -> None:
        self.gallery_service = gallery_service

    async def execute(
        self, request: ListGalleryPostsRequest
    ) -> ListGalleryPostsResponse:
        gallery_posts, total = await self.gallery_service.list_gallery_posts(
            request.page,
            request.page_size,
            category=request.category,
            news_type=request.news_type,
        )
        return ListGalleryPostsResponse(
            data=gallery_posts,
            total=total,
            total_pages=total_pages(total, request.page_size),
            page=request.page,
        )
