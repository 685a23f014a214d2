"""Create gallery post use case."""

from typing import Optional

from pydantic import BaseModel

from letsconnect.application.usecase.base import BaseUseCase, CreatedResponse
from letsconnect.domain.service import GalleryService, UploadedFile
from letsconnect.domain.value import GalleryCategory, NewsType, Principal


class CreateGalleryPostRequest(BaseModel):
    """Create gallery post request."""

    principal: Principal
    title: str
    category: GalleryCategory
    news_type: NewsType
    youtube_url: Optional[str] = None
    allow_comments: bool = True
    allow_shares: bool = True
    upload: Optional[UploadedFile] = None


class CreateGalleryPostUseCase(BaseUseCase):
    """Use case for publishing to the gallery."""

    def __init__(self, gallery_service: GalleryService) -> None:
        """Initialize create gallery post use case.

        Args:
            gallery_service: Gallery domain service
        """
        self.gallery_service = gallery_service

    async def execute(self, request: CreateGalleryPostRequest) -> CreatedResponse:
        gallery_post = await self.gallery_service.create_gallery_post(
            principal=request.principal,
            title=request.title,
            category=request.category,
            news_type=request.news_type,
            youtube_url=request.youtube_url,
            allow_comments=request.allow_comments,
            allow_shares=request.allow_shares,
            upload=request.upload,
        )
        return CreatedResponse(
            message="Post Created Successfully", id=str(gallery_post.id)
        )
