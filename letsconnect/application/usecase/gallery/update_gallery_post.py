"""Update gallery post use case."""

from typing import Optional

from pydantic import BaseModel

from letsconnect.application.usecase.base import BaseUseCase, MessageResponse, parse_id
from letsconnect.domain.service import GalleryService, UploadedFile
from letsconnect.domain.value import GalleryCategory, GalleryPostId, NewsType, Principal


class UpdateGalleryPostRequest(BaseModel):
    """Update gallery post request. Omitted fields are left unchanged."""

    gallery_post_id: str
    principal: Principal
    title: Optional[str] = None
    category: Optional[GalleryCategory] = None
    news_type: Optional[NewsType] = None
    youtube_url: Optional[str] = None
    allow_comments: Optional[bool] = None
    allow_shares: Optional[bool] = None
    upload: Optional[UploadedFile] = None


class UpdateGalleryPostUseCase(BaseUseCase):
    def __init__(self, gallery_service: GalleryService) -> None:
        self.gallery_service = gallery_service

    async def execute(self, request: UpdateGalleryPostRequest) -> MessageResponse:
        await self.gallery_service.update_gallery_post(
            GalleryPostId(parse_id(request.gallery_post_id, "Post")),
            request.principal,
            title=request.title,
            category=request.category,
            news_type=request.news_type,
            youtube_url=request.youtube_url,
            allow_comments=request.allow_comments,
            allow_shares=request.allow_shares,
            upload=request.upload,
        )
        return MessageResponse(message="Post Updated Successfully")
