"""Get gallery post use case."""

from pydantic import BaseModel

from letsconnect.application.usecase.base import BaseUseCase, parse_id
from letsconnect.domain.model import GalleryPost
from letsconnect.domain.service import GalleryService
from letsconnect.domain.value import GalleryPostId


class GetGalleryPostRequest(BaseModel):
    """Get gallery post request."""

    gallery_post_id: str


class GetGalleryPostResponse(BaseModel):
    """Get gallery post response."""

    success: bool = True
    post: GalleryPost


class GetGalleryPostUseCase(BaseUseCase):
    def __init__(self, gallery_service: GalleryService) -> None:
        self.gallery_service = gallery_service

    async def execute(self, request: GetGalleryPostRequest) -> GetGalleryPostResponse:
        gallery_post = await self.gallery_service.get_gallery_post(
            GalleryPostId(parse_id(request.gallery_post_id, "Post"))
        )
        return GetGalleryPostResponse(post=gallery_post)
