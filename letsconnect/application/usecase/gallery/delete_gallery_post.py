"""Delete gallery post use case."""

from pydantic import BaseModel

from letsconnect.application.usecase.base import BaseUseCase, MessageResponse, parse_id
from letsconnect.domain.service import GalleryService
from letsconnect.domain.value import GalleryPostId, Principal


class DeleteGalleryPostRequest(BaseModel):
    """Delete gallery post request."""

    gallery_post_id: str
    principal: Principal


class DeleteGalleryPostUseCase(BaseUseCase):
    def __init__(self, gallery_service: GalleryService) -> None:
        self.gallery_service = gallery_service

    async def execute(self, request: DeleteGalleryPostRequest) -> MessageResponse:
        await self.gallery_service.delete_gallery_post(
            GalleryPostId(parse_id(request.gallery_post_id, "Post")),
            request.principal,
        )
        return MessageResponse(message="Post Deleted Successfully")
