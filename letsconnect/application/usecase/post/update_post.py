"""Update post use case."""

from typing import Optional

from pydantic import BaseModel

from letsconnect.application.usecase.base import BaseUseCase, MessageResponse, parse_id
from letsconnect.domain.service import PostService, UploadedFile
from letsconnect.domain.value import MediaType, PostCategory, PostId, Principal


class UpdatePostRequest(BaseModel):
    """Update post request. Omitted fields are left unchanged."""

    post_id: str
    principal: Principal
    content: Optional[str] = None
    category: Optional[PostCategory] = None
    media_type: Optional[MediaType] = None
    allow_comments: Optional[bool] = None
    allow_shares: Optional[bool] = None
    upload: Optional[UploadedFile] = None


class UpdatePostUseCase(BaseUseCase):
    """Use case for editing a post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> MessageResponse:
        await self.post_service.update_post(
            PostId(parse_id(request.post_id, "Post")),
            request.principal,
            content=request.content,
            category=request.category,
            media_type=request.media_type,
            allow_comments=request.allow_comments,
            allow_shares=request.allow_shares,
            upload=request.upload,
        )
        return MessageResponse(message="Post Updated Successfully")
