"""Create post use case."""

from typing import Optional

from pydantic import BaseModel

from letsconnect.application.usecase.base import BaseUseCase, CreatedResponse
from letsconnect.domain.service import PostService, UploadedFile
from letsconnect.domain.value import MediaType, PostCategory, Principal


class CreatePostRequest(BaseModel):
    """Create post request."""

    principal: Principal
    media_type: MediaType
    content: str = ""
    category: PostCategory = PostCategory.USERS_POST
    allow_comments: bool = True
    allow_shares: bool = True
    upload: Optional[UploadedFile] = None


class CreatePostUseCase(BaseUseCase):
    """Use case for publishing a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatedResponse:
        """Execute create post flow.

        Raises:
            InvalidInputError: If content or media is missing
            NotAuthorizedError: If a user targets an editorial category
        """
        post = await self.post_service.create_post(
            principal=request.principal,
            media_type=request.media_type,
            content=request.content,
            category=request.category,
            allow_comments=request.allow_comments,
            allow_shares=request.allow_shares,
            upload=request.upload,
        )
        return CreatedResponse(message="Post Created Successfully", id=str(post.id))
