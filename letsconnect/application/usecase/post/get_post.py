"""Get post use case."""

from pydantic import BaseModel

from letsconnect.application.usecase.base import BaseUseCase, parse_id
from letsconnect.domain.model import Post
from letsconnect.domain.service import PostService
from letsconnect.domain.value import PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str


class GetPostResponse(BaseModel):
    """Get post response."""

    success: bool = True
    post: Post


class GetPostUseCase(BaseUseCase):
    """Use case for reading a single post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        post_id = PostId(parse_id(request.post_id, "Post"))
        post = await self.post_service.get_post(post_id)
        return GetPostResponse(post=post)
