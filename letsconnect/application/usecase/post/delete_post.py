"""Delete post use case."""

from pydantic import BaseModel

from letsconnect.application.usecase.base import BaseUseCase, MessageResponse, parse_id
from letsconnect.domain.service import PostService
from letsconnect.domain.value import PostId, Principal


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    principal: Principal


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post. User posts are archived first."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> MessageResponse:
        await self.post_service.delete_post(
            PostId(parse_id(request.post_id, "Post")), request.principal
        )
        return MessageResponse(message="Post Deleted Successfully")
