"""Comment use cases: add, edit and delete."""

from letsconnect.application.usecase.base import BaseUseCase, MessageResponse
from letsconnect.domain.service import EngagementService

from .common import EngagementRequest, parse_comment_id


class AddCommentRequest(EngagementRequest):
    """Add comment request."""

    content: str


class EditCommentRequest(EngagementRequest):
    """Edit comment request."""

    comment_id: str
    content: str


class DeleteCommentRequest(EngagementRequest):
    """Delete comment request."""

    comment_id: str


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a post, gallery post or event."""

    def __init__(self, engagement_service: EngagementService) -> None:
        """Initialize add comment use case.

        Args:
            engagement_service: Engagement domain service
        """
        self.engagement_service = engagement_service

    async def execute(self, request: AddCommentRequest) -> MessageResponse:
        """Execute add comment flow.

        Raises:
            InvalidInputError: If the entity ID or content is invalid
            NotFoundError: If the entity does not exist
            EngagementDisabledError: If comments are turned off
        """
        await self.engagement_service.add_comment(
            request.kind,
            request.parsed_entity_id(),
            request.principal,
            request.content,
        )
        return MessageResponse(message="Comment Added Successfully")


class EditCommentUseCase(BaseUseCase):
    """Use case for editing one's own comment."""

    def __init__(self, engagement_service: EngagementService) -> None:
        self.engagement_service = engagement_service

    async def execute(self, request: EditCommentRequest) -> MessageResponse:
        await self.engagement_service.edit_comment(
            request.kind,
            request.parsed_entity_id(),
            parse_comment_id(request.comment_id),
            request.principal,
            request.content,
        )
        return MessageResponse(message="Comment Updated Successfully")


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment and its replies."""

    def __init__(self, engagement_service: EngagementService) -> None:
        self.engagement_service = engagement_service

    async def execute(self, request: DeleteCommentRequest) -> MessageResponse:
        await self.engagement_service.delete_comment(
            request.kind,
            request.parsed_entity_id(),
            parse_comment_id(request.comment_id),
            request.principal,
        )
        return MessageResponse(message="Comment Deleted Successfully")
