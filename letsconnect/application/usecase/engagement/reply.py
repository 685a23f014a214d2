"""Reply use cases: add, edit and delete."""

from letsconnect.application.usecase.base import BaseUseCase, MessageResponse
from letsconnect.domain.service import EngagementService

from .common import EngagementRequest, parse_comment_id, parse_reply_id


class AddReplyRequest(EngagementRequest):
    """Add reply request."""

    comment_id: str
    reply: str


class EditReplyRequest(EngagementRequest):
    """Edit reply request."""

    comment_id: str
    reply_id: str
    reply: str


class DeleteReplyRequest(EngagementRequest):
    """Delete reply request."""

    comment_id: str
    reply_id: str


class AddReplyUseCase(BaseUseCase):
    """Use case for replying to a comment."""

    def __init__(self, engagement_service: EngagementService) -> None:
        """Initialize add reply use case.

        Args:
            engagement_service: Engagement domain service
        """
        self.engagement_service = engagement_service

    async def execute(self, request: AddReplyRequest) -> MessageResponse:
        await self.engagement_service.add_reply(
            request.kind,
            request.parsed_entity_id(),
            parse_comment_id(request.comment_id),
            request.principal,
            request.reply,
        )
        return MessageResponse(message="Reply Added Successfully")


class EditReplyUseCase(BaseUseCase):
    """Use case for editing one's own reply."""

    def __init__(self, engagement_service: EngagementService) -> None:
        self.engagement_service = engagement_service

    async def execute(self, request: EditReplyRequest) -> MessageResponse:
        await self.engagement_service.edit_reply(
            request.kind,
            request.parsed_entity_id(),
            parse_comment_id(request.comment_id),
            parse_reply_id(request.reply_id),
            request.principal,
            request.reply,
        )
        return MessageResponse(message="Reply Updated Successfully")


class DeleteReplyUseCase(BaseUseCase):
    """Use case for deleting a reply."""

    def __init__(self, engagement_service: EngagementService) -> None:
        self.engagement_service = engagement_service

    async def execute(self, request: DeleteReplyRequest) -> MessageResponse:
        await self.engagement_service.delete_reply(
            request.kind,
            request.parsed_entity_id(),
            parse_comment_id(request.comment_id),
            parse_reply_id(request.reply_id),
            request.principal,
        )
        return MessageResponse(message="Reply Deleted Successfully")
