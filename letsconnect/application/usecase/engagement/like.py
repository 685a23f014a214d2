"""Toggle like use case."""

from typing import Optional

from letsconnect.application.usecase.base import BaseUseCase, ToggleResponse
from letsconnect.domain.service import EngagementService
from letsconnect.domain.value import LikeTarget

from .common import EngagementRequest, parse_comment_id, parse_reply_id


class ToggleLikeRequest(EngagementRequest):
    """Toggle like request."""

    target: LikeTarget = LikeTarget.ENTITY
    comment_id: Optional[str] = None
    reply_id: Optional[str] = None


class ToggleLikeUseCase(BaseUseCase):
    """Use case for liking or unliking an entity, a comment or a reply.

    Calling it twice restores the original state.
    """

    def __init__(self, engagement_service: EngagementService) -> None:
        """Initialize toggle like use case.

        Args:
            engagement_service: Engagement domain service
        """
        self.engagement_service = engagement_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleResponse:
        comment_id = (
            parse_comment_id(request.comment_id) if request.comment_id else None
        )
        reply_id = parse_reply_id(request.reply_id) if request.reply_id else None

        outcome = await self.engagement_service.toggle_like(
            request.kind,
            request.parsed_entity_id(),
            request.principal,
            target=request.target,
            comment_id=comment_id,
            reply_id=reply_id,
        )
        return ToggleResponse(message=outcome.message, state=outcome.state)
