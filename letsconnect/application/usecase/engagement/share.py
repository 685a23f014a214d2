"""Share use case."""

from letsconnect.application.usecase.base import BaseUseCase, MessageResponse
from letsconnect.domain.service import EngagementService

from .common import EngagementRequest


class ShareRequest(EngagementRequest):
    """Share request."""

    pass


class ShareResponse(MessageResponse):
    """Share response."""

    shares: int


class ShareUseCase(BaseUseCase):
    """Use case for sharing an entity. Shares are counted, not deduplicated."""

    def __init__(self, engagement_service: EngagementService) -> None:
        self.engagement_service = engagement_service

    async def execute(self, request: ShareRequest) -> ShareResponse:
        shares = await self.engagement_service.share(
            request.kind, request.parsed_entity_id(), request.principal
        )
        return ShareResponse(
            message=f"{request.kind.label} Shared Successfully", shares=shares
        )
