"""Toggle allow-flag use case."""

from letsconnect.application.usecase.base import BaseUseCase, ToggleResponse
from letsconnect.domain.service import EngagementService
from letsconnect.domain.value import AllowFlag

from .common import EngagementRequest


class ToggleAllowRequest(EngagementRequest):
    """Toggle allow_comments or allow_shares."""

    flag: AllowFlag


class ToggleAllowUseCase(BaseUseCase):
    """Use case for turning comments or sharing on and off."""

    def __init__(self, engagement_service: EngagementService) -> None:
        self.engagement_service = engagement_service

    async def execute(self, request: ToggleAllowRequest) -> ToggleResponse:
        outcome = await self.engagement_service.toggle_allow(
            request.kind,
            request.parsed_entity_id(),
            request.principal,
            request.flag,
        )
        return ToggleResponse(message=outcome.message, state=outcome.state)
