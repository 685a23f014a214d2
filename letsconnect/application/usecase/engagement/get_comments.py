"""Get comments use case."""

from pydantic import BaseModel, Field

from letsconnect.application.usecase.base import BaseUseCase, parse_id
from letsconnect.domain.model import Comment
from letsconnect.domain.service import EngagementService, total_pages
from letsconnect.domain.value import ContentKind


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    kind: ContentKind
    entity_id: str
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1)


class GetCommentsResponse(BaseModel):
    """One page of comments with their replies."""

    success: bool = True
    comments: list[Comment]
    total_comments: int
    total_pages: int
    page: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for paging through the comments of an entity."""

    def __init__(self, engagement_service: EngagementService) -> None:
        """Initialize get comments use case.

        Args:
            engagement_service: Engagement domain service
        """
        self.engagement_service = engagement_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        entity_id = parse_id(request.entity_id, request.kind.label)
        comments, total = await self.engagement_service.get_comments(
            request.kind, entity_id, request.page, request.page_size
        )
        return GetCommentsResponse(
            comments=comments,
            total_comments=total,
            total_pages=total_pages(total, request.page_size),
            page=request.page,
        )
