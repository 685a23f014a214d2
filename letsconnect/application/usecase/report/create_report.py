"""Create report use case."""

from typing import Optional

from pydantic import BaseModel

from letsconnect.application.usecase.base import BaseUseCase, CreatedResponse, parse_id
from letsconnect.domain.service import ReportService
from letsconnect.domain.value import PostId, Principal, ReportReason


class CreateReportRequest(BaseModel):
    """Create report request."""

    principal: Principal
    post_id: str
    reason: ReportReason = ReportReason.OTHER
    description: Optional[str] = None


class CreateReportUseCase(BaseUseCase):
    """Use case for reporting a post."""

    def __init__(self, report_service: ReportService) -> None:
        self.report_service = report_service

    async def execute(self, request: CreateReportRequest) -> CreatedResponse:
        """Execute create report flow.

        Raises:
            InvalidInputError: If the post ID or description is invalid
            NotFoundError: If the post does not exist
            ConflictError: If the caller already reported the post
        """
        report = await self.report_service.create_report(
            principal=request.principal,
            post_id=PostId(parse_id(request.post_id, "Post")),
            reason=request.reason,
            description=request.description,
        )
        return CreatedResponse(message="Post Reported Successfully", id=str(report.id))
