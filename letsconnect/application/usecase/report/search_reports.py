"""Search reports use case."""

from typing import Optional

from pydantic import BaseModel, Field

from letsconnect.application.usecase.base import BaseUseCase
from letsconnect.domain.model import Report
from letsconnect.domain.service import ReportService, total_pages
from letsconnect.domain.value import Principal, ReportReason, ReportStatus


class SearchReportsRequest(BaseModel):
    """Search reports request."""

    principal: Principal
    reason: Optional[ReportReason] = None
    status: Optional[ReportStatus] = None
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1)


class SearchReportsResponse(BaseModel):
    """One page of reports, newest first."""

    success: bool = True
    data: list[Report]
    total: int
    total_pages: int
    page: int


class SearchReportsUseCase(BaseUseCase):
    """Use case for the report handlers' review queue."""

    def __init__(self, report_service: ReportService) -> None:
        self.report_service = report_service

    async def execute(self, request: SearchReportsRequest) -> SearchReportsResponse:
        reports, total = await self.report_service.search_reports(
            request.principal,
            request.page,
            request.page_size,
            reason=request.reason,
            status=request.status,
        )
        return SearchReportsResponse(
            data=reports,
            total=total,
            total_pages=total_pages(total, request.page_size),
            page=request.page,
        )
