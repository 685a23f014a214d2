"""Get, process and delete report use cases."""

from typing import Optional

from pydantic import BaseModel

from letsconnect.application.usecase.base import BaseUseCase, MessageResponse, parse_id
from letsconnect.domain.model import Report
from letsconnect.domain.service import ReportService
from letsconnect.domain.value import MediaFile, Principal, ReportId, ReportStatus


class ReportRequest(BaseModel):
    """Request addressing one report."""

    report_id: str
    principal: Principal

    def parsed_report_id(self) -> ReportId:
        return ReportId(parse_id(self.report_id, "Report"))


class ProcessReportRequest(ReportRequest):
    """Process report request."""

    status: ReportStatus


class GetReportResponse(BaseModel):
    """A report and the media of the reported post."""

    success: bool = True
    report: Report
    post_media: Optional[MediaFile] = None


class GetReportUseCase(BaseUseCase):
    """Use case for reading a report together with the reported media."""

    def __init__(self, report_service: ReportService) -> None:
        self.report_service = report_service

    async def execute(self, request: ReportRequest) -> GetReportResponse:
        report, media = await self.report_service.get_report(
            request.parsed_report_id(), request.principal
        )
        return GetReportResponse(report=report, post_media=media)


class ProcessReportUseCase(BaseUseCase):
    """Use case for resolving or ignoring a report."""

    def __init__(self, report_service: ReportService) -> None:
        self.report_service = report_service

    async def execute(self, request: ProcessReportRequest) -> MessageResponse:
        """Execute process report flow.

        Raises:
            InvalidInputError: If the report already has the requested status
            NotAuthorizedError: If the caller does not handle reports
            NotFoundError: If the report does not exist
        """
        report = await self.report_service.process_report(
            request.parsed_report_id(), request.principal, request.status
        )
        return MessageResponse(
            message=f"Report Status is Updated to {report.status.value}"
        )


class DeleteReportUseCase(BaseUseCase):
    """Use case for deleting a report."""

    def __init__(self, report_service: ReportService) -> None:
        self.report_service = report_service

    async def execute(self, request: ReportRequest) -> MessageResponse:
        await self.report_service.delete_report(
            request.parsed_report_id(), request.principal
        )
        return MessageResponse(message="Report Deleted Successfully")
