"""Report routes.

Any user may report a post; the review surface is for admins and report
handlers.
"""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from letsconnect.application.usecase.base import CreatedResponse, MessageResponse
from letsconnect.application.usecase.report import (
    CreateReportRequest,
    CreateReportUseCase,
    DeleteReportUseCase,
    GetReportResponse,
    GetReportUseCase,
    ProcessReportRequest,
    ProcessReportUseCase,
    ReportRequest,
    SearchReportsRequest,
    SearchReportsResponse,
    SearchReportsUseCase,
)
from letsconnect.config import PaginationSettings
from letsconnect.domain.model.report import REPORT_DESCRIPTION_MAX_LENGTH
from letsconnect.domain.service import JWTService
from letsconnect.domain.value import ReportReason, ReportStatus
from letsconnect.interface.api.dependencies import (
    authenticate,
    read_token,
    resolve_page_size,
)

router = APIRouter(prefix="/reports", tags=["reports"], route_class=DishkaRoute)


class ReportAPIRequest(BaseModel):
    """API request for reporting a post."""

    post_id: str
    reason: ReportReason = ReportReason.OTHER
    description: Optional[str] = Field(
        default=None, max_length=REPORT_DESCRIPTION_MAX_LENGTH
    )


@router.post(
    "", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED
)
async def create_report(
    body: ReportAPIRequest,
    create_report_use_case: FromDishka[CreateReportUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(read_token),
) -> CreatedResponse:
    """Report a post. Each user may report a post once."""
    principal = authenticate(jwt_service, token)
    return await create_report_use_case.execute(
        CreateReportRequest(
            principal=principal,
            post_id=body.post_id,
            reason=body.reason,
            description=body.description,
        )
    )


@router.get("", response_model=SearchReportsResponse)
async def search_reports(
    search_reports_use_case: FromDishka[SearchReportsUseCase],
    jwt_service: FromDishka[JWTService],
    pagination: FromDishka[PaginationSettings],
    reason: Optional[ReportReason] = Query(default=None),
    report_status: Optional[ReportStatus] = Query(default=None, alias="status"),
    page: int = Query(default=1, ge=1),
    page_size: Optional[int] = Query(default=None, ge=1),
    token: str | None = Depends(read_token),
) -> SearchReportsResponse:
    """Reports filtered by reason and status, newest first."""
    principal = authenticate(jwt_service, token)
    return await search_reports_use_case.execute(
        SearchReportsRequest(
            principal=principal,
            reason=reason,
            status=report_status,
            page=page,
            page_size=resolve_page_size(page_size, pagination),
        )
    )


@router.get("/{report_id}", response_model=GetReportResponse)
async def get_report(
    report_id: str,
    get_report_use_case: FromDishka[GetReportUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(read_token),
) -> GetReportResponse:
    """A report with the reported post's media, archived media included."""
    principal = authenticate(jwt_service, token)
    return await get_report_use_case.execute(
        ReportRequest(report_id=report_id, principal=principal)
    )


@router.put("/{report_id}/status/{new_status}", response_model=MessageResponse)
async def process_report(
    report_id: str,
    new_status: ReportStatus,
    process_report_use_case: FromDishka[ProcessReportUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(read_token),
) -> MessageResponse:
    principal = authenticate(jwt_service, token)
    return await process_report_use_case.execute(
        ProcessReportRequest(report_id=report_id, principal=principal, status=new_status)
    )


@router.delete("/{report_id}", response_model=MessageResponse)
async def delete_report(
    report_id: str,
    delete_report_use_case: FromDishka[DeleteReportUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(read_token),
) -> MessageResponse:
    principal = authenticate(jwt_service, token)
    return await delete_report_use_case.execute(
        ReportRequest(report_id=report_id, principal=principal)
    )
