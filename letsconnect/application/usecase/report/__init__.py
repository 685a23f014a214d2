"""Report use cases."""

from .create_report import CreateReportRequest, CreateReportUseCase
from .manage_report import (
    DeleteReportUseCase,
    GetReportResponse,
    GetReportUseCase,
    ProcessReportRequest,
    ProcessReportUseCase,
    ReportRequest,
)
from .search_reports import (
    SearchReportsRequest,
    SearchReportsResponse,
    SearchReportsUseCase,
)

__all__ = [
    "CreateReportRequest",
    "CreateReportUseCase",
    "DeleteReportUseCase",
    "GetReportResponse",
    "GetReportUseCase",
    "ProcessReportRequest",
    "ProcessReportUseCase",
    "ReportRequest",
    "SearchReportsRequest",
    "SearchReportsResponse",
    "SearchReportsUseCase",
]
