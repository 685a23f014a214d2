"""In-memory report repository for testing."""

from typing import Optional

from letsconnect.domain.error import ConflictError
from letsconnect.domain.model import Report
from letsconnect.domain.model.report import DUPLICATE_REPORT_MESSAGE
from letsconnect.domain.repository import ReportRepository
from letsconnect.domain.value import PostId, ReportId, ReportReason, ReportStatus, UserId

from .store import InMemoryDocumentStore


class InMemoryReportRepository(ReportRepository):
    """In-memory implementation of ReportRepository for testing."""

    def __init__(self, store: Optional[InMemoryDocumentStore] = None) -> None:
        self.store = store or InMemoryDocumentStore()

    @property
    def _items(self) -> dict:
        return self.store.collection("reports")

    def _matching(
        self, reason: Optional[ReportReason], status: Optional[ReportStatus]
    ) -> list[Report]:
        reports = list(self._items.values())
        if reason is not None:
            reports = [r for r in reports if r.reason == reason]
        if status is not None:
            reports = [r for r in reports if r.status == status]
        return reports

    async def save(self, report: Report) -> Report:
        if report.id not in self._items:
            existing = await self.find_by_reporter(report.reporter_id, report.post_id)
            if existing is not None:
                raise ConflictError(DUPLICATE_REPORT_MESSAGE)
        self._items[report.id] = report
        return report

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        return self._items.get(report_id)

    async def find_by_reporter(
        self, reporter_id: UserId, post_id: PostId
    ) -> Optional[Report]:
        for report in self._items.values():
            if report.reporter_id == reporter_id and report.post_id == post_id:
                return report
        return None

    async def find_all(
        self,
        reason: Optional[ReportReason] = None,
        status: Optional[ReportStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Report]:
        reports = self._matching(reason, status)
        reports.sort(key=lambda r: r.created_at, reverse=True)
        return reports[offset : offset + limit]

    async def count(
        self,
        reason: Optional[ReportReason] = None,
        status: Optional[ReportStatus] = None,
    ) -> int:
        return len(self._matching(reason, status))

    async def delete(self, report_id: ReportId) -> bool:
        return self._items.pop(report_id, None) is not None
