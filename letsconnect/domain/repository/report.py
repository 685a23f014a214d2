"""Report repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from letsconnect.domain.model import Report
from letsconnect.domain.value import PostId, ReportId, ReportReason, ReportStatus, UserId


class ReportRepository(ABC):
    """Repository for post reports."""

    @abstractmethod
    async def save(self, report: Report) -> Report:
        """Insert or update a report.

        Raises:
            ConflictError: If the reporter already reported the post
        """
        pass

    @abstractmethod
    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        pass

    @abstractmethod
    async def find_by_reporter(
        self, reporter_id: UserId, post_id: PostId
    ) -> Optional[Report]:
        """Find the report a user filed against a post, if any."""
        pass

    @abstractmethod
    async def find_all(
        self,
        reason: Optional[ReportReason] = None,
        status: Optional[ReportStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Report]:
        """Find reports, newest first.

        Args:
            reason: Filter by reason (None for all)
            status: Filter by review status (None for all)
            limit: Maximum number of reports to return
            offset: Number of reports to skip
        """
        pass

    @abstractmethod
    async def count(
        self,
        reason: Optional[ReportReason] = None,
        status: Optional[ReportStatus] = None,
    ) -> int:
        pass

    @abstractmethod
    async def delete(self, report_id: ReportId) -> bool:
        """Delete a report.

        Returns:
            True if a report was deleted
        """
        pass
