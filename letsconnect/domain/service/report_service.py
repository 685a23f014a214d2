"""Report domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from letsconnect.domain.error import (
    ConflictError,
    InvalidInputError,
    NotAuthorizedError,
    NotFoundError,
)
from letsconnect.domain.model import Report
from letsconnect.domain.model.report import (
    DUPLICATE_REPORT_MESSAGE,
    REPORT_DESCRIPTION_MAX_LENGTH,
)
from letsconnect.domain.repository import (
    DeletedPostRepository,
    PostRepository,
    ReportRepository,
)
from letsconnect.domain.value import (
    MediaFile,
    PostId,
    Principal,
    ReportId,
    ReportReason,
    ReportStatus,
)

from .base import Service
from .pagination import page_offset


class ReportService(Service):
    """Domain service for reporting posts and reviewing the reports.

    Any user may report a live post once. Searching, reading, processing
    and deleting reports is for admins and report handlers.
    """

    def __init__(
        self,
        report_repository: ReportRepository,
        post_repository: PostRepository,
        deleted_post_repository: DeletedPostRepository,
    ) -> None:
        """Initialize report service.

        Args:
            report_repository: Report repository
            post_repository: Live posts, checked before a report is filed
            deleted_post_repository: Archive used when the post is gone
        """
        self.report_repository = report_repository
        self.post_repository = post_repository
        self.deleted_post_repository = deleted_post_repository

    def _ensure_handler(self, principal: Principal, report_id: str) -> None:
        if not principal.handles_reports:
            raise NotAuthorizedError("Report", report_id, str(principal.user_id))

    async def create_report(
        self,
        principal: Principal,
        post_id: PostId,
        reason: ReportReason = ReportReason.OTHER,
        description: Optional[str] = None,
    ) -> Report:
        """File a report against a post.

        Raises:
            InvalidInputError: If the description is too long
            NotFoundError: If the post does not exist
            ConflictError: If the caller already reported the post
        """
        with logfire.span(
            "report_service.create_report",
            post_id=str(post_id),
            user_id=str(principal.user_id),
            reason=reason.value,
        ):
            description = (description or "").strip() or None
            if description and len(description) > REPORT_DESCRIPTION_MAX_LENGTH:
                raise InvalidInputError(
                    f"Description must be at most {REPORT_DESCRIPTION_MAX_LENGTH} characters"
                )
            if await self.post_repository.find_by_id(post_id) is None:
                raise NotFoundError("Post", str(post_id))
            if await self.report_repository.find_by_reporter(principal.user_id, post_id):
                raise ConflictError(DUPLICATE_REPORT_MESSAGE)

            report = Report(
                id=ReportId(uuid4()),
                post_id=post_id,
                reporter_id=principal.user_id,
                reason=reason,
                description=description,
            )
            saved = await self.report_repository.save(report)
            logfire.info("Post reported", report_id=str(saved.id), post_id=str(post_id))
            return saved

    async def get_report(
        self, report_id: ReportId, principal: Principal
    ) -> tuple[Report, Optional[MediaFile]]:
        """Return a report with the reported post's media.

        The media comes from the live post, or from the archive once the
        post has been deleted.
        """
        self._ensure_handler(principal, str(report_id))
        report = await self.report_repository.find_by_id(report_id)
        if report is None:
            raise NotFoundError("Report", str(report_id))

        post = await self.post_repository.find_by_id(report.post_id)
        if post is not None:
            return report, post.media
        archived = await self.deleted_post_repository.find_by_original_id(report.post_id)
        return report, archived.media if archived else None

    async def search_reports(
        self,
        principal: Principal,
        page: int,
        page_size: int,
        reason: Optional[ReportReason] = None,
        status: Optional[ReportStatus] = None,
    ) -> tuple[list[Report], int]:
        """One page of reports, newest first, filtered by reason and status."""
        with logfire.span(
            "report_service.search_reports",
            reason=reason.value if reason else None,
            status=status.value if status else None,
            page=page,
        ):
            self._ensure_handler(principal, "search")
            offset = page_offset(page, page_size)
            reports = await self.report_repository.find_all(
                reason=reason, status=status, limit=page_size, offset=offset
            )
            total = await self.report_repository.count(reason=reason, status=status)
            return reports, total

    async def process_report(
        self, report_id: ReportId, principal: Principal, status: ReportStatus
    ) -> Report:
        """Set the review status of a report.

        Raises:
            InvalidInputError: If the report already has that status
        """
        with logfire.span(
            "report_service.process_report",
            report_id=str(report_id),
            status=status.value,
        ):
            self._ensure_handler(principal, str(report_id))
            report = await self.report_repository.find_by_id(report_id)
            if report is None:
                raise NotFoundError("Report", str(report_id))
            saved = await self.report_repository.save(report.with_status(status))
            logfire.info("Report processed", report_id=str(report_id), status=status.value)
            return saved

    async def delete_report(self, report_id: ReportId, principal: Principal) -> None:
        with logfire.span("report_service.delete_report", report_id=str(report_id)):
            self._ensure_handler(principal, str(report_id))
            if not await self.report_repository.delete(report_id):
                raise NotFoundError("Report", str(report_id))
            logfire.info("Report deleted", report_id=str(report_id))
