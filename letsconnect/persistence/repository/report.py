"""PostgreSQL implementation of Report repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from letsconnect.domain.error import ConflictError
from letsconnect.domain.model import Report
from letsconnect.domain.model.report import DUPLICATE_REPORT_MESSAGE
from letsconnect.domain.repository import ReportRepository
from letsconnect.domain.value import PostId, ReportId, ReportReason, ReportStatus, UserId
from letsconnect.persistence.mappers import report_to_dict, row_to_report
from letsconnect.persistence.tables import reports_table


class PostgresReportRepository(ReportRepository):
    """PostgreSQL implementation of ReportRepository.

    The unique (post_id, reporter_id) constraint backs the one report per
    reporter rule, so two racing submissions cannot both land.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _filters(
        self, reason: Optional[ReportReason], status: Optional[ReportStatus]
    ) -> list:
        filters = []
        if reason is not None:
            filters.append(reports_table.c.reason == reason.value)
        if status is not None:
            filters.append(reports_table.c.status == status.value)
        return filters

    async def save(self, report: Report) -> Report:
        with logfire.span("report_repository.save", report_id=str(report.id)):
            values = report_to_dict(report)
            if await self.find_by_id(report.id) is None:
                stmt = (
                    insert(reports_table)
                    .values(**values)
                    .on_conflict_do_nothing(constraint="uq_reports_post_reporter")
                    .returning(reports_table.c.id)
                )
                result = await self.session.execute(stmt)
                if result.first() is None:
                    logfire.warn(
                        "Duplicate report rejected",
                        post_id=str(report.post_id),
                        reporter_id=str(report.reporter_id),
                    )
                    raise ConflictError(DUPLICATE_REPORT_MESSAGE)
            else:
                values.pop("id")
                stmt = (
                    reports_table.update()
                    .where(reports_table.c.id == report.id)
                    .values(**values)
                )
                await self.session.execute(stmt)
            await self.session.flush()
            return report

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        stmt = select(reports_table).where(reports_table.c.id == report_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_report(row._asdict()) if row else None

    async def find_by_reporter(
        self, reporter_id: UserId, post_id: PostId
    ) -> Optional[Report]:
        stmt = select(reports_table).where(
            reports_table.c.reporter_id == reporter_id,
            reports_table.c.post_id == post_id,
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_report(row._asdict()) if row else None

    async def find_all(
        self,
        reason: Optional[ReportReason] = None,
        status: Optional[ReportStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Report]:
        with logfire.span(
            "report_repository.find_all",
            reason=reason.value if reason else None,
            status=status.value if status else None,
            limit=limit,
            offset=offset,
        ):
            stmt = (
                select(reports_table)
                .where(*self._filters(reason, status))
                .order_by(desc(reports_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_report(row._asdict()) for row in result.fetchall()]

    async def count(
        self,
        reason: Optional[ReportReason] = None,
        status: Optional[ReportStatus] = None,
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(reports_table)
            .where(*self._filters(reason, status))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def delete(self, report_id: ReportId) -> bool:
        stmt = reports_table.delete().where(reports_table.c.id == report_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
