"""Unit tests for the report use cases."""

import pytest

from letsconnect.application.usecase.report import (
    CreateReportRequest,
    CreateReportUseCase,
    DeleteReportUseCase,
    GetReportUseCase,
    ProcessReportRequest,
    ProcessReportUseCase,
    ReportRequest,
    SearchReportsRequest,
    SearchReportsUseCase,
)
from letsconnect.domain.error import InvalidInputError
from letsconnect.domain.repository import PostRepository
from letsconnect.domain.value import MediaFile, ReportReason, ReportStatus, Role
from tests.conftest import make_post, make_principal
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestReportUseCases:
    @pytest.mark.asyncio
    async def test_report_review_flow(self, unit_env):
        # Arrange
        post_repo = await unit_env.get(PostRepository)
        media = MediaFile(file_id="f-1", file_name="pic.png")
        post = await post_repo.save(make_post(media=media))
        handler = make_principal(Role.REPORT_HANDLER)
        create = await unit_env.get(CreateReportUseCase)
        search = await unit_env.get(SearchReportsUseCase)
        get = await unit_env.get(GetReportUseCase)
        process = await unit_env.get(ProcessReportUseCase)
        delete = await unit_env.get(DeleteReportUseCase)

        # Act
        created = await create.execute(
            CreateReportRequest(
                principal=make_principal(),
                post_id=str(post.id),
                reason=ReportReason.MISINFORMATION,
            )
        )
        pending = await search.execute(
            SearchReportsRequest(principal=handler, status=ReportStatus.PENDING)
        )
        detail = await get.execute(ReportRequest(report_id=created.id, principal=handler))
        processed = await process.execute(
            ProcessReportRequest(
                report_id=created.id, principal=handler, status=ReportStatus.RESOLVED
            )
        )
        deleted = await delete.execute(
            ReportRequest(report_id=created.id, principal=handler)
        )

        # Assert
        assert created.message == "Post Reported Successfully"
        assert pending.total == 1
        assert detail.report.reason == ReportReason.MISINFORMATION
        assert detail.post_media == media
        assert processed.message == "Report Status is Updated to resolved"
        assert deleted.message == "Report Deleted Successfully"

    @pytest.mark.asyncio
    async def test_malformed_post_id(self, unit_env):
        create = await unit_env.get(CreateReportUseCase)

        with pytest.raises(InvalidInputError, match="Invalid Post ID"):
            await create.execute(
                CreateReportRequest(principal=make_principal(), post_id="nope")
            )
