"""Report entity."""

from datetime import datetime
from typing import Optional, Self

from pydantic import Field

from letsconnect.domain.error import InvalidInputError
from letsconnect.domain.model.common import DomainModel
from letsconnect.domain.value import PostId, ReportId, ReportReason, ReportStatus, UserId

REPORT_DESCRIPTION_MAX_LENGTH = 200
DUPLICATE_REPORT_MESSAGE = "You have already reported this post"


class Report(DomainModel):
    """A user's complaint about a post, reviewed by report handlers.

    A reporter may report a given post only once.
    """

    id: ReportId
    post_id: PostId
    reporter_id: UserId
    reason: ReportReason = ReportReason.OTHER
    description: Optional[str] = Field(
        default=None, max_length=REPORT_DESCRIPTION_MAX_LENGTH
    )
    status: ReportStatus = ReportStatus.PENDING
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def with_status(self, status: ReportStatus) -> Self:
        """Move the report to ``status``.

        Raises:
            InvalidInputError: If the report already has that status
        """
        if status == self.status:
            raise InvalidInputError(f"Report is Already {status.value}")
        return self.model_copy(update={"status": status, "updated_at": datetime.now()})
