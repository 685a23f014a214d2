"""Domain value objects for lets-connect."""

from letsconnect.domain.value.identifiers import (
    CommentId,
    DeletedPostId,
    EventId,
    GalleryPostId,
    NotificationId,
    PostId,
    ReplyId,
    ReportId,
    UserId,
)
from letsconnect.domain.value.types import (
    DEFAULT_FILE_ID,
    REPORT_HANDLER_ROLES,
    STAFF_ROLES,
    AllowFlag,
    ContentKind,
    FollowDirection,
    GalleryCategory,
    LikeTarget,
    Location,
    MediaFile,
    MediaType,
    NewsType,
    NotificationType,
    PostCategory,
    Principal,
    ReportReason,
    ReportStatus,
    Role,
    UserFlag,
)

__all__ = [
    # Identifiers
    "PostId",
    "GalleryPostId",
    "EventId",
    "DeletedPostId",
    "CommentId",
    "ReplyId",
    "NotificationId",
    "ReportId",
    "UserId",
    # Types
    "DEFAULT_FILE_ID",
    "REPORT_HANDLER_ROLES",
    "STAFF_ROLES",
    "AllowFlag",
    "ContentKind",
    "FollowDirection",
    "GalleryCategory",
    "LikeTarget",
    "Location",
    "MediaFile",
    "MediaType",
    "NewsType",
    "NotificationType",
    "PostCategory",
    "Principal",
    "ReportReason",
    "ReportStatus",
    "Role",
    "UserFlag",
]
