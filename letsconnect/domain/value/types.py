"""Domain value types for lets-connect."""

from enum import Enum
from typing import Optional

from pydantic import Field

from letsconnect.domain.value.common import ValueObject
from letsconnect.domain.value.identifiers import UserId

# Blob store id meaning "no real file was uploaded"
DEFAULT_FILE_ID = "default"


class Role(str, Enum):
    """Staff role carried by an authenticated principal."""

    USER = "user"
    ADMIN = "admin"
    POST_HANDLER = "postHandler"
    REPORT_HANDLER = "reportHandler"


# Roles allowed to manage editorial content
STAFF_ROLES = frozenset({Role.ADMIN, Role.POST_HANDLER})

# Roles allowed to review reported posts
REPORT_HANDLER_ROLES = frozenset({Role.ADMIN, Role.REPORT_HANDLER})


class ContentKind(str, Enum):
    """Kind of content entity that carries an engagement aggregate."""

    POST = "post"
    GALLERY = "gallery"
    EVENT = "event"

    @property
    def label(self) -> str:
        """Human readable name used in response messages."""
        return {
            ContentKind.POST: "Post",
            ContentKind.GALLERY: "Post",
            ContentKind.EVENT: "Event",
        }[self]


class PostCategory(str, Enum):
    """Category of a feed post."""

    BUSINESS = "business"
    POLITICS = "politics"
    TECHNOLOGY = "technology"
    SCIENCE = "science"
    HEALTH = "health"
    SPORTS = "sports"
    CRIME = "crime"
    USERS_POST = "usersPost"
    DOCUMENT = "document"


class MediaType(str, Enum):
    """Kind of media attached to a feed post."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    DOCS = "docs"


class GalleryCategory(str, Enum):
    """Category of a gallery post."""

    IMAGE = "image"
    VIDEO = "video"
    REEL = "reel"


class NewsType(str, Enum):
    """Regional tag of a gallery post."""

    PAKISTANI = "pakistani"
    INTERNATIONAL = "international"


class LikeTarget(str, Enum):
    """What a like toggle applies to."""

    ENTITY = "entity"
    COMMENT = "comment"
    REPLY = "reply"


class AllowFlag(str, Enum):
    """Engagement gate on a content entity."""

    COMMENTS = "comments"
    SHARES = "shares"


class UserFlag(str, Enum):
    """Boolean user setting flipped through the toggle protocol."""

    IS_BANNED = "is_banned"
    SHOW_POINTS = "show_points"
    SHOW_BADGES = "show_badges"


class MediaFile(ValueObject):
    """Reference to a file held by the blob store."""

    file_id: str = DEFAULT_FILE_ID
    file_name: str = DEFAULT_FILE_ID
    url: Optional[str] = None

    @property
    def is_default(self) -> bool:
        """True when no real file backs this reference."""
        return self.file_id == DEFAULT_FILE_ID


class Location(ValueObject):
    """Geographic position of an event."""

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class Principal(ValueObject):
    """Authenticated caller of a domain operation."""

    user_id: UserId
    role: Role = Role.USER

    @property
    def is_staff(self) -> bool:
        return self.role in STAFF_ROLES

    @property
    def handles_reports(self) -> bool:
        return self.role in REPORT_HANDLER_ROLES


class NotificationType(str, Enum):
    """What happened to the recipient."""

    LIKE = "like"
    COMMENT = "comment"
    FOLLOW = "follow"
    REFERRED = "referred"

    @property
    def needs_post(self) -> bool:
        return self in (NotificationType.LIKE, NotificationType.COMMENT)


class ReportReason(str, Enum):
    """Why a post was reported."""

    MISINFORMATION = "misinformation"
    HATE_SPEECH = "hate speech"
    NUDITY = "nudity"
    VIOLENCE = "violence or threats"
    OTHER = "other"


class ReportStatus(str, Enum):
    """Review state of a report."""

    PENDING = "pending"
    RESOLVED = "resolved"
    IGNORED = "ignored"


class FollowDirection(str, Enum):
    """Side of the follow graph to list."""

    FOLLOWERS = "followers"
    FOLLOWING = "following"
