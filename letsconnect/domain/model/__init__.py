"""Domain models for lets-connect."""

from .common import DomainModel
from .deleted_post import DeletedPost
from .engagement import Comment, Engageable, Reply, recompute_counts
from .event import Attendee, Event
from .gallery import GalleryPost
from .notification import Notification
from .post import Post
from .report import Report
from .user import User

__all__ = [
    "Attendee",
    "Comment",
    "DeletedPost",
    "DomainModel",
    "Engageable",
    "Event",
    "GalleryPost",
    "Notification",
    "Post",
    "Reply",
    "Report",
    "User",
    "recompute_counts",
]
