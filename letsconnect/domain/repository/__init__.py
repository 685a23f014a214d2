"""Repository interfaces for the domain layer."""

from .engageable import EngageableRepository
from .event import EventRepository
from .gallery import GalleryRepository
from .notification import NotificationRepository
from .post import DeletedPostRepository, PostRepository
from .report import ReportRepository
from .user import UserRepository

__all__ = [
    "DeletedPostRepository",
    "EngageableRepository",
    "EventRepository",
    "GalleryRepository",
    "NotificationRepository",
    "PostRepository",
    "ReportRepository",
    "UserRepository",
]
