"""In-memory repository implementations for testing."""

from .event import InMemoryEventRepository
from .gallery import InMemoryGalleryRepository
from .notification import InMemoryNotificationRepository
from .post import InMemoryDeletedPostRepository, InMemoryPostRepository
from .report import InMemoryReportRepository
from .store import InMemoryDocumentStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryDeletedPostRepository",
    "InMemoryDocumentStore",
    "InMemoryEventRepository",
    "InMemoryGalleryRepository",
    "InMemoryNotificationRepository",
    "InMemoryPostRepository",
    "InMemoryReportRepository",
    "InMemoryUserRepository",
]
