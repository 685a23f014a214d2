"""PostgreSQL repository implementations."""

from .event import PostgresEventRepository
from .gallery import PostgresGalleryRepository
from .notification import PostgresNotificationRepository
from .post import PostgresDeletedPostRepository, PostgresPostRepository
from .report import PostgresReportRepository
from .user import PostgresUserRepository

__all__ = [
    "PostgresDeletedPostRepository",
    "PostgresEventRepository",
    "PostgresGalleryRepository",
    "PostgresNotificationRepository",
    "PostgresPostRepository",
    "PostgresReportRepository",
    "PostgresUserRepository",
]
