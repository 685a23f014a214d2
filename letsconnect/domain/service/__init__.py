"""Domain services for lets-connect."""

from .authorization import (
    AuthorizationPolicy,
    EventPolicy,
    GalleryPolicy,
    KindPolicy,
    PostPolicy,
)
from .engagement_service import EngagementService
from .event_service import EventService
from .feed_service import FeedService
from .gallery_service import GalleryService
from .jwt_service import JWTService
from .media_service import BlobStore, BlobStoreError, MediaService, UploadedFile
from .notification_service import NotificationService
from .pagination import slice_page, total_pages
from .post_service import PostService
from .report_service import ReportService
from .toggle import ToggleOutcome
from .user_service import UserService

__all__ = [
    "AuthorizationPolicy",
    "BlobStore",
    "BlobStoreError",
    "EngagementService",
    "EventPolicy",
    "EventService",
    "FeedService",
    "GalleryPolicy",
    "GalleryService",
    "JWTService",
    "KindPolicy",
    "MediaService",
    "NotificationService",
    "PostPolicy",
    "PostService",
    "ReportService",
    "ToggleOutcome",
    "UploadedFile",
    "UserService",
    "slice_page",
    "total_pages",
]
