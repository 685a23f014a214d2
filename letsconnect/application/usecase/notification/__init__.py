"""Notification use cases."""

from .create_notification import CreateNotificationRequest, CreateNotificationUseCase
from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
)
from .manage_notification import (
    DeleteNotificationUseCase,
    MarkNotificationReadUseCase,
    NotificationRequest,
)

__all__ = [
    "CreateNotificationRequest",
    "CreateNotificationUseCase",
    "DeleteNotificationUseCase",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkNotificationReadUseCase",
    "NotificationRequest",
]
