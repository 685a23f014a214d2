"""Mock persistence providers for testing."""

from dishka import Scope, provide

from letsconnect.domain.repository import (
    DeletedPostRepository,
    EventRepository,
    GalleryRepository,
    NotificationRepository,
    PostRepository,
    ReportRepository,
    UserRepository,
)
from letsconnect.persistence.repository.inmemory import (
    InMemoryDeletedPostRepository,
    InMemoryDocumentStore,
    InMemoryEventRepository,
    InMemoryGalleryRepository,
    InMemoryNotificationRepository,
    InMemoryPostRepository,
    InMemoryReportRepository,
    InMemoryUserRepository,
)
from letsconnect.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The document store is APP scoped so state survives across requests of
    one container; every test builds its own container, which keeps tests
    isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_document_store(self) -> InMemoryDocumentStore:
        """Provide the shared in-memory document store."""
        return InMemoryDocumentStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryDocumentStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, store: InMemoryDocumentStore) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_deleted_post_repository(
        self, store: InMemoryDocumentStore
    ) -> DeletedPostRepository:
        """Provide in-memory deleted post repository."""
        return InMemoryDeletedPostRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_gallery_repository(
        self, store: InMemoryDocumentStore
    ) -> GalleryRepository:
        """Provide in-memory gallery repository."""
        return InMemoryGalleryRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_event_repository(self, store: InMemoryDocumentStore) -> EventRepository:
        """Provide in-memory event repository."""
        return InMemoryEventRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, store: InMemoryDocumentStore
    ) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_report_repository(self, store: InMemoryDocumentStore) -> ReportRepository:
        """Provide in-memory report repository."""
        return InMemoryReportRepository(store)
