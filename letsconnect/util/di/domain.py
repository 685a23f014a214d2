"""Domain layer DI providers."""

from dishka import Scope, provide

from letsconnect.config import AuthSettings
from letsconnect.domain.repository import (
    DeletedPostRepository,
    EngageableRepository,
    EventRepository,
    GalleryRepository,
    NotificationRepository,
    PostRepository,
    ReportRepository,
    UserRepository,
)
from letsconnect.domain.service import (
    AuthorizationPolicy,
    BlobStore,
    EngagementService,
    EventService,
    FeedService,
    GalleryService,
    JWTService,
    MediaService,
    NotificationService,
    PostService,
    ReportService,
    UserService,
)
from letsconnect.domain.value import ContentKind
from letsconnect.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_authorization_policy(self) -> AuthorizationPolicy:
        """Provide the per-kind authorization rules."""
        return AuthorizationPolicy()

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_engageable_repositories(
        self,
        post_repository: PostRepository,
        gallery_repository: GalleryRepository,
        event_repository: EventRepository,
    ) -> dict[ContentKind, EngageableRepository]:
        """Provide the repository of each content kind.

        This lets a single EngagementService serve every kind.
        """
        return {
            ContentKind.POST: post_repository,
            ContentKind.GALLERY: gallery_repository,
            ContentKind.EVENT: event_repository,
        }

    @provide
    def get_engagement_service(
        self,
        repositories: dict[ContentKind, EngageableRepository],
        authorization_policy: AuthorizationPolicy,
    ) -> EngagementService:
        """Provide engagement domain service."""
        return EngagementService(
            repositories=repositories, authorization_policy=authorization_policy
        )

    @provide
    def get_media_service(self, blob_store: BlobStore) -> MediaService:
        """Provide media domain service."""
        return MediaService(blob_store=blob_store)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        deleted_post_repository: DeletedPostRepository,
        media_service: MediaService,
        authorization_policy: AuthorizationPolicy,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            deleted_post_repository=deleted_post_repository,
            media_service=media_service,
            authorization_policy=authorization_policy,
        )

    @provide
    def get_gallery_service(
        self,
        gallery_repository: GalleryRepository,
        media_service: MediaService,
        authorization_policy: AuthorizationPolicy,
    ) -> GalleryService:
        """Provide gallery domain service."""
        return GalleryService(
            gallery_repository=gallery_repository,
            media_service=media_service,
            authorization_policy=authorization_policy,
        )

    @provide
    def get_event_service(
        self,
        event_repository: EventRepository,
        media_service: MediaService,
        authorization_policy: AuthorizationPolicy,
    ) -> EventService:
        """Provide event domain service."""
        return EventService(
            event_repository=event_repository,
            media_service=media_service,
            authorization_policy=authorization_policy,
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_feed_service(
        self, post_repository: PostRepository, user_repository: UserRepository
    ) -> FeedService:
        """Provide feed domain service."""
        return FeedService(
            post_repository=post_repository, user_repository=user_repository
        )

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        user_repository: UserRepository,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository,
            user_repository=user_repository,
        )

    @provide
    def get_report_service(
        self,
        report_repository: ReportRepository,
        post_repository: PostRepository,
        deleted_post_repository: DeletedPostRepository,
    ) -> ReportService:
        """Provide report domain service."""
        return ReportService(
            report_repository=report_repository,
            post_repository=post_repository,
            deleted_post_repository=deleted_post_repository,
        )
