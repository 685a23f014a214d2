"""Application layer DI providers."""

from dishka import Scope, provide

from letsconnect.application.usecase.engagement import (
    AddCommentUseCase,
    AddReplyUseCase,
    DeleteCommentUseCase,
    DeleteReplyUseCase,
    EditCommentUseCase,
    EditReplyUseCase,
    GetCommentsUseCase,
    ShareUseCase,
    ToggleAllowUseCase,
    ToggleLikeUseCase,
)
from letsconnect.application.usecase.event import (
    CreateEventUseCase,
    DeleteEventUseCase,
    GetAttendanceUseCase,
    GetEventUseCase,
    ListEventsUseCase,
    ToggleAttendanceUseCase,
    UpdateEventUseCase,
)
from letsconnect.application.usecase.gallery import (
    CreateGalleryPostUseCase,
    DeleteGalleryPostUseCase,
    GetGalleryPostUseCase,
    ListGalleryPostsUseCase,
    UpdateGalleryPostUseCase,
)
from letsconnect.application.usecase.notification import (
    CreateNotificationUseCase,
    DeleteNotificationUseCase,
    ListNotificationsUseCase,
    MarkNotificationReadUseCase,
)
from letsconnect.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListFeedUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from letsconnect.application.usecase.report import (
    CreateReportUseCase,
    DeleteReportUseCase,
    GetReportUseCase,
    ProcessReportUseCase,
    SearchReportsUseCase,
)
from letsconnect.application.usecase.user import (
    GetUserUseCase,
    ListFollowsUseCase,
    ToggleFollowUseCase,
    ToggleUserFlagUseCase,
)
from letsconnect.domain.service import (
    EngagementService,
    EventService,
    FeedService,
    GalleryService,
    NotificationService,
    PostService,
    ReportService,
    UserService,
)
from letsconnect.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Engagement use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, engagement_service: EngagementService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(engagement_service=engagement_service)

    @provide(scope=Scope.REQUEST)
    def get_edit_comment_use_case(
        self, engagement_service: EngagementService
    ) -> EditCommentUseCase:
        """Provide edit comment use case."""
        return EditCommentUseCase(engagement_service=engagement_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, engagement_service: EngagementService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(engagement_service=engagement_service)

    @provide(scope=Scope.REQUEST)
    def get_add_reply_use_case(
        self, engagement_service: EngagementService
    ) -> AddReplyUseCase:
        """Provide add reply use case."""
        return AddReplyUseCase(engagement_service=engagement_service)

    @provide(scope=Scope.REQUEST)
    def get_edit_reply_use_case(
        self, engagement_service: EngagementService
    ) -> EditReplyUseCase:
        """Provide edit reply use case."""
        return EditReplyUseCase(engagement_service=engagement_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_reply_use_case(
        self, engagement_service: EngagementService
    ) -> DeleteReplyUseCase:
        """Provide delete reply use case."""
        return DeleteReplyUseCase(engagement_service=engagement_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(
        self, engagement_service: EngagementService
    ) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(engagement_service=engagement_service)

    @provide(scope=Scope.REQUEST)
    def get_share_use_case(self, engagement_service: EngagementService) -> ShareUseCase:
        """Provide share use case."""
        return ShareUseCase(engagement_service=engagement_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_allow_use_case(
        self, engagement_service: EngagementService
    ) -> ToggleAllowUseCase:
        """Provide toggle allow use case."""
        return ToggleAllowUseCase(engagement_service=engagement_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, engagement_service: EngagementService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(engagement_service=engagement_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_list_feed_use_case(self, feed_service: FeedService) -> ListFeedUseCase:
        """Provide list feed use case."""
        return ListFeedUseCase(feed_service=feed_service)

    # Gallery use cases
    @provide(scope=Scope.REQUEST)
    def get_create_gallery_post_use_case(
        self, gallery_service: GalleryService
    ) -> CreateGalleryPostUseCase:
        """Provide create gallery post use case."""
        return CreateGalleryPostUseCase(gallery_service=gallery_service)

    @provide(scope=Scope.REQUEST)
    def get_get_gallery_post_use_case(
        self, gallery_service: GalleryService
    ) -> GetGalleryPostUseCase:
        """Provide get gallery post use case."""
        return GetGalleryPostUseCase(gallery_service=gallery_service)

    @provide(scope=Scope.REQUEST)
    def get_update_gallery_post_use_case(
        self, gallery_service: GalleryService
    ) -> UpdateGalleryPostUseCase:
        """Provide update gallery post use case."""
        return UpdateGalleryPostUseCase(gallery_service=gallery_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_gallery_post_use_case(
        self, gallery_service: GalleryService
    ) -> DeleteGalleryPostUseCase:
        """Provide delete gallery post use case."""
        return DeleteGalleryPostUseCase(gallery_service=gallery_service)

    @provide(scope=Scope.REQUEST)
    def get_list_gallery_posts_use_case(
        self, gallery_service: GalleryService
    ) -> ListGalleryPostsUseCase:
        """Provide list gallery posts use case."""
        return ListGalleryPostsUseCase(gallery_service=gallery_service)

    # Event use cases
    @provide(scope=Scope.REQUEST)
    def get_create_event_use_case(
        self, event_service: EventService
    ) -> CreateEventUseCase:
        """Provide create event use case."""
        return CreateEventUseCase(event_service=event_service)

    @provide(scope=Scope.REQUEST)
    def get_get_event_use_case(self, event_service: EventService) -> GetEventUseCase:
        """Provide get event use case."""
        return GetEventUseCase(event_service=event_service)

    @provide(scope=Scope.REQUEST)
    def get_update_event_use_case(
        self, event_service: EventService
    ) -> UpdateEventUseCase:
        """Provide update event use case."""
        return UpdateEventUseCase(event_service=event_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_event_use_case(
        self, event_service: EventService
    ) -> DeleteEventUseCase:
        """Provide delete event use case."""
        return DeleteEventUseCase(event_service=event_service)

    @provide(scope=Scope.REQUEST)
    def get_list_events_use_case(
        self, event_service: EventService
    ) -> ListEventsUseCase:
        """Provide list events use case."""
        return ListEventsUseCase(event_service=event_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_attendance_use_case(
        self, event_service: EventService
    ) -> ToggleAttendanceUseCase:
        """Provide toggle attendance use case."""
        return ToggleAttendanceUseCase(event_service=event_service)

    @provide(scope=Scope.REQUEST)
    def get_get_attendance_use_case(
        self, event_service: EventService
    ) -> GetAttendanceUseCase:
        """Provide get attendance use case."""
        return GetAttendanceUseCase(event_service=event_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_user_flag_use_case(
        self, user_service: UserService
    ) -> ToggleUserFlagUseCase:
        """Provide toggle user flag use case."""
        return ToggleUserFlagUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_follow_use_case(
        self, user_service: UserService
    ) -> ToggleFollowUseCase:
        """Provide toggle follow use case."""
        return ToggleFollowUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_follows_use_case(
        self, user_service: UserService
    ) -> ListFollowsUseCase:
        """Provide list follows use case."""
        return ListFollowsUseCase(user_service=user_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_create_notification_use_case(
        self, notification_service: NotificationService
    ) -> CreateNotificationUseCase:
        """Provide create notification use case."""
        return CreateNotificationUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_notification_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkNotificationReadUseCase:
        """Provide mark notification read use case."""
        return MarkNotificationReadUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_notification_use_case(
        self, notification_service: NotificationService
    ) -> DeleteNotificationUseCase:
        """Provide delete notification use case."""
        return DeleteNotificationUseCase(notification_service=notification_service)

    # Report use cases
    @provide(scope=Scope.REQUEST)
    def get_create_report_use_case(
        self, report_service: ReportService
    ) -> CreateReportUseCase:
        """Provide create report use case."""
        return CreateReportUseCase(report_service=report_service)

    @provide(scope=Scope.REQUEST)
    def get_search_reports_use_case(
        self, report_service: ReportService
    ) -> SearchReportsUseCase:
        """Provide search reports use case."""
        return SearchReportsUseCase(report_service=report_service)

    @provide(scope=Scope.REQUEST)
    def get_get_report_use_case(self, report_service: ReportService) -> GetReportUseCase:
        """Provide get report use case."""
        return GetReportUseCase(report_service=report_service)

    @provide(scope=Scope.REQUEST)
    def get_process_report_use_case(
        self, report_service: ReportService
    ) -> ProcessReportUseCase:
        """Provide process report use case."""
        return ProcessReportUseCase(report_service=report_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_report_use_case(
        self, report_service: ReportService
    ) -> DeleteReportUseCase:
        """Provide delete report use case."""
        return DeleteReportUseCase(report_service=report_service)
