"""Unit tests for the row mappers.

JSONB columns must hold plain JSON values, and rows read back from the
database must rebuild the full engagement aggregate.
"""

import json
from uuid import uuid4

from letsconnect.domain.model import Notification, Report
from letsconnect.domain.value import (
    MediaFile,
    NotificationId,
    NotificationType,
    PostId,
    ReportId,
    ReportReason,
    UserId,
)
from letsconnect.persistence.mappers import (
    event_to_dict,
    notification_to_dict,
    post_to_dict,
    report_to_dict,
    row_to_event,
    row_to_notification,
    row_to_post,
    row_to_report,
    row_to_user,
    user_to_dict,
)
from tests.conftest import make_event, make_post, make_principal, make_user


class TestPostMapping:
    def test_jsonb_columns_are_serializable(self):
        # Arrange
        post = make_post(media=MediaFile(file_id="f1", file_name="a.png", url="https://cdn/a.png"))
        post, comment = post.add_comment(make_principal().user_id, "hello")
        post, _ = post.add_reply(comment.id, make_principal().user_id, "hi back")
        post, _ = post.toggle_like(make_principal().user_id)

        # Act
        row = post_to_dict(post)

        # Assert
        json.dumps({k: row[k] for k in ("likes", "comments", "media")})
        assert row["category"] == "usersPost"
        assert row["comments_count"] == 2

    def test_row_rebuilds_aggregate(self):
        post = make_post()
        post, comment = post.add_comment(make_principal().user_id, "hello")
        post, _ = post.add_reply(comment.id, make_principal().user_id, "hi back")

        restored = row_to_post(post_to_dict(post))

        assert restored.comments[0].id == comment.id
        assert restored.comments[0].replies[0].reply == "hi back"
        assert restored.comments_count == 2


class TestEventMapping:
    def test_attendance_and_location(self):
        event = make_event()
        event, _ = event.toggle_attendance(make_principal().user_id)

        row = event_to_dict(event)
        restored = row_to_event(row)

        assert row["location"] == {"latitude": 33.6, "longitude": 73.0}
        assert row["attendance_count"] == 1
        assert restored.attendance == event.attendance


class TestUserMapping:
    def test_follow_graph_is_json(self):
        # Arrange
        ali = make_user()
        _, sara, _ = ali.toggle_follow(make_user())

        # Act
        row = user_to_dict(sara)
        restored = row_to_user(row)

        # Assert
        json.dumps(row["followers"])
        assert row["followers"] == [str(ali.id)]
        assert row["followers_count"] == 1
        assert row["role"] == "user"
        assert restored.followers == [ali.id]

    def test_null_graph_columns(self):
        row = user_to_dict(make_user())
        row["followers"] = None
        row["following"] = None

        restored = row_to_user(row)

        assert restored.followers == []
        assert restored.following == []


class TestSocialMapping:
    def test_notification_round_trip(self):
        notification = Notification(
            id=NotificationId(uuid4()),
            from_user=UserId(uuid4()),
            to_user=UserId(uuid4()),
            type=NotificationType.COMMENT,
            post_id=uuid4(),
            message="commented on your post",
        )

        row = notification_to_dict(notification)

        assert row["type"] == "comment"
        assert row_to_notification(row) == notification

    def test_report_enums_are_stored_as_values(self):
        report = Report(
            id=ReportId(uuid4()),
            post_id=PostId(uuid4()),
            reporter_id=UserId(uuid4()),
            reason=ReportReason.VIOLENCE,
        )

        row = report_to_dict(report)

        assert row["reason"] == "violence or threats"
        assert row["status"] == "pending"
        assert row_to_report(row) == report
