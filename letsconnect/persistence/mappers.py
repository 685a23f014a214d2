"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand.
Scalar columns keep native Python types for asyncpg; JSONB columns get
JSON-ready dicts and lists.
"""

from typing import Any, Dict, Optional

from letsconnect.domain.model import (
    DeletedPost,
    Engageable,
    Event,
    GalleryPost,
    Notification,
    Post,
    Report,
    User,
)
from letsconnect.domain.value import MediaFile


def _media_to_json(media: Optional[MediaFile]) -> Optional[Dict[str, Any]]:
    return media.model_dump(mode="json") if media is not None else None


def _engagement_to_dict(entity: Engageable) -> Dict[str, Any]:
    """Columns shared by every engageable table."""
    return {
        "id": entity.id,
        "owner_id": entity.owner_id,
        "allow_comments": entity.allow_comments,
        "allow_shares": entity.allow_shares,
        "likes": [str(user_id) for user_id in entity.likes],
        "likes_count": entity.likes_count,
        "shares": entity.shares,
        "comments": [comment.model_dump(mode="json") for comment in entity.comments],
        "comments_count": entity.comments_count,
        "version": entity.version,
        "created_at": entity.created_at,
        "updated_at": entity.updated_at,
    }


def _engagement_from_row(row: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": row["id"],
        "owner_id": row["owner_id"],
        "allow_comments": row["allow_comments"],
        "allow_shares": row["allow_shares"],
        "likes": row.get("likes") or [],
        "likes_count": row["likes_count"],
        "shares": row["shares"],
        "comments": row.get("comments") or [],
        "comments_count": row["comments_count"],
        "version": row["version"],
        "created_at": row["created_at"],
        "updated_at": row["updated_at"],
    }


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post.model_validate(
        {
            **_engagement_from_row(row),
            "content": row.get("content") or "",
            "category": row["category"],
            "media_type": row["media_type"],
            "media": row.get("media"),
        }
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        **_engagement_to_dict(post),
        "content": post.content,
        "category": post.category.value,
        "media_type": post.media_type.value,
        "media": _media_to_json(post.media),
    }


def row_to_gallery_post(row: Dict[str, Any]) -> GalleryPost:
    return GalleryPost.model_validate(
        {
            **_engagement_from_row(row),
            "title": row["title"],
            "category": row["category"],
            "news_type": row.get("news_type"),
            "media": row.get("media"),
            "youtube_url": row.get("youtube_url"),
        }
    )


def gallery_post_to_dict(gallery_post: GalleryPost) -> Dict[str, Any]:
    return {
        **_engagement_to_dict(gallery_post),
        "title": gallery_post.title,
        "category": gallery_post.category.value,
        "news_type": gallery_post.news_type.value if gallery_post.news_type else None,
        "media": _media_to_json(gallery_post.media),
        "youtube_url": gallery_post.youtube_url,
    }


def row_to_event(row: Dict[str, Any]) -> Event:
    return Event.model_validate(
        {
            **_engagement_from_row(row),
            "title": row["title"],
            "location": row["location"],
            "poster": row["poster"],
            "start_time": row["start_time"],
            "end_time": row.get("end_time"),
            "live_url": row.get("live_url"),
            "attendance": row.get("attendance") or [],
            "attendance_count": row["attendance_count"],
        }
    )


def event_to_dict(event: Event) -> Dict[str, Any]:
    return {
        **_engagement_to_dict(event),
        "title": event.title,
        "location": event.location.model_dump(mode="json"),
        "poster": event.poster.model_dump(mode="json"),
        "start_time": event.start_time,
        "end_time": event.end_time,
        "live_url": event.live_url,
        "attendance": [a.model_dump(mode="json") for a in event.attendance],
        "attendance_count": event.attendance_count,
    }


def row_to_deleted_post(row: Dict[str, Any]) -> DeletedPost:
    return DeletedPost.model_validate(
        {
            **row,
            "likes": row.get("likes") or [],
            "comments": row.get("comments") or [],
        }
    )


def deleted_post_to_dict(deleted_post: DeletedPost) -> Dict[str, Any]:
    data = deleted_post.model_dump(
        exclude={"likes", "comments", "media", "category", "media_type"}
    )
    return {
        **data,
        "category": deleted_post.category.value,
        "media_type": deleted_post.media_type.value,
        "media": _media_to_json(deleted_post.media),
        "likes": [str(user_id) for user_id in deleted_post.likes],
        "comments": [c.model_dump(mode="json") for c in deleted_post.comments],
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User.model_validate(
        {
            **row,
            "followers": row.get("followers") or [],
            "following": row.get("following") or [],
        }
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump(exclude={"followers", "following"})
    data["role"] = user.role.value
    data["followers"] = [str(user_id) for user_id in user.followers]
    data["following"] = [str(user_id) for user_id in user.following]
    return data


def row_to_notification(row: Dict[str, Any]) -> Notification:
    return Notification.model_validate(row)


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data


def row_to_report(row: Dict[str, Any]) -> Report:
    return Report.model_validate(row)


def report_to_dict(report: Report) -> Dict[str, Any]:
    data = report.model_dump()
    data["reason"] = report.reason.value
    data["status"] = report.status.value
    return data
