"""Test configuration and shared factories."""

from datetime import datetime, timedelta
from uuid import uuid4

from letsconnect.config import AuthSettings, Settings
from letsconnect.domain.model import Event, GalleryPost, Post, User
from letsconnect.domain.service import UploadedFile
from letsconnect.domain.value import (
    EventId,
    GalleryCategory,
    GalleryPostId,
    Location,
    MediaFile,
    NewsType,
    PostCategory,
    PostId,
    Principal,
    Role,
    UserId,
)
from letsconnect.util.jwt import create_token


def make_principal(role: Role = Role.USER, user_id: UserId | None = None) -> Principal:
    """Authenticated caller with a fresh id unless one is given."""
    return Principal(user_id=user_id or UserId(uuid4()), role=role)


def make_user(role: Role = Role.USER, **overrides) -> User:
    user_id = overrides.pop("id", None) or UserId(uuid4())
    return User(
        id=user_id,
        name=overrides.pop("name", "Test User"),
        username=overrides.pop("username", f"user_{str(user_id)[:8]}"),
        role=role,
        **overrides,
    )


def make_post(owner_id: UserId | None = None, **overrides) -> Post:
    """Unsaved text post in the usersPost category."""
    return Post(
        id=overrides.pop("id", None) or PostId(uuid4()),
        owner_id=owner_id or UserId(uuid4()),
        content=overrides.pop("content", "Hello network"),
        category=overrides.pop("category", PostCategory.USERS_POST),
        **overrides,
    )


def make_gallery_post(owner_id: UserId | None = None, **overrides) -> GalleryPost:
    return GalleryPost(
        id=overrides.pop("id", None) or GalleryPostId(uuid4()),
        owner_id=owner_id or UserId(uuid4()),
        title=overrides.pop("title", "flood relief"),
        category=overrides.pop("category", GalleryCategory.IMAGE),
        news_type=overrides.pop("news_type", NewsType.PAKISTANI),
        media=overrides.pop(
            "media", MediaFile(file_id="file-1", file_name="photo.png", url=None)
        ),
        **overrides,
    )


def make_event(owner_id: UserId | None = None, **overrides) -> Event:
    """Unsaved event that starts in one day and lasts two hours."""
    start_time = overrides.pop("start_time", datetime.now() + timedelta(days=1))
    return Event(
        id=overrides.pop("id", None) or EventId(uuid4()),
        owner_id=owner_id or UserId(uuid4()),
        title=overrides.pop("title", "Community Meetup"),
        location=overrides.pop("location", Location(latitude=33.6, longitude=73.0)),
        start_time=start_time,
        end_time=overrides.pop("end_time", start_time + timedelta(hours=2)),
        **overrides,
    )


def make_upload(filename: str = "photo.png", data: bytes = b"\x89PNG-data") -> UploadedFile:
    return UploadedFile(data=data, filename=filename, content_type="image/png")


def auth_headers(principal: Principal, settings: AuthSettings | None = None) -> dict[str, str]:
    """Headers carrying a valid token for the principal."""
    token = create_token(
        str(principal.user_id), principal.role.value, settings or Settings().auth
    )
    return {"access-token": token}
