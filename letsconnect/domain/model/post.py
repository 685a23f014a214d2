"""Feed post aggregate."""

from typing import ClassVar, Optional

from pydantic import Field

from letsconnect.domain.model.engagement import Engageable
from letsconnect.domain.value import (
    ContentKind,
    MediaFile,
    MediaType,
    PostCategory,
    PostId,
)

POST_CONTENT_MAX_LENGTH = 300


class Post(Engageable):
    """Feed post written by a user or published by staff.

    Posts in the ``usersPost`` category belong to their author; every other
    category is editorial content managed by staff.
    """

    __kind__: ClassVar[ContentKind] = ContentKind.POST

    id: PostId
    content: str = Field(default="", max_length=POST_CONTENT_MAX_LENGTH)
    category: PostCategory = PostCategory.USERS_POST
    media_type: MediaType = MediaType.TEXT
    media: Optional[MediaFile] = None

    @property
    def is_users_post(self) -> bool:
        return self.category == PostCategory.USERS_POST
