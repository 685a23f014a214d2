"""Archive of deleted user posts."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from pydantic import Field

from letsconnect.domain.model.common import DomainModel
from letsconnect.domain.model.engagement import Comment
from letsconnect.domain.model.post import Post
from letsconnect.domain.value import (
    DeletedPostId,
    MediaFile,
    MediaType,
    PostCategory,
    PostId,
    UserId,
)


class DeletedPost(DomainModel):
    """Snapshot of a user post taken right before it is hard-deleted."""

    id: DeletedPostId
    original_post_id: PostId
    owner_id: UserId
    content: str = ""
    category: PostCategory
    media_type: MediaType
    media: Optional[MediaFile] = None
    allow_comments: bool
    allow_shares: bool
    likes: list[UserId] = Field(default_factory=list)
    likes_count: int = 0
    shares: int = 0
    comments: list[Comment] = Field(default_factory=list)
    comments_count: int = 0
    post_created_at: datetime
    post_updated_at: datetime
    created_at: datetime = Field(default_factory=datetime.now)

    @classmethod
    def from_post(cls, post: Post) -> "DeletedPost":
        return cls(
            id=DeletedPostId(uuid4()),
            original_post_id=post.id,
            owner_id=post.owner_id,
            content=post.content,
            category=post.category,
            media_type=post.media_type,
            media=post.media,
            allow_comments=post.allow_comments,
            allow_shares=post.allow_shares,
            likes=post.likes,
            likes_count=post.likes_count,
            shares=post.shares,
            comments=post.comments,
            comments_count=post.comments_count,
            post_created_at=post.created_at,
            post_updated_at=post.updated_at,
        )
