"""Engagement aggregate shared by posts, gallery posts and events.

A content entity owns a list of comments, each comment owns a list of
replies, and every level carries a set of likes. All operations are
copy-on-write: they return a new entity and never touch the receiver.
Derived counters are recomputed from scratch after every mutation.
"""

from datetime import datetime
from typing import ClassVar, Self
from uuid import UUID, uuid4

from pydantic import Field

from letsconnect.domain.error import (
    EngagementDisabledError,
    InvalidInputError,
    NotAuthorizedError,
    NotFoundError,
)
from letsconnect.domain.model.common import DomainModel
from letsconnect.domain.value import AllowFlag, CommentId, ContentKind, ReplyId, UserId

REPLY_MAX_LENGTH = 255


def _validated_text(text: str, max_length: int, field: str) -> str:
    """Strip and bound-check user supplied text."""
    value = (text or "").strip()
    if not 1 <= len(value) <= max_length:
        raise InvalidInputError(
            f"{field} must be between 1 and {max_length} characters"
        )
    return value


def _flip(likes: list[UserId], user_id: UserId) -> tuple[list[UserId], bool]:
    """Toggle membership of user_id, returning the new list and liked state."""
    if user_id in likes:
        return [like for like in likes if like != user_id], False
    return [*likes, user_id], True


class Reply(DomainModel):
    """Reply to a comment."""

    id: ReplyId
    owner_id: UserId
    reply: str = Field(min_length=1, max_length=REPLY_MAX_LENGTH)
    likes: list[UserId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @classmethod
    def new(cls, owner_id: UserId, text: str) -> "Reply":
        now = datetime.now()
        return cls(
            id=ReplyId(uuid4()),
            owner_id=owner_id,
            reply=_validated_text(text, REPLY_MAX_LENGTH, "Reply"),
            created_at=now,
            updated_at=now,
        )


class Comment(DomainModel):
    """Top-level comment on a content entity."""

    id: CommentId
    owner_id: UserId
    content: str = Field(min_length=1)
    likes: list[UserId] = Field(default_factory=list)
    replies: list[Reply] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def find_reply(self, reply_id: ReplyId) -> Reply:
        for reply in self.replies:
            if reply.id == reply_id:
                return reply
        raise NotFoundError("Reply", str(reply_id))

    def with_reply(self, updated: Reply) -> Self:
        replies = [updated if r.id == updated.id else r for r in self.replies]
        return self.model_copy(update={"replies": replies})


def recompute_counts(entity: "Engageable") -> tuple[int, int]:
    """Derive (likes_count, comments_count) by full reduction.

    Every comment counts once plus once per reply.
    """
    likes_count = len(entity.likes)
    comments_count = sum(1 + len(comment.replies) for comment in entity.comments)
    return likes_count, comments_count


class Engageable(DomainModel):
    """Base for content entities carrying the engagement aggregate.

    Subclasses set ``__kind__`` and may tighten ``__comment_max_length__``.
    """

    __kind__: ClassVar[ContentKind]
    __comment_max_length__: ClassVar[int] = 100

    id: UUID
    owner_id: UserId
    allow_comments: bool = True
    allow_shares: bool = True
    likes: list[UserId] = Field(default_factory=list)
    likes_count: int = Field(default=0, ge=0)
    shares: int = Field(default=0, ge=0)
    comments: list[Comment] = Field(default_factory=list)
    comments_count: int = Field(default=0, ge=0)
    version: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def resource_name(self) -> str:
        return self.__kind__.label

    def recounted(self) -> Self:
        """Return a copy whose derived counters match the aggregate."""
        likes_count, comments_count = recompute_counts(self)
        return self.model_copy(
            update={"likes_count": likes_count, "comments_count": comments_count}
        )

    def _mutated(self, **changes) -> Self:
        changes.setdefault("updated_at", datetime.now())
        return self.model_copy(update=changes).recounted()

    def find_comment(self, comment_id: CommentId) -> Comment:
        for comment in self.comments:
            if comment.id == comment_id:
                return comment
        raise NotFoundError("Comment", str(comment_id))

    def _with_comment(self, updated: Comment) -> Self:
        comments = [updated if c.id == updated.id else c for c in self.comments]
        return self._mutated(comments=comments)

    # Comments

    def add_comment(self, owner_id: UserId, content: str) -> tuple[Self, Comment]:
        if not self.allow_comments:
            raise EngagementDisabledError(
                f"Comments are turned off for this {self.resource_name.lower()}"
            )
        now = datetime.now()
        comment = Comment(
            id=CommentId(uuid4()),
            owner_id=owner_id,
            content=_validated_text(content, self.__comment_max_length__, "Comment"),
            created_at=now,
            updated_at=now,
        )
        return self._mutated(comments=[*self.comments, comment], updated_at=now), comment

    def edit_comment(
        self, comment_id: CommentId, owner_id: UserId, content: str
    ) -> Self:
        comment = self.find_comment(comment_id)
        if comment.owner_id != owner_id:
            raise NotAuthorizedError("Comment", str(comment_id), str(owner_id))
        edited = comment.model_copy(
            update={
                "content": _validated_text(
                    content, self.__comment_max_length__, "Comment"
                ),
                "updated_at": datetime.now(),
            }
        )
        return self._with_comment(edited)

    def delete_comment(
        self, comment_id: CommentId, requester: UserId, can_moderate: bool
    ) -> Self:
        """Remove a comment together with its replies.

        The comment owner may always delete. Anyone else needs
        ``can_moderate``, which the authorization policy decides per kind.
        """
        comment = self.find_comment(comment_id)
        if comment.owner_id != requester and not can_moderate:
            raise NotAuthorizedError("Comment", str(comment_id), str(requester))
        return self._mutated(
            comments=[c for c in self.comments if c.id != comment_id]
        )

    # Replies

    def add_reply(
        self, comment_id: CommentId, owner_id: UserId, text: str
    ) -> tuple[Self, Reply]:
        self.find_comment(comment_id)
        reply = Reply.new(owner_id, text)
        return self.append_reply(comment_id, reply), reply

    def append_reply(self, comment_id: CommentId, reply: Reply) -> Self:
        """Attach an already validated reply to a comment."""
        comment = self.find_comment(comment_id)
        updated = comment.model_copy(update={"replies": [*comment.replies, reply]})
        return self._with_comment(updated)

    def edit_reply(
        self, comment_id: CommentId, reply_id: ReplyId, owner_id: UserId, text: str
    ) -> Self:
        comment = self.find_comment(comment_id)
        reply = comment.find_reply(reply_id)
        if reply.owner_id != owner_id:
            raise NotAuthorizedError("Reply", str(reply_id), str(owner_id))
        edited = reply.model_copy(
            update={
                "reply": _validated_text(text, REPLY_MAX_LENGTH, "Reply"),
                "updated_at": datetime.now(),
            }
        )
        return self._with_comment(comment.with_reply(edited))

    def delete_reply(
        self,
        comment_id: CommentId,
        reply_id: ReplyId,
        requester: UserId,
        can_moderate: bool,
    ) -> Self:
        comment = self.find_comment(comment_id)
        reply = comment.find_reply(reply_id)
        if reply.owner_id != requester and not can_moderate:
            raise NotAuthorizedError("Reply", str(reply_id), str(requester))
        updated = comment.model_copy(
            update={"replies": [r for r in comment.replies if r.id != reply_id]}
        )
        return self._with_comment(updated)

    # Likes

    def toggle_like(self, user_id: UserId) -> tuple[Self, bool]:
        likes, liked = _flip(self.likes, user_id)
        return self._mutated(likes=likes), liked

    def toggle_comment_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> tuple[Self, bool]:
        comment = self.find_comment(comment_id)
        likes, liked = _flip(comment.likes, user_id)
        return self._with_comment(comment.model_copy(update={"likes": likes})), liked

    def toggle_reply_like(
        self, comment_id: CommentId, reply_id: ReplyId, user_id: UserId
    ) -> tuple[Self, bool]:
        comment = self.find_comment(comment_id)
        reply = comment.find_reply(reply_id)
        likes, liked = _flip(reply.likes, user_id)
        updated = comment.with_reply(reply.model_copy(update={"likes": likes}))
        return self._with_comment(updated), liked

    # Shares and gates

    def ensure_shareable(self) -> None:
        if not self.allow_shares:
            raise EngagementDisabledError(
                f"Sharing is turned off for this {self.resource_name.lower()}"
            )

    def share(self) -> Self:
        """Count one more share. The same user may share repeatedly."""
        self.ensure_shareable()
        return self._mutated(shares=self.shares + 1)

    def toggle_allow(self, flag: AllowFlag) -> tuple[Self, bool]:
        field = "allow_comments" if flag == AllowFlag.COMMENTS else "allow_shares"
        state = not getattr(self, field)
        return self._mutated(**{field: state}), state
