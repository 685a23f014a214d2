"""Engagement domain service.

One implementation of comments, replies, likes, shares and allow-flag
toggles for every content kind. Only the repository and the authorization
strategy differ between posts, gallery posts and events.
"""

from typing import Optional
from uuid import UUID

import logfire

from letsconnect.domain.error import (
    ConcurrentModificationError,
    InvalidInputError,
    NotFoundError,
)
from letsconnect.domain.model import Comment, Engageable, Reply
from letsconnect.domain.repository import EngageableRepository
from letsconnect.domain.value import (
    AllowFlag,
    CommentId,
    ContentKind,
    LikeTarget,
    Principal,
    ReplyId,
)

from .authorization import AuthorizationPolicy
from .base import Service
from .pagination import slice_page
from .toggle import ToggleOutcome, allow_outcome, like_outcome


class EngagementService(Service):
    """Domain service for engagement on any content kind."""

    def __init__(
        self,
        repositories: dict[ContentKind, EngageableRepository],
        authorization_policy: AuthorizationPolicy,
    ) -> None:
        """Initialize engagement service.

        Args:
            repositories: Repository per content kind
            authorization_policy: Per-kind authorization rules
        """
        self.repositories = repositories
        self.authorization_policy = authorization_policy

    def _repository(self, kind: ContentKind) -> EngageableRepository:
        repository = self.repositories.get(kind)
        if repository is None:
            raise InvalidInputError(f"Unsupported content kind: {kind}")
        return repository

    async def get_entity(self, kind: ContentKind, entity_id: UUID) -> Engageable:
        """Load an entity or raise NotFoundError."""
        entity = await self._repository(kind).find_by_id(entity_id)
        if entity is None:
            logfire.warn("Entity not found", kind=kind.value, entity_id=str(entity_id))
            raise NotFoundError(kind.label, str(entity_id))
        return entity

    async def _save(self, kind: ContentKind, entity: Engageable) -> Engageable:
        return await self._repository(kind).save(entity)

    async def add_comment(
        self, kind: ContentKind, entity_id: UUID, principal: Principal, content: str
    ) -> Comment:
        """Add a comment to an entity.

        Raises:
            NotFoundError: If the entity does not exist
            EngagementDisabledError: If comments are turned off
            InvalidInputError: If the content is empty or too long
        """
        with logfire.span(
            "engagement_service.add_comment",
            kind=kind.value,
            entity_id=str(entity_id),
            user_id=str(principal.user_id),
        ):
            entity = await self.get_entity(kind, entity_id)
            updated, comment = entity.add_comment(principal.user_id, content)
            await self._save(kind, updated)
            logfire.info(
                "Comment added",
                kind=kind.value,
                entity_id=str(entity_id),
                comment_id=str(comment.id),
            )
            return comment

    async def edit_comment(
        self,
        kind: ContentKind,
        entity_id: UUID,
        comment_id: CommentId,
        principal: Principal,
        content: str,
    ) -> None:
        """Replace the content of a comment. Only its owner may edit."""
        with logfire.span(
            "engagement_service.edit_comment",
            kind=kind.value,
            entity_id=str(entity_id),
            comment_id=str(comment_id),
        ):
            entity = await self.get_entity(kind, entity_id)
            updated = entity.edit_comment(comment_id, principal.user_id, content)
            await self._save(kind, updated)

    async def delete_comment(
        self,
        kind: ContentKind,
        entity_id: UUID,
        comment_id: CommentId,
        principal: Principal,
    ) -> None:
        """Delete a comment and all of its replies."""
        with logfire.span(
            "engagement_service.delete_comment",
            kind=kind.value,
            entity_id=str(entity_id),
            comment_id=str(comment_id),
        ):
            entity = await self.get_entity(kind, entity_id)
            can_moderate = self.authorization_policy.can_moderate_engagement(
                entity, principal
            )
            updated = entity.delete_comment(comment_id, principal.user_id, can_moderate)
            await self._save(kind, updated)
            logfire.info(
                "Comment deleted",
                kind=kind.value,
                comment_id=str(comment_id),
                moderated=can_moderate,
            )

    async def add_reply(
        self,
        kind: ContentKind,
        entity_id: UUID,
        comment_id: CommentId,
        principal: Principal,
        text: str,
    ) -> Reply:
        """Reply to a comment through the repository's atomic push."""
        with logfire.span(
            "engagement_service.add_reply",
            kind=kind.value,
            entity_id=str(entity_id),
            comment_id=str(comment_id),
        ):
            entity = await self.get_entity(kind, entity_id)
            entity.find_comment(comment_id)
            reply = Reply.new(principal.user_id, text)
            await self._repository(kind).push_reply(entity_id, comment_id, reply)
            logfire.info("Reply added", comment_id=str(comment_id), reply_id=str(reply.id))
            return reply

    async def edit_reply(
        self,
        kind: ContentKind,
        entity_id: UUID,
        comment_id: CommentId,
        reply_id: ReplyId,
        principal: Principal,
        text: str,
    ) -> None:
        with logfire.span(
            "engagement_service.edit_reply",
            kind=kind.value,
            entity_id=str(entity_id),
            reply_id=str(reply_id),
        ):
            entity = await self.get_entity(kind, entity_id)
            updated = entity.edit_reply(comment_id, reply_id, principal.user_id, text)
            await self._save(kind, updated)

    async def delete_reply(
        self,
        kind: ContentKind,
        entity_id: UUID,
        comment_id: CommentId,
        reply_id: ReplyId,
        principal: Principal,
    ) -> None:
        with logfire.span(
            "engagement_service.delete_reply",
            kind=kind.value,
            entity_id=str(entity_id),
            reply_id=str(reply_id),
        ):
            entity = await self.get_entity(kind, entity_id)
            can_moderate = self.authorization_policy.can_moderate_engagement(
                entity, principal
            )
            updated = entity.delete_reply(
                comment_id, reply_id, principal.user_id, can_moderate
            )
            await self._save(kind, updated)

    async def toggle_like(
        self,
        kind: ContentKind,
        entity_id: UUID,
        principal: Principal,
        target: LikeTarget = LikeTarget.ENTITY,
        comment_id: Optional[CommentId] = None,
        reply_id: Optional[ReplyId] = None,
    ) -> ToggleOutcome:
        """Flip the principal's like on the entity, a comment or a reply."""
        with logfire.span(
            "engagement_service.toggle_like",
            kind=kind.value,
            entity_id=str(entity_id),
            target=target.value,
        ):
            entity = await self.get_entity(kind, entity_id)
            user_id = principal.user_id

            if target == LikeTarget.ENTITY:
                updated, liked = entity.toggle_like(user_id)
                subject = entity.resource_name
            elif target == LikeTarget.COMMENT:
                if comment_id is None:
                    raise InvalidInputError("Comment id is required")
                updated, liked = entity.toggle_comment_like(comment_id, user_id)
                subject = "Comment"
            else:
                if comment_id is None or reply_id is None:
                    raise InvalidInputError("Comment id and reply id are required")
                updated, liked = entity.toggle_reply_like(comment_id, reply_id, user_id)
                subject = "Reply"

            await self._save(kind, updated)
            return like_outcome(subject, liked)

    async def share(
        self, kind: ContentKind, entity_id: UUID, principal: Principal
    ) -> int:
        """Count a share. Returns the new share total.

        Raises:
            EngagementDisabledError: If sharing is turned off
        """
        with logfire.span(
            "engagement_service.share",
            kind=kind.value,
            entity_id=str(entity_id),
            user_id=str(principal.user_id),
        ):
            entity = await self.get_entity(kind, entity_id)
            entity.ensure_shareable()
            updated = await self._repository(kind).increment_shares(entity_id)
            if updated is None:
                # Deleted or switched off since it was loaded
                current = await self.get_entity(kind, entity_id)
                current.ensure_shareable()
                raise ConcurrentModificationError(
                    kind.label, str(entity_id), current.version
                )
            return updated.shares

    async def toggle_allow(
        self,
        kind: ContentKind,
        entity_id: UUID,
        principal: Principal,
        flag: AllowFlag,
    ) -> ToggleOutcome:
        """Flip allow_comments or allow_shares. Existing data is kept."""
        with logfire.span(
            "engagement_service.toggle_allow",
            kind=kind.value,
            entity_id=str(entity_id),
            flag=flag.value,
        ):
            entity = await self.get_entity(kind, entity_id)
            self.authorization_policy.ensure_can_toggle_allow(entity, principal)
            updated, allowed = entity.toggle_allow(flag)
            await self._save(kind, updated)
            logfire.info(
                "Allow flag toggled", entity_id=str(entity_id), flag=flag.value, state=allowed
            )
            return allow_outcome(flag, allowed)

    async def get_comments(
        self, kind: ContentKind, entity_id: UUID, page: int, page_size: int
    ) -> tuple[list[Comment], int]:
        """Return one page of comments and the total number of comments."""
        with logfire.span(
            "engagement_service.get_comments",
            kind=kind.value,
            entity_id=str(entity_id),
            page=page,
        ):
            entity = await self.get_entity(kind, entity_id)
            return slice_page(entity.comments, page, page_size)
