"""Request base shared by engagement use cases."""

from uuid import UUID

from pydantic import BaseModel

from letsconnect.application.usecase.base import parse_id
from letsconnect.domain.value import CommentId, ContentKind, Principal, ReplyId


class EngagementRequest(BaseModel):
    """Target entity and the authenticated caller."""

    kind: ContentKind
    entity_id: str  # UUID string
    principal: Principal

    def parsed_entity_id(self) -> UUID:
        return parse_id(self.entity_id, self.kind.label)


def parse_comment_id(value: str) -> CommentId:
    return CommentId(parse_id(value, "Comment"))


def parse_reply_id(value: str) -> ReplyId:
    return ReplyId(parse_id(value, "Reply"))
