"""Who may moderate, toggle, create or manage content of each kind."""

from typing import Optional

from letsconnect.domain.error import NotAuthorizedError
from letsconnect.domain.model import Engageable, Post
from letsconnect.domain.value import (
    ContentKind,
    PostCategory,
    Principal,
    Role,
)

from .base import Service


class KindPolicy:
    """Authorization rules for one content kind.

    The defaults give engagement moderation and allow-flag toggles to the
    entity owner and reserve entity management for staff.
    """

    def can_moderate_engagement(
        self, entity: Engageable, principal: Principal
    ) -> bool:
        """May the principal delete comments and replies written by others?"""
        return entity.owner_id == principal.user_id

    def can_toggle_allow(self, entity: Engageable, principal: Principal) -> bool:
        return entity.owner_id == principal.user_id

    def can_manage(self, entity: Engageable, principal: Principal) -> bool:
        """May the principal update or delete the entity itself?"""
        return principal.is_staff

    def can_create(self, principal: Principal, category: Optional[str]) -> bool:
        return principal.is_staff


class PostPolicy(KindPolicy):
    """User posts belong to their author, editorial posts to staff."""

    def can_manage(self, entity: Engageable, principal: Principal) -> bool:
        if isinstance(entity, Post) and entity.is_users_post:
            return entity.owner_id == principal.user_id
        return principal.is_staff

    def can_create(self, principal: Principal, category: Optional[str]) -> bool:
        if category == PostCategory.USERS_POST:
            return True
        return principal.is_staff


class GalleryPolicy(KindPolicy):
    pass


class EventPolicy(KindPolicy):
    """Admins moderate every event discussion; staff run the event gates."""

    def can_moderate_engagement(
        self, entity: Engageable, principal: Principal
    ) -> bool:
        return entity.owner_id == principal.user_id or principal.role == Role.ADMIN

    def can_toggle_allow(self, entity: Engageable, principal: Principal) -> bool:
        return principal.is_staff


DEFAULT_POLICIES: dict[ContentKind, KindPolicy] = {
    ContentKind.POST: PostPolicy(),
    ContentKind.GALLERY: GalleryPolicy(),
    ContentKind.EVENT: EventPolicy(),
}


class AuthorizationPolicy(Service):
    """Domain service resolving the per-kind authorization strategy."""

    def __init__(
        self, policies: Optional[dict[ContentKind, KindPolicy]] = None
    ) -> None:
        """Initialize authorization policy.

        Args:
            policies: Strategy per content kind, defaults to DEFAULT_POLICIES
        """
        self.policies = policies or DEFAULT_POLICIES

    def for_kind(self, kind: ContentKind) -> KindPolicy:
        return self.policies[kind]

    def can_moderate_engagement(
        self, entity: Engageable, principal: Principal
    ) -> bool:
        return self.for_kind(entity.__kind__).can_moderate_engagement(
            entity, principal
        )

    def ensure_can_toggle_allow(
        self, entity: Engageable, principal: Principal
    ) -> None:
        if not self.for_kind(entity.__kind__).can_toggle_allow(entity, principal):
            raise NotAuthorizedError(
                entity.resource_name, str(entity.id), str(principal.user_id)
            )

    def ensure_can_manage(self, entity: Engageable, principal: Principal) -> None:
        if not self.for_kind(entity.__kind__).can_manage(entity, principal):
            raise NotAuthorizedError(
                entity.resource_name, str(entity.id), str(principal.user_id)
            )

    def ensure_can_create(
        self, kind: ContentKind, principal: Principal, category: Optional[str] = None
    ) -> None:
        if not self.for_kind(kind).can_create(principal, category):
            raise NotAuthorizedError(kind.label, "new", str(principal.user_id))
