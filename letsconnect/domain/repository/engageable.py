"""Repository contract shared by every content entity kind."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar
from uuid import UUID

from letsconnect.domain.model import Engageable, Reply
from letsconnect.domain.value import CommentId

T = TypeVar("T", bound=Engageable)


class EngageableRepository(ABC, Generic[T]):
    """Persistence of a content entity and its engagement aggregate.

    Whole-document saves are optimistic: an entity is written only if the
    stored version still equals the version it was loaded with. The two
    hot paths (sharing and replying) get dedicated atomic operations.
    """

    @abstractmethod
    async def find_by_id(self, entity_id: UUID) -> Optional[T]:
        """Find an entity by ID.

        Args:
            entity_id: The entity's unique identifier

        Returns:
            The entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, entity: T) -> T:
        """Insert a new entity (version 0) or update an existing one.

        Args:
            entity: Entity carrying the version it was loaded with

        Returns:
            The stored entity with its version bumped

        Raises:
            ConcurrentModificationError: If the stored version moved on
            NotFoundError: If an update targets a missing entity
        """
        pass

    @abstractmethod
    async def delete(self, entity_id: UUID) -> bool:
        """Hard-delete an entity.

        Returns:
            True if a row was removed
        """
        pass

    @abstractmethod
    async def increment_shares(self, entity_id: UUID) -> Optional[T]:
        """Atomically add one to the share counter.

        The increment applies only while ``allow_shares`` is set on the
        stored row, so a share racing a toggle-off is not counted.

        Returns:
            The updated entity, None if it does not exist or sharing is off
        """
        pass

    @abstractmethod
    async def push_reply(
        self, entity_id: UUID, comment_id: CommentId, reply: Reply
    ) -> T:
        """Atomically append a reply and recompute the comment count.

        Raises:
            NotFoundError: If the entity or the parent comment is missing
        """
        pass
