"""In-memory base repository for engageable content."""

from typing import Optional, TypeVar
from uuid import UUID

from letsconnect.domain.error import ConcurrentModificationError, NotFoundError
from letsconnect.domain.model import Engageable, Reply
from letsconnect.domain.repository import EngageableRepository
from letsconnect.domain.value import CommentId

from .store import InMemoryDocumentStore

T = TypeVar("T", bound=Engageable)


class InMemoryEngageableRepository(EngageableRepository[T]):
    """Dict-backed repository with the same version checks as PostgreSQL."""

    collection_name: str
    resource: str

    def __init__(self, store: Optional[InMemoryDocumentStore] = None) -> None:
        self.store = store or InMemoryDocumentStore()

    @property
    def _items(self) -> dict[UUID, T]:
        return self.store.collection(self.collection_name)

    async def find_by_id(self, entity_id: UUID) -> Optional[T]:
        return self._items.get(entity_id)

    async def save(self, entity: T) -> T:
        stored = self._items.get(entity.id)
        if entity.version == 0:
            if stored is not None:
                raise ConcurrentModificationError(self.resource, str(entity.id), 0)
        elif stored is None:
            raise NotFoundError(self.resource, str(entity.id))
        elif stored.version != entity.version:
            raise ConcurrentModificationError(
                self.resource, str(entity.id), entity.version
            )

        saved = entity.model_copy(update={"version": entity.version + 1})
        self._items[entity.id] = saved
        return saved

    async def delete(self, entity_id: UUID) -> bool:
        return self._items.pop(entity_id, None) is not None

    async def increment_shares(self, entity_id: UUID) -> Optional[T]:
        stored = self._items.get(entity_id)
        if stored is None or not stored.allow_shares:
            return None
        updated = stored.model_copy(
            update={"shares": stored.shares + 1, "version": stored.version + 1}
        )
        self._items[entity_id] = updated
        return updated

    async def push_reply(
        self, entity_id: UUID, comment_id: CommentId, reply: Reply
    ) -> T:
        stored = self._items.get(entity_id)
        if stored is None:
            raise NotFoundError(self.resource, str(entity_id))
        updated = stored.append_reply(comment_id, reply)
        updated = updated.model_copy(update={"version": stored.version + 1})
        self._items[entity_id] = updated
        return updated
