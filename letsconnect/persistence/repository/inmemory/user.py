"""In-memory user repository for testing."""

from typing import Optional, Sequence

from letsconnect.domain.model import User
from letsconnect.domain.repository import UserRepository
from letsconnect.domain.value import UserId

from .store import InMemoryDocumentStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: Optional[InMemoryDocumentStore] = None) -> None:
        self.store = store or InMemoryDocumentStore()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self.store.collection("users").get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        users = self.store.collection("users")
        return [users[user_id] for user_id in user_ids if user_id in users]

    async def find_for_update(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        # Single event loop, nothing to lock against
        return {user.id: user for user in await self.find_by_ids(user_ids)}

    async def save(self, user: User) -> User:
        self.store.collection("users")[user.id] = user
        return user
