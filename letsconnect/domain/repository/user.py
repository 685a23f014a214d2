"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from letsconnect.domain.model import User
from letsconnect.domain.value import UserId


class UserRepository(ABC):
    """Repository for the User aggregate."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find users by ID, in the order given. Unknown ids are skipped."""
        pass

    @abstractmethod
    async def find_for_update(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Load users and hold them against concurrent writers.

        The hold lasts until the surrounding unit of work ends, so two
        follow toggles touching the same users run one after the other.

        Returns:
            Found users keyed by id
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert or update a user."""
        pass
