"""Event repository interface."""

from abc import abstractmethod
from datetime import datetime
from typing import List

from letsconnect.domain.model import Event

from .engageable import EngageableRepository


class EventRepository(EngageableRepository[Event]):
    """Repository for the Event aggregate.

    Recent events are those whose end_time has passed; upcoming events are
    ongoing or in the future (including events without an end).
    """

    @abstractmethod
    async def find_recent(
        self, now: datetime, limit: int = 20, offset: int = 0
    ) -> List[Event]:
        """Find finished events, most recently ended first."""
        pass

    @abstractmethod
    async def find_upcoming(
        self, now: datetime, limit: int = 20, offset: int = 0
    ) -> List[Event]:
        """Find ongoing and future events, soonest first."""
        pass

    @abstractmethod
    async def count_recent(self, now: datetime) -> int:
        pass

    @abstractmethod
    async def count_upcoming(self, now: datetime) -> int:
        pass
