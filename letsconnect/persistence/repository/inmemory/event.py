"""In-memory event repository for testing."""

from datetime import datetime

from letsconnect.domain.model import Event
from letsconnect.domain.model.common import as_aware
from letsconnect.domain.repository import EventRepository

from .engageable import InMemoryEngageableRepository


class InMemoryEventRepository(InMemoryEngageableRepository[Event], EventRepository):
    """In-memory implementation of EventRepository for testing."""

    collection_name = "events"
    resource = "Event"

    def _recent(self, now: datetime) -> list[Event]:
        events = [e for e in self._items.values() if e.has_ended(now)]
        events.sort(key=lambda e: as_aware(e.end_time), reverse=True)
        return events

    def _upcoming(self, now: datetime) -> list[Event]:
        events = [e for e in self._items.values() if not e.has_ended(now)]
        events.sort(key=lambda e: as_aware(e.start_time))
        return events

    async def find_recent(
        self, now: datetime, limit: int = 20, offset: int = 0
    ) -> list[Event]:
        return self._recent(now)[offset : offset + limit]

    async def find_upcoming(
        self, now: datetime, limit: int = 20, offset: int = 0
    ) -> list[Event]:
        return self._upcoming(now)[offset : offset + limit]

    async def count_recent(self, now: datetime) -> int:
        return len(self._recent(now))

    async def count_upcoming(self, now: datetime) -> int:
        return len(self._upcoming(now))
