"""List events use case."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from letsconnect.application.usecase.base import BaseUseCase
from letsconnect.domain.model import Event
from letsconnect.domain.service import EventService, total_pages


class EventTimeline(str, Enum):
    """Which side of now to list."""

    RECENT = "recent"
    UPCOMING = "upcoming"


class ListEventsRequest(BaseModel):
    """List events request."""

    timeline: EventTimeline
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1)
    now: Optional[datetime] = None


class ListEventsResponse(BaseModel):
    """One page of events."""

    success: bool = True
    data: list[Event]
    total: int
    total_pages: int
    page: int


class ListEventsUseCase(BaseUseCase):
    """Use case for listing finished or upcoming events.

    Recent events are ordered by end time, latest first. Upcoming events
    include those still running and are ordered by start time.
    """

    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    async def execute(self, request: ListEventsRequest) -> ListEventsResponse:
        if request.timeline == EventTimeline.RECENT:
            list_events = self.event_service.list_recent
        else:
            list_events = self.event_service.list_upcoming
        events, total = await list_events(
            request.page, request.page_size, now=request.now
        )
        return ListEventsResponse(
            data=events,
            total=total,
            total_pages=total_pages(total, request.page_size),
            page=request.page,
        )
