"""Create event use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from letsconnect.application.usecase.base import BaseUseCase, CreatedResponse
from letsconnect.domain.service import EventService, UploadedFile
from letsconnect.domain.value import Location, Principal


class CreateEventRequest(BaseModel):
    """Create event request."""

    principal: Principal
    title: str
    location: Location
    start_time: datetime
    end_time: datetime
    poster: UploadedFile
    live_url: Optional[str] = None
    allow_comments: bool = True
    allow_shares: bool = True


class CreateEventUseCase(BaseUseCase):
    """Use case for scheduling an event with its poster."""

    def __init__(self, event_service: EventService) -> None:
        """Initialize create event use case.

        Args:
            event_service: Event domain service
        """
        self.event_service = event_service

    async def execute(self, request: CreateEventRequest) -> CreatedResponse:
        """Execute create event flow.

        Raises:
            InvalidInputError: If the title or schedule is invalid
            NotAuthorizedError: If the principal is not staff
        """
        event = await self.event_service.create_event(
            principal=request.principal,
            title=request.title,
            location=request.location,
            start_time=request.start_time,
            end_time=request.end_time,
            poster=request.poster,
            live_url=request.live_url,
            allow_comments=request.allow_comments,
            allow_shares=request.allow_shares,
        )
        return CreatedResponse(message="Event Created Successfully", id=str(event.id))
