"""Get event use case."""

from pydantic import BaseModel

from letsconnect.application.usecase.base import BaseUseCase, parse_id
from letsconnect.domain.model import Event
from letsconnect.domain.service import EventService
from letsconnect.domain.value import EventId


class GetEventRequest(BaseModel):
    """Get event request."""

    event_id: str


class GetEventResponse(BaseModel):
    """Get event response."""

    success: bool = True
    event: Event


class GetEventUseCase(BaseUseCase):
    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    async def execute(self, request: GetEventRequest) -> GetEventResponse:
        event = await self.event_service.get_event(
            EventId(parse_id(request.event_id, "Event"))
        )
        return GetEventResponse(event=event)
