"""Delete event use case."""

from pydantic import BaseModel

from letsconnect.application.usecase.base import BaseUseCase, MessageResponse, parse_id
from letsconnect.domain.service import EventService
from letsconnect.domain.value import EventId, Principal


class DeleteEventRequest(BaseModel):
    """Delete event request."""

    event_id: str
    principal: Principal


class DeleteEventUseCase(BaseUseCase):
    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    async def execute(self, request: DeleteEventRequest) -> MessageResponse:
        await self.event_service.delete_event(
            EventId(parse_id(request.event_id, "Event")), request.principal
        )
        return MessageResponse(message="Event Deleted Successfully")
