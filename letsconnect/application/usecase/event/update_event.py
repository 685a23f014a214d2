"""Update event use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from letsconnect.application.usecase.base import BaseUseCase, MessageResponse, parse_id
from letsconnect.domain.service import EventService, UploadedFile
from letsconnect.domain.value import EventId, Location, Principal


class UpdateEventRequest(BaseModel):
    """Update event request. Omitted fields are left unchanged."""

    event_id: str
    principal: Principal
    title: Optional[str] = None
    location: Optional[Location] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    live_url: Optional[str] = None
    allow_comments: Optional[bool] = None
    allow_shares: Optional[bool] = None
    poster: Optional[UploadedFile] = None


class UpdateEventUseCase(BaseUseCase):
    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    async def execute(self, request: UpdateEventRequest) -> MessageResponse:
        await self.event_service.update_event(
            EventId(parse_id(request.event_id, "Event")),
            request.principal,
            title=request.title,
            location=request.location,
            start_time=request.start_time,
            end_time=request.end_time,
            live_url=request.live_url,
            allow_comments=request.allow_comments,
            allow_shares=request.allow_shares,
            poster=request.poster,
        )
        return MessageResponse(message="Event Updated Successfully")
