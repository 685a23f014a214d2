"""Event attendance use cases."""

from pydantic import BaseModel, Field

from letsconnect.application.usecase.base import (
    BaseUseCase,
    ToggleResponse,
    parse_id,
)
from letsconnect.domain.model import Attendee
from letsconnect.domain.service import EventService, total_pages
from letsconnect.domain.value import EventId, Principal


class ToggleAttendanceRequest(BaseModel):
    """Toggle attendance request."""

    event_id: str
    principal: Principal


class ToggleAttendanceUseCase(BaseUseCase):
    """Use case for joining an event, or leaving it when already joined."""

    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    async def execute(self, request: ToggleAttendanceRequest) -> ToggleResponse:
        outcome = await self.event_service.toggle_attendance(
            EventId(parse_id(request.event_id, "Event")), request.principal
        )
        return ToggleResponse(message=outcome.message, state=outcome.state)


class GetAttendanceRequest(BaseModel):
    """Get attendance request."""

    event_id: str
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1)


class GetAttendanceResponse(BaseModel):
    """One page of the attendance list, in join order."""

    success: bool = True
    attendance: list[Attendee]
    total_attendance: int
    total_pages: int
    page: int


class GetAttendanceUseCase(BaseUseCase):
    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    async def execute(self, request: GetAttendanceRequest) -> GetAttendanceResponse:
        attendees, total = await self.event_service.get_attendance(
            EventId(parse_id(request.event_id, "Event")),
            request.page,
            request.page_size,
        )
        return GetAttendanceResponse(
            attendance=attendees,
            total_attendance=total,
            total_pages=total_pages(total, request.page_size),
            page=request.page,
        )
