"""Event use cases."""

from .attendance import (
    GetAttendanceRequest,
    GetAttendanceResponse,
    GetAttendanceUseCase,
    ToggleAttendanceRequest,
    ToggleAttendanceUseCase,
)
from .create_event import CreateEventRequest, CreateEventUseCase
from .delete_event import DeleteEventRequest, DeleteEventUseCase
from .get_event import GetEventRequest, GetEventResponse, GetEventUseCase
from .list_events import (
    EventTimeline,
    ListEventsRequest,
    ListEventsResponse,
    ListEventsUseCase,
)
from .update_event import UpdateEventRequest, UpdateEventUseCase

__all__ = [
    "CreateEventRequest",
    "CreateEventUseCase",
    "DeleteEventRequest",
    "DeleteEventUseCase",
    "EventTimeline",
    "GetAttendanceRequest",
    "GetAttendanceResponse",
    "GetAttendanceUseCase",
    "GetEventRequest",
    "GetEventResponse",
    "GetEventUseCase",
    "ListEventsRequest",
    "ListEventsResponse",
    "ListEventsUseCase",
    "ToggleAttendanceRequest",
    "ToggleAttendanceUseCase",
    "UpdateEventRequest",
    "UpdateEventUseCase",
]
