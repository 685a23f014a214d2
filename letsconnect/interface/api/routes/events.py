"""Event routes."""

from datetime import datetime
from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from letsconnect.application.usecase.base import (
    CreatedResponse,
    MessageResponse,
    ToggleResponse,
)
from letsconnect.application.usecase.event import (
    CreateEventRequest,
    CreateEventUseCase,
    DeleteEventRequest,
    DeleteEventUseCase,
    EventTimeline,
    GetAttendanceRequest,
    GetAttendanceResponse,
    GetAttendanceUseCase,
    GetEventRequest,
    GetEventResponse,
    GetEventUseCase,
    ListEventsRequest,
    ListEventsResponse,
    ListEventsUseCase,
    ToggleAttendanceRequest,
    ToggleAttendanceUseCase,
    UpdateEventRequest,
    UpdateEventUseCase,
)
from letsconnect.config import PaginationSettings
from letsconnect.domain.error import InvalidInputError
from letsconnect.domain.service import JWTService
from letsconnect.domain.value import ContentKind, Location
from letsconnect.interface.api.dependencies import (
    authenticate,
    read_token,
    read_upload,
    resolve_page_size,
)
from letsconnect.interface.api.routes.engagement import build_engagement_router

router = APIRouter(prefix="/events", tags=["events"], route_class=DishkaRoute)
engagement_router = build_engagement_router(ContentKind.EVENT, "/events")


def _location(latitude: Optional[float], longitude: Optional[float]) -> Optional[Location]:
    if latitude is None and longitude is None:
        return None
    if latitude is None or longitude is None:
        raise InvalidInputError("Both latitude and longitude are required")
    try:
        return Location(latitude=latitude, longitude=longitude)
    except ValueError:
        raise InvalidInputError("Invalid event location")


@router.post(
    "", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED
)
async def create_event(
    create_event_use_case: FromDishka[CreateEventUseCase],
    jwt_service: FromDishka[JWTService],
    title: str = Form(...),
    latitude: float = Form(...),
    longitude: float = Form(...),
    start_time: datetime = Form(...),
    end_time: datetime = Form(...),
    live_url: Optional[str] = Form(default=None),
    allow_comments: bool = Form(default=True),
    allow_shares: bool = Form(default=True),
    poster: UploadFile = File(...),
    token: str | None = Depends(read_token),
) -> CreatedResponse:
    """Schedule an event with its poster. Staff only.

    Args:
        create_event_use_case: Create event use case from DI
        jwt_service: JWT service for token verification (injected)
        title: Event title, stored lowercased
        latitude: Venue latitude
        longitude: Venue longitude
        start_time: When the event starts
        end_time: When the event ends, after start_time
        live_url: Optional stream link
        allow_comments: Whether comments start enabled
        allow_shares: Whether sharing starts enabled
        poster: Poster image
        token: JWT from the access-token header or cookie

    Returns:
        Confirmation with the new event id
    """
    principal = authenticate(jwt_service, token)
    upload = await read_upload(poster)
    if upload is None:
        raise InvalidInputError("Please Add Event Poster")
    return await create_event_use_case.execute(
        CreateEventRequest(
            principal=principal,
            title=title,
            location=_location(latitude, longitude),
            start_time=start_time,
            end_time=end_time,
            poster=upload,
            live_url=live_url,
            allow_comments=allow_comments,
            allow_shares=allow_shares,
        )
    )


@router.get("/recent", response_model=ListEventsResponse)
async def list_recent_events(
    list_events_use_case: FromDishka[ListEventsUseCase],
    jwt_service: FromDishka[JWTService],
    pagination: FromDishka[PaginationSettings],
    page: int = Query(default=1, ge=1),
    page_size: Optional[int] = Query(default=None, ge=1),
    token: str | None = Depends(read_token),
) -> ListEventsResponse:
    """Finished events, most recently ended first."""
    authenticate(jwt_service, token)
    return await list_events_use_case.execute(
        ListEventsRequest(
            timeline=EventTimeline.RECENT,
            page=page,
            page_size=resolve_page_size(page_size, pagination),
        )
    )


@router.get("/upcoming", response_model=ListEventsResponse)
async def list_upcoming_events(
    list_events_use_case: FromDishka[ListEventsUseCase],
    jwt_service: FromDishka[JWTService],
    pagination: FromDishka[PaginationSettings],
    page: int = Query(default=1, ge=1),
    page_size: Optional[int] = Query(default=None, ge=1),
    token: str | None = Depends(read_token),
) -> ListEventsResponse:
    """Running and future events, soonest first."""
    authenticate(jwt_service, token)
    return await list_events_use_case.execute(
        ListEventsRequest(
            timeline=EventTimeline.UPCOMING,
            page=page,
            page_size=resolve_page_size(page_size, pagination),
        )
    )


@router.get("/{event_id}", response_model=GetEventResponse)
async def get_event(
    event_id: str,
    get_event_use_case: FromDishka[GetEventUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(read_token),
) -> GetEventResponse:
    authenticate(jwt_service, token)
    return await get_event_use_case.execute(GetEventRequest(event_id=event_id))


@router.put("/{event_id}", response_model=MessageResponse)
async def update_event(
    event_id: str,
    update_event_use_case: FromDishka[UpdateEventUseCase],
    jwt_service: FromDishka[JWTService],
    title: Optional[str] = Form(default=None),
    latitude: Optional[float] = Form(default=None),
    longitude: Optional[float] = Form(default=None),
    start_time: Optional[datetime] = Form(default=None),
    end_time: Optional[datetime] = Form(default=None),
    live_url: Optional[str] = Form(default=None),
    allow_comments: Optional[bool] = Form(default=None),
    allow_shares: Optional[bool] = Form(default=None),
    poster: Optional[UploadFile] = File(default=None),
    token: str | None = Depends(read_token),
) -> MessageResponse:
    """Update an event. Omitted fields are left unchanged."""
    principal = authenticate(jwt_service, token)
    return await update_event_use_case.execute(
        UpdateEventRequest(
            event_id=event_id,
            principal=principal,
            title=title,
            location=_location(latitude, longitude),
            start_time=start_time,
            end_time=end_time,
            live_url=live_url,
            allow_comments=allow_comments,
            allow_shares=allow_shares,
            poster=await read_upload(poster),
        )
    )


@router.delete("/{event_id}", response_model=MessageResponse)
async def delete_event(
    event_id: str,
    delete_event_use_case: FromDishka[DeleteEventUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(read_token),
) -> MessageResponse:
    principal = authenticate(jwt_service, token)
    return await delete_event_use_case.execute(
        DeleteEventRequest(event_id=event_id, principal=principal)
    )


@router.post("/{event_id}/attendance", response_model=ToggleResponse)
async def toggle_attendance(
    event_id: str,
    toggle_attendance_use_case: FromDishka[ToggleAttendanceUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(read_token),
) -> ToggleResponse:
    """Join the event, or leave it if already joined.

    Joining an event that has ended is rejected with 400.
    """
    principal = authenticate(jwt_service, token)
    return await toggle_attendance_use_case.execute(
        ToggleAttendanceRequest(event_id=event_id, principal=principal)
    )


@router.get("/{event_id}/attendance", response_model=GetAttendanceResponse)
async def get_attendance(
    event_id: str,
    get_attendance_use_case: FromDishka[GetAttendanceUseCase],
    jwt_service: FromDishka[JWTService],
    pagination: FromDishka[PaginationSettings],
    page: int = Query(default=1, ge=1),
    page_size: Optional[int] = Query(default=None, ge=1),
    token: str | None = Depends(read_token),
) -> GetAttendanceResponse:
    authenticate(jwt_service, token)
    return await get_attendance_use_case.execute(
        GetAttendanceRequest(
            event_id=event_id,
            page=page,
            page_size=resolve_page_size(page_size, pagination, comments=True),
        )
    )
