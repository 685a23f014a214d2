"""Event domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from letsconnect.domain.error import InvalidInputError, NotFoundError
from letsconnect.domain.model import Attendee, Event
from letsconnect.domain.model.common import as_aware
from letsconnect.domain.model.event import EVENT_TITLE_MAX_LENGTH
from letsconnect.domain.repository import EventRepository
from letsconnect.domain.value import (
    ContentKind,
    EventId,
    Location,
    Principal,
)

from .authorization import AuthorizationPolicy
from .base import Service
from .media_service import MediaService, UploadedFile
from .pagination import page_offset, slice_page
from .toggle import ToggleOutcome, attendance_outcome


def _check_schedule(start_time: datetime, end_time: Optional[datetime]) -> None:
    if end_time is not None and as_aware(end_time) <= as_aware(start_time):
        raise InvalidInputError("Event end time must be after its start time")


def _check_title(title: str) -> str:
    title = (title or "").strip().lower()
    if not 1 <= len(title) <= EVENT_TITLE_MAX_LENGTH:
        raise InvalidInputError(
            f"Event title must be between 1 and {EVENT_TITLE_MAX_LENGTH} characters"
        )
    return title


class EventService(Service):
    """Domain service for the event lifecycle and attendance."""

    def __init__(
        self,
        event_repository: EventRepository,
        media_service: MediaService,
        authorization_policy: AuthorizationPolicy,
    ) -> None:
        """Initialize event service.

        Args:
            event_repository: Event repository
            media_service: Poster upload and cleanup
            authorization_policy: Per-kind authorization rules
        """
        self.event_repository = event_repository
        self.media_service = media_service
        self.authorization_policy = authorization_policy

    async def create_event(
        self,
        principal: Principal,
        title: str,
        location: Location,
        start_time: datetime,
        end_time: datetime,
        poster: UploadedFile,
        live_url: Optional[str] = None,
        allow_comments: bool = True,
        allow_shares: bool = True,
    ) -> Event:
        """Schedule a new event. Only staff may create events."""
        with logfire.span(
            "event_service.create_event",
            user_id=str(principal.user_id),
            start_time=start_time.isoformat(),
        ):
            self.authorization_policy.ensure_can_create(ContentKind.EVENT, principal)
            title = _check_title(title)
            _check_schedule(start_time, end_time)

            uploaded = await self.media_service.upload(poster)
            event = Event(
                id=EventId(uuid4()),
                owner_id=principal.user_id,
                title=title,
                location=location,
                poster=uploaded,
                start_time=start_time,
                end_time=end_time,
                live_url=live_url or None,
                allow_comments=allow_comments,
                allow_shares=allow_shares,
            )
            try:
                saved = await self.event_repository.save(event)
            except Exception:
                # The poster is unreachable without its event
                await self.media_service.discard(uploaded)
                raise
            logfire.info("Event created", event_id=str(saved.id))
            return saved

    async def get_event(self, event_id: EventId) -> Event:
        event = await self.event_repository.find_by_id(event_id)
        if event is None:
            raise NotFoundError("Event", str(event_id))
        return event

    async def update_event(
        self,
        event_id: EventId,
        principal: Principal,
        title: Optional[str] = None,
        location: Optional[Location] = None,
        start_time: Optional[datetime] = None,
        end_time: Optional[datetime] = None,
        live_url: Optional[str] = None,
        allow_comments: Optional[bool] = None,
        allow_shares: Optional[bool] = None,
        poster: Optional[UploadedFile] = None,
    ) -> Event:
        with logfire.span(
            "event_service.update_event",
            event_id=str(event_id),
            user_id=str(principal.user_id),
        ):
            event = await self.get_event(event_id)
            self.authorization_policy.ensure_can_manage(event, principal)

            changes: dict = {}
            if title:
                changes["title"] = _check_title(title)
            if location is not None:
                changes["location"] = location
            if start_time is not None:
                changes["start_time"] = start_time
            if end_time is not None:
                changes["end_time"] = end_time
            if live_url:
                changes["live_url"] = live_url
            if allow_comments is not None:
                changes["allow_comments"] = allow_comments
            if allow_shares is not None:
                changes["allow_shares"] = allow_shares

            if not changes and poster is None:
                raise InvalidInputError("No data provided for update")

            _check_schedule(
                changes.get("start_time", event.start_time),
                changes.get("end_time", event.end_time),
            )
            changes["updated_at"] = datetime.now()

            async with self.media_service.replacing(event.poster, poster) as media:
                if media is not None:
                    changes["poster"] = media
                updated = Event.model_validate({**event.model_dump(), **changes})
                saved = await self.event_repository.save(updated)
            logfire.info("Event updated", event_id=str(event_id), fields=sorted(changes))
            return saved

    async def delete_event(self, event_id: EventId, principal: Principal) -> None:
        with logfire.span(
            "event_service.delete_event",
            event_id=str(event_id),
            user_id=str(principal.user_id),
        ):
            event = await self.get_event(event_id)
            self.authorization_policy.ensure_can_manage(event, principal)
            await self.event_repository.delete(event_id)
            await self.media_service.discard(event.poster)
            logfire.info("Event deleted", event_id=str(event_id))

    async def list_recent(
        self, page: int, page_size: int, now: Optional[datetime] = None
    ) -> tuple[list[Event], int]:
        """Finished events, most recently ended first."""
        now = as_aware(now or datetime.now())
        offset = page_offset(page, page_size)
        events = await self.event_repository.find_recent(now, limit=page_size, offset=offset)
        return events, await self.event_repository.count_recent(now)

    async def list_upcoming(
        self, page: int, page_size: int, now: Optional[datetime] = None
    ) -> tuple[list[Event], int]:
        """Ongoing and future events, soonest first."""
        now = as_aware(now or datetime.now())
        offset = page_offset(page, page_size)
        events = await self.event_repository.find_upcoming(
            now, limit=page_size, offset=offset
        )
        return events, await self.event_repository.count_upcoming(now)

    async def toggle_attendance(
        self, event_id: EventId, principal: Principal
    ) -> ToggleOutcome:
        """Join the event, or leave it if already attending."""
        with logfire.span(
            "event_service.toggle_attendance",
            event_id=str(event_id),
            user_id=str(principal.user_id),
        ):
            event = await self.get_event(event_id)
            updated, attending = event.toggle_attendance(principal.user_id)
            await self.event_repository.save(updated)
            logfire.info(
                "Attendance toggled",
                event_id=str(event_id),
                user_id=str(principal.user_id),
                attending=attending,
            )
            return attendance_outcome(attending)

    async def get_attendance(
        self, event_id: EventId, page: int, page_size: int
    ) -> tuple[list[Attendee], int]:
        event = await self.get_event(event_id)
        return slice_page(event.attendance, page, page_size)
