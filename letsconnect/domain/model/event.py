"""Event aggregate."""

from datetime import datetime
from typing import ClassVar, Optional, Self

from pydantic import Field, field_validator

from letsconnect.domain.error import InvalidInputError
from letsconnect.domain.model.common import DomainModel, as_aware
from letsconnect.domain.model.engagement import Engageable
from letsconnect.domain.value import (
    ContentKind,
    EventId,
    Location,
    MediaFile,
    UserId,
)

EVENT_TITLE_MAX_LENGTH = 100


class Attendee(DomainModel):
    """A user who joined an event."""

    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)


class Event(Engageable):
    """Scheduled event with a poster, a location and an attendance list."""

    __kind__: ClassVar[ContentKind] = ContentKind.EVENT
    __comment_max_length__: ClassVar[int] = 255

    id: EventId
    title: str = Field(min_length=1, max_length=EVENT_TITLE_MAX_LENGTH)
    location: Location
    poster: MediaFile = Field(default_factory=MediaFile)
    start_time: datetime
    end_time: Optional[datetime] = None
    live_url: Optional[str] = None
    attendance: list[Attendee] = Field(default_factory=list)
    attendance_count: int = Field(default=0, ge=0)

    @field_validator("title")
    @classmethod
    def _lowercase_title(cls, value: str) -> str:
        return value.strip().lower()

    def recounted(self) -> Self:
        counted = super().recounted()
        return counted.model_copy(update={"attendance_count": len(counted.attendance)})

    def has_ended(self, now: datetime | None = None) -> bool:
        """True once end_time has passed. Events without an end never end."""
        if self.end_time is None:
            return False
        return as_aware(self.end_time) <= as_aware(now or datetime.now())

    def is_attending(self, user_id: UserId) -> bool:
        return any(a.user_id == user_id for a in self.attendance)

    def toggle_attendance(self, user_id: UserId) -> tuple[Self, bool]:
        """Join or leave the event. Joining a finished event is rejected."""
        if self.is_attending(user_id):
            attendance = [a for a in self.attendance if a.user_id != user_id]
            return self._mutated(attendance=attendance), False

        if self.has_ended():
            raise InvalidInputError("This Event Time is End Now")
        attendance = [*self.attendance, Attendee(user_id=user_id)]
        return self._mutated(attendance=attendance), True
