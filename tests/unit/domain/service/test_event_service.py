"""Unit tests for EventService."""

from datetime import datetime, timedelta, timezone

import pytest

from letsconnect.adapter.backblaze import MockBlobStore
from letsconnect.domain.error import (
    ConcurrentModificationError,
    InvalidInputError,
    NotAuthorizedError,
)
from letsconnect.domain.repository import EventRepository
from letsconnect.domain.service import AuthorizationPolicy, EventService, MediaService
from letsconnect.domain.value import Location, Role
from letsconnect.persistence.repository.inmemory import (
    InMemoryDocumentStore,
    InMemoryEventRepository,
)
from tests.conftest import make_event, make_principal, make_upload
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

LOCATION = Location(latitude=31.5, longitude=74.3)


class RacedEventRepository(InMemoryEventRepository):
    """Another writer bumps the stored version just before every update."""

    async def save(self, entity):
        if entity.version > 0:
            stored = self._items[entity.id]
            self._items[entity.id] = stored.model_copy(
                update={"version": stored.version + 1}
            )
        return await super().save(entity)


class TestCreateEvent:
    """Tests for EventService.create_event."""

    @pytest.mark.asyncio
    async def test_staff_creates_event_with_poster(self, unit_env):
        # Arrange
        service = await unit_env.get(EventService)
        blob_store = await unit_env.get(MockBlobStore)
        start = datetime.now() + timedelta(days=2)

        # Act
        event = await service.create_event(
            make_principal(Role.ADMIN),
            "Annual Gathering",
            LOCATION,
            start,
            start + timedelta(hours=3),
            make_upload("poster.png"),
        )

        # Assert
        assert event.title == "annual gathering"
        assert event.poster.file_id in blob_store.files
        assert event.attendance == []

    @pytest.mark.asyncio
    async def test_end_before_start(self, unit_env):
        service = await unit_env.get(EventService)
        start = datetime.now() + timedelta(days=2)

        with pytest.raises(InvalidInputError):
            await service.create_event(
                make_principal(Role.ADMIN),
                "backwards",
                LOCATION,
                start,
                start - timedelta(hours=1),
                make_upload(),
            )

    @pytest.mark.asyncio
    async def test_users_cannot_create(self, unit_env):
        service = await unit_env.get(EventService)
        start = datetime.now() + timedelta(days=2)

        with pytest.raises(NotAuthorizedError):
            await service.create_event(
                make_principal(),
                "party",
                LOCATION,
                start,
                start + timedelta(hours=1),
                make_upload(),
            )


class TestAttendance:
    """Attendance toggle and listing."""

    @pytest.mark.asyncio
    async def test_join_then_leave(self, unit_env):
        # Arrange
        service = await unit_env.get(EventService)
        repo = await unit_env.get(EventRepository)
        event = await repo.save(make_event())
        attendee = make_principal()

        # Act
        joined = await service.toggle_attendance(event.id, attendee)
        left = await service.toggle_attendance(event.id, attendee)

        # Assert
        stored = await repo.find_by_id(event.id)
        assert joined.state is True
        assert joined.message == "Congratulations You Are Successfully Added In This Event"
        assert left.state is False
        assert left.message == "You Are Successfully Removed From This Event"
        assert stored.attendance == []

    @pytest.mark.asyncio
    async def test_join_ended_event(self, unit_env):
        service = await unit_env.get(EventService)
        repo = await unit_env.get(EventRepository)
        start = datetime.now() - timedelta(days=1)
        event = await repo.save(
            make_event(start_time=start, end_time=start + timedelta(hours=2))
        )

        with pytest.raises(InvalidInputError, match="This Event Time is End Now"):
            await service.toggle_attendance(event.id, make_principal())

    @pytest.mark.asyncio
    async def test_get_attendance_pages(self, unit_env):
        service = await unit_env.get(EventService)
        repo = await unit_env.get(EventRepository)
        event = await repo.save(make_event())
        for _ in range(3):
            await service.toggle_attendance(event.id, make_principal())

        attendees, total = await service.get_attendance(event.id, page=2, page_size=2)

        assert total == 3
        assert len(attendees) == 1


class TestListings:
    """Recent and upcoming timelines."""

    @pytest.mark.asyncio
    async def test_recent_and_upcoming_split_on_end_time(self, unit_env):
        # Arrange
        service = await unit_env.get(EventService)
        repo = await unit_env.get(EventRepository)
        now = datetime(2024, 6, 1, 12, 0)
        finished_early = await repo.save(
            make_event(start_time=now - timedelta(days=3), end_time=now - timedelta(days=2))
        )
        finished_late = await repo.save(
            make_event(start_time=now - timedelta(hours=5), end_time=now - timedelta(hours=1))
        )
        ongoing = await repo.save(
            make_event(start_time=now - timedelta(hours=1), end_time=now + timedelta(hours=1))
        )
        future = await repo.save(
            make_event(start_time=now + timedelta(days=1), end_time=now + timedelta(days=1, hours=2))
        )

        # Act
        recent, recent_total = await service.list_recent(1, 20, now=now)
        upcoming, upcoming_total = await service.list_upcoming(1, 20, now=now)

        # Assert
        assert [e.id for e in recent] == [finished_late.id, finished_early.id]
        assert [e.id for e in upcoming] == [ongoing.id, future.id]
        assert recent_total == 2
        assert upcoming_total == 2

    @pytest.mark.asyncio
    async def test_aware_now_against_naive_events(self, unit_env):
        service = await unit_env.get(EventService)
        repo = await unit_env.get(EventRepository)
        await repo.save(make_event())

        upcoming, total = await service.list_upcoming(
            1, 20, now=datetime.now(timezone.utc)
        )

        assert total == 1
        assert len(upcoming) == 1


class TestManageEvent:
    """Update and delete."""

    @pytest.mark.asyncio
    async def test_update_poster_discards_old(self, unit_env):
        # Arrange
        service = await unit_env.get(EventService)
        blob_store = await unit_env.get(MockBlobStore)
        admin = make_principal(Role.ADMIN)
        start = datetime.now() + timedelta(days=2)
        event = await service.create_event(
            admin, "meetup", LOCATION, start, start + timedelta(hours=1), make_upload()
        )

        # Act
        updated = await service.update_event(
            event.id, admin, poster=make_upload("new.png")
        )

        # Assert
        assert updated.poster.file_id != event.poster.file_id
        assert blob_store.deleted == [event.poster.file_id]

    @pytest.mark.asyncio
    async def test_update_rejects_end_before_start(self, unit_env):
        service = await unit_env.get(EventService)
        repo = await unit_env.get(EventRepository)
        event = await repo.save(make_event())

        with pytest.raises(InvalidInputError):
            await service.update_event(
                event.id,
                make_principal(Role.ADMIN),
                end_time=event.start_time - timedelta(minutes=1),
            )

    @pytest.mark.asyncio
    async def test_delete_by_staff(self, unit_env):
        service = await unit_env.get(EventService)
        repo = await unit_env.get(EventRepository)
        event = await repo.save(make_event())

        await service.delete_event(event.id, make_principal(Role.POST_HANDLER))

        assert await repo.find_by_id(event.id) is None

    @pytest.mark.asyncio
    async def test_update_touches_updated_at(self, unit_env):
        service = await unit_env.get(EventService)
        repo = await unit_env.get(EventRepository)
        event = await repo.save(make_event(updated_at=datetime(2024, 1, 1)))

        updated = await service.update_event(
            event.id, make_principal(Role.ADMIN), live_url="https://live.example/1"
        )

        assert updated.live_url == "https://live.example/1"
        assert updated.updated_at > datetime(2024, 1, 1)

    @pytest.mark.asyncio
    async def test_rejected_save_keeps_old_poster(self):
        # Arrange
        store = InMemoryDocumentStore()
        blob_store = MockBlobStore()
        service = EventService(
            event_repository=RacedEventRepository(store),
            media_service=MediaService(blob_store),
            authorization_policy=AuthorizationPolicy(),
        )
        admin = make_principal(Role.ADMIN)
        start = datetime.now() + timedelta(days=2)
        event = await service.create_event(
            admin, "meetup", LOCATION, start, start + timedelta(hours=1), make_upload()
        )

        # Act
        with pytest.raises(ConcurrentModificationError):
            await service.update_event(event.id, admin, poster=make_upload("new.png"))

        # Assert
        stored = await InMemoryEventRepository(store).find_by_id(event.id)
        assert stored.poster == event.poster
        assert list(blob_store.files) == [event.poster.file_id]
        assert event.poster.file_id not in blob_store.deleted
