"""Unit tests for the event use cases."""

from datetime import datetime, timedelta

import pytest

from letsconnect.application.usecase.event import (
    CreateEventRequest,
    CreateEventUseCase,
    EventTimeline,
    GetAttendanceRequest,
    GetAttendanceUseCase,
    GetEventRequest,
    GetEventUseCase,
    ListEventsRequest,
    ListEventsUseCase,
    ToggleAttendanceRequest,
    ToggleAttendanceUseCase,
)
from letsconnect.domain.repository import EventRepository
from letsconnect.domain.value import Location, Role
from tests.conftest import make_event, make_principal, make_upload
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateAndGetEvent:
    @pytest.mark.asyncio
    async def test_create_then_get(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateEventUseCase)
        get = await unit_env.get(GetEventUseCase)
        start = datetime.now() + timedelta(days=7)

        # Act
        created = await create.execute(
            CreateEventRequest(
                principal=make_principal(Role.ADMIN),
                title="Science Fair",
                location=Location(latitude=24.8, longitude=67.0),
                start_time=start,
                end_time=start + timedelta(hours=4),
                poster=make_upload("poster.jpg"),
                live_url="https://live.example/fair",
            )
        )
        fetched = await get.execute(GetEventRequest(event_id=created.id))

        # Assert
        assert created.message == "Event Created Successfully"
        assert fetched.event.title == "science fair"
        assert fetched.event.live_url == "https://live.example/fair"
        assert fetched.event.poster.file_name.startswith("poster.jpg-")


class TestAttendanceUseCases:
    @pytest.mark.asyncio
    async def test_toggle_and_list_attendance(self, unit_env):
        # Arrange
        repo = await unit_env.get(EventRepository)
        event = await repo.save(make_event())
        toggle = await unit_env.get(ToggleAttendanceUseCase)
        get_attendance = await unit_env.get(GetAttendanceUseCase)
        attendee = make_principal()

        # Act
        joined = await toggle.execute(
            ToggleAttendanceRequest(event_id=str(event.id), principal=attendee)
        )
        listed = await get_attendance.execute(
            GetAttendanceRequest(event_id=str(event.id))
        )

        # Assert
        assert joined.state is True
        assert listed.total_attendance == 1
        assert listed.attendance[0].user_id == attendee.user_id


class TestListEvents:
    @pytest.mark.asyncio
    async def test_timelines(self, unit_env):
        # Arrange
        repo = await unit_env.get(EventRepository)
        now = datetime(2024, 3, 10, 9, 0)
        past = await repo.save(
            make_event(start_time=now - timedelta(days=1), end_time=now - timedelta(hours=20))
        )
        future = await repo.save(make_event(start_time=now + timedelta(days=1)))
        use_case = await unit_env.get(ListEventsUseCase)

        # Act
        recent = await use_case.execute(
            ListEventsRequest(timeline=EventTimeline.RECENT, now=now)
        )
        upcoming = await use_case.execute(
            ListEventsRequest(timeline=EventTimeline.UPCOMING, now=now)
        )

        # Assert
        assert [e.id for e in recent.data] == [past.id]
        assert [e.id for e in upcoming.data] == [future.id]
        assert recent.total_pages == 1
