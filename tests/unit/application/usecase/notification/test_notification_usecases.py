"""Unit tests for the notification use cases."""

from uuid import uuid4

import pytest

from letsconnect.application.usecase.notification import (
    CreateNotificationRequest,
    CreateNotificationUseCase,
    DeleteNotificationUseCase,
    ListNotificationsRequest,
    ListNotificationsUseCase,
    MarkNotificationReadUseCase,
    NotificationRequest,
)
from letsconnect.domain.error import InvalidInputError
from letsconnect.domain.repository import UserRepository
from letsconnect.domain.value import NotificationType
from tests.conftest import make_principal, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestNotificationUseCases:
    @pytest.mark.asyncio
    async def test_create_read_delete(self, unit_env):
        # Arrange
        users = await unit_env.get(UserRepository)
        recipient = await users.save(make_user())
        me = make_principal(user_id=recipient.id)
        create = await unit_env.get(CreateNotificationUseCase)
        list_mine = await unit_env.get(ListNotificationsUseCase)
        mark_read = await unit_env.get(MarkNotificationReadUseCase)
        delete = await unit_env.get(DeleteNotificationUseCase)

        # Act
        created = await create.execute(
            CreateNotificationRequest(
                principal=make_principal(),
                to_user=str(recipient.id),
                type=NotificationType.LIKE,
                message="liked your post",
                post_id=str(uuid4()),
            )
        )
        read = await mark_read.execute(
            NotificationRequest(notification_id=created.id, principal=me)
        )
        listed = await list_mine.execute(ListNotificationsRequest(principal=me))
        deleted = await delete.execute(
            NotificationRequest(notification_id=created.id, principal=me)
        )
        after = await list_mine.execute(ListNotificationsRequest(principal=me))

        # Assert
        assert created.message == "Notification Created Successfully"
        assert read.message == "Notification Successfully Mark as Read"
        assert listed.data[0].is_read is True
        assert deleted.message == "Notification Deleted Successfully"
        assert after.total == 0

    @pytest.mark.asyncio
    async def test_malformed_post_id(self, unit_env):
        create = await unit_env.get(CreateNotificationUseCase)

        with pytest.raises(InvalidInputError, match="Invalid Post ID"):
            await create.execute(
                CreateNotificationRequest(
                    principal=make_principal(),
                    to_user=str(uuid4()),
                    type=NotificationType.LIKE,
                    message="liked",
                    post_id="nope",
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_notification_id(self, unit_env):
        mark_read = await unit_env.get(MarkNotificationReadUseCase)

        with pytest.raises(InvalidInputError):
            await mark_read.execute(
                NotificationRequest(notification_id="nope", principal=make_principal())
            )
