"""Unit tests for the user use cases."""

from uuid import uuid4

import pytest

from letsconnect.application.usecase.user import (
    GetUserRequest,
    GetUserUseCase,
    ListFollowsRequest,
    ListFollowsUseCase,
    ToggleFollowRequest,
    ToggleFollowUseCase,
    ToggleUserFlagRequest,
    ToggleUserFlagUseCase,
)
from letsconnect.domain.error import InvalidInputError, NotFoundError
from letsconnect.domain.repository import UserRepository
from letsconnect.domain.value import FollowDirection, UserFlag
from tests.conftest import make_principal, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetUserUseCase:
    @pytest.mark.asyncio
    async def test_get_user(self, unit_env):
        repo = await unit_env.get(UserRepository)
        user = await repo.save(make_user(username="ayesha"))
        use_case = await unit_env.get(GetUserUseCase)

        response = await use_case.execute(GetUserRequest(user_id=str(user.id)))

        assert response.user.username == "ayesha"

    @pytest.mark.asyncio
    async def test_get_missing_user(self, unit_env):
        use_case = await unit_env.get(GetUserUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetUserRequest(user_id=str(uuid4())))


class TestToggleUserFlagUseCase:
    @pytest.mark.asyncio
    async def test_hide_badges(self, unit_env):
        repo = await unit_env.get(UserRepository)
        user = await repo.save(make_user())
        use_case = await unit_env.get(ToggleUserFlagUseCase)

        response = await use_case.execute(
            ToggleUserFlagRequest(
                user_id=str(user.id),
                principal=make_principal(user_id=user.id),
                flag=UserFlag.SHOW_BADGES,
            )
        )

        assert response.state is False
        assert response.message == "Badges Are Hidden Now"

    @pytest.mark.asyncio
    async def test_malformed_user_id(self, unit_env):
        use_case = await unit_env.get(ToggleUserFlagUseCase)

        with pytest.raises(InvalidInputError):
            await use_case.execute(
                ToggleUserFlagRequest(
                    user_id="nope", principal=make_principal(), flag=UserFlag.SHOW_POINTS
                )
            )


class TestFollowUseCases:
    @pytest.mark.asyncio
    async def test_follow_and_list(self, unit_env):
        # Arrange
        repo = await unit_env.get(UserRepository)
        fan = await repo.save(make_user(name="Fan", username="fan"))
        star = await repo.save(make_user(name="Star"))
        toggle = await unit_env.get(ToggleFollowUseCase)
        list_follows = await unit_env.get(ListFollowsUseCase)

        # Act
        response = await toggle.execute(
            ToggleFollowRequest(
                user_id=str(star.id), principal=make_principal(user_id=fan.id)
            )
        )
        followers = await list_follows.execute(
            ListFollowsRequest(
                user_id=str(star.id), direction=FollowDirection.FOLLOWERS
            )
        )

        # Assert
        assert response.state is True
        assert response.message == "Followed Successfully"
        assert followers.total == 1
        assert followers.total_pages == 1
        assert followers.data[0].username == "fan"
        assert followers.data[0].id == str(fan.id)

    @pytest.mark.asyncio
    async def test_malformed_target(self, unit_env):
        toggle = await unit_env.get(ToggleFollowUseCase)

        with pytest.raises(InvalidInputError):
            await toggle.execute(
                ToggleFollowRequest(user_id="nope", principal=make_principal())
            )
