"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from letsconnect.domain.error import (
    InvalidInputError,
    NotAuthorizedError,
    NotFoundError,
)
from letsconnect.domain.repository import UserRepository
from letsconnect.domain.service import UserService
from letsconnect.domain.value import FollowDirection, Role, UserFlag, UserId
from tests.conftest import make_principal, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetUser:
    @pytest.mark.asyncio
    async def test_get_existing_user(self, unit_env):
        service = await unit_env.get(UserService)
        repo = await unit_env.get(UserRepository)
        user = await repo.save(make_user(name="Ayesha"))

        result = await service.get_user(user.id)

        assert result.name == "Ayesha"

    @pytest.mark.asyncio
    async def test_get_missing_user(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await service.get_user(UserId(uuid4()))


class TestToggleFlag:
    """Display flags belong to the user, bans belong to admins."""

    @pytest.mark.asyncio
    async def test_user_hides_own_points(self, unit_env):
        # Arrange
        service = await unit_env.get(UserService)
        repo = await unit_env.get(UserRepository)
        user = await repo.save(make_user())
        principal = make_principal(user_id=user.id)

        # Act
        outcome = await service.toggle_flag(user.id, principal, UserFlag.SHOW_POINTS)

        # Assert
        stored = await repo.find_by_id(user.id)
        assert outcome.state is False
        assert outcome.message == "Points Are Hidden Now"
        assert stored.show_points is False

    @pytest.mark.asyncio
    async def test_user_cannot_toggle_someone_else(self, unit_env):
        service = await unit_env.get(UserService)
        repo = await unit_env.get(UserRepository)
        user = await repo.save(make_user())

        with pytest.raises(NotAuthorizedError):
            await service.toggle_flag(user.id, make_principal(), UserFlag.SHOW_BADGES)

    @pytest.mark.asyncio
    async def test_admin_bans_and_unbans(self, unit_env):
        service = await unit_env.get(UserService)
        repo = await unit_env.get(UserRepository)
        user = await repo.save(make_user())
        admin = make_principal(Role.ADMIN)

        banned = await service.toggle_flag(user.id, admin, UserFlag.IS_BANNED)
        unbanned = await service.toggle_flag(user.id, admin, UserFlag.IS_BANNED)

        assert banned.message == "User Is Banned Now"
        assert unbanned.state is False

    @pytest.mark.asyncio
    async def test_admin_cannot_ban_self(self, unit_env):
        service = await unit_env.get(UserService)
        repo = await unit_env.get(UserRepository)
        admin_user = await repo.save(make_user(Role.ADMIN))
        admin = make_principal(Role.ADMIN, user_id=admin_user.id)

        with pytest.raises(NotAuthorizedError):
            await service.toggle_flag(admin_user.id, admin, UserFlag.IS_BANNED)

    @pytest.mark.asyncio
    async def test_user_cannot_ban(self, unit_env):
        service = await unit_env.get(UserService)
        repo = await unit_env.get(UserRepository)
        user = await repo.save(make_user())

        with pytest.raises(NotAuthorizedError):
            await service.toggle_flag(user.id, make_principal(), UserFlag.IS_BANNED)


class TestToggleFollow:
    """Following updates the caller and the target together."""

    @pytest.mark.asyncio
    async def test_follow_then_unfollow(self, unit_env):
        # Arrange
        service = await unit_env.get(UserService)
        repo = await unit_env.get(UserRepository)
        ali = await repo.save(make_user(name="Ali"))
        sara = await repo.save(make_user(name="Sara"))
        principal = make_principal(user_id=ali.id)

        # Act
        followed = await service.toggle_follow(sara.id, principal)
        stored_ali = await repo.find_by_id(ali.id)
        stored_sara = await repo.find_by_id(sara.id)
        unfollowed = await service.toggle_follow(sara.id, principal)

        # Assert
        assert followed.state is True
        assert followed.message == "Followed Successfully"
        assert stored_ali.following == [sara.id]
        assert stored_sara.followers == [ali.id]
        assert stored_sara.followers_count == 1
        assert unfollowed.message == "Unfollowed Successfully"
        assert (await repo.find_by_id(sara.id)).followers_count == 0
        assert (await repo.find_by_id(ali.id)).following_count == 0

    @pytest.mark.asyncio
    async def test_cannot_follow_self(self, unit_env):
        service = await unit_env.get(UserService)
        repo = await unit_env.get(UserRepository)
        user = await repo.save(make_user())

        with pytest.raises(InvalidInputError, match="You Can Not Follow Yourself"):
            await service.toggle_follow(user.id, make_principal(user_id=user.id))

    @pytest.mark.asyncio
    async def test_follow_missing_user(self, unit_env):
        service = await unit_env.get(UserService)
        repo = await unit_env.get(UserRepository)
        user = await repo.save(make_user())

        with pytest.raises(NotFoundError):
            await service.toggle_follow(
                UserId(uuid4()), make_principal(user_id=user.id)
            )


class TestListFollows:
    @pytest.mark.asyncio
    async def test_followers_and_following_pages(self, unit_env):
        # Arrange
        service = await unit_env.get(UserService)
        repo = await unit_env.get(UserRepository)
        star = await repo.save(make_user(name="Star"))
        fans = [await repo.save(make_user(name=f"Fan {i}")) for i in range(3)]
        for fan in fans:
            await service.toggle_follow(star.id, make_principal(user_id=fan.id))

        # Act
        followers, total = await service.list_follows(
            star.id, FollowDirection.FOLLOWERS, page=2, page_size=2
        )
        following, following_total = await service.list_follows(
            fans[0].id, FollowDirection.FOLLOWING, page=1, page_size=20
        )

        # Assert
        assert total == 3
        assert [u.name for u in followers] == ["Fan 2"]
        assert following_total == 1
        assert following[0].id == star.id

    @pytest.mark.asyncio
    async def test_missing_user(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await service.list_follows(
                UserId(uuid4()), FollowDirection.FOLLOWERS, page=1, page_size=20
            )
