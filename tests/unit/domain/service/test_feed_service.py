"""Unit tests for FeedService."""

from datetime import datetime, timedelta

import pytest

from letsconnect.domain.error import NotFoundError
from letsconnect.domain.repository import PostRepository, UserRepository
from letsconnect.domain.service import FeedService, UserService
from letsconnect.domain.value import PostCategory
from tests.conftest import make_post, make_principal, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

NOW = datetime(2024, 6, 10, 12, 0)


class TestPopularFeed:
    """Recent posts first, then likes plus comments plus shares."""

    @pytest.mark.asyncio
    async def test_recent_posts_outrank_popular_old_ones(self, unit_env):
        # Arrange
        service = await unit_env.get(FeedService)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(
            make_post(content="old hit", shares=50, created_at=NOW - timedelta(days=10))
        )
        await post_repo.save(
            make_post(content="fresh", shares=1, created_at=NOW - timedelta(days=1))
        )
        await post_repo.save(
            make_post(content="fresh hit", shares=7, created_at=NOW - timedelta(days=2))
        )

        # Act
        posts, total = await service.list_popular(1, 20, now=NOW)

        # Assert
        assert [p.content for p in posts] == ["fresh hit", "fresh", "old hit"]
        assert total == 3

    @pytest.mark.asyncio
    async def test_likes_and_comments_count(self, unit_env):
        service = await unit_env.get(FeedService)
        post_repo = await unit_env.get(PostRepository)
        created_at = NOW - timedelta(hours=3)
        quiet = make_post(content="quiet", shares=1, created_at=created_at)
        liked = make_post(content="liked", created_at=created_at)
        liked, _ = liked.toggle_like(make_principal().user_id)
        liked, _ = liked.add_comment(make_principal().user_id, "nice")
        await post_repo.save(quiet)
        await post_repo.save(liked)

        posts, _ = await service.list_popular(1, 20, now=NOW)

        assert [p.content for p in posts] == ["liked", "quiet"]

    @pytest.mark.asyncio
    async def test_only_user_posts(self, unit_env):
        service = await unit_env.get(FeedService)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post(created_at=NOW))
        await post_repo.save(
            make_post(category=PostCategory.SCIENCE, shares=99, created_at=NOW)
        )

        posts, total = await service.list_popular(1, 20, now=NOW)

        assert total == 1
        assert posts[0].category == PostCategory.USERS_POST


class TestFollowingFeed:
    @pytest.mark.asyncio
    async def test_posts_of_followed_users_newest_first(self, unit_env):
        # Arrange
        service = await unit_env.get(FeedService)
        users = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        reader = await user_repo.save(make_user())
        writer = await user_repo.save(make_user())
        stranger = await user_repo.save(make_user())
        principal = make_principal(user_id=reader.id)
        await users.toggle_follow(writer.id, principal)
        await post_repo.save(
            make_post(owner_id=writer.id, content="first", created_at=NOW)
        )
        await post_repo.save(
            make_post(
                owner_id=writer.id,
                content="second",
                created_at=NOW + timedelta(minutes=5),
            )
        )
        await post_repo.save(make_post(owner_id=stranger.id, content="noise"))

        # Act
        posts, total = await service.list_following(principal, 1, 20)

        # Assert
        assert [p.content for p in posts] == ["second", "first"]
        assert total == 2

    @pytest.mark.asyncio
    async def test_following_nobody(self, unit_env):
        service = await unit_env.get(FeedService)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        reader = await user_repo.save(make_user())
        await post_repo.save(make_post())

        posts, total = await service.list_following(
            make_principal(user_id=reader.id), 1, 20
        )

        assert posts == []
        assert total == 0

    @pytest.mark.asyncio
    async def test_unknown_caller(self, unit_env):
        service = await unit_env.get(FeedService)

        with pytest.raises(NotFoundError):
            await service.list_following(make_principal(), 1, 20)
