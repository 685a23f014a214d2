"""Unit tests for the post use cases."""

from uuid import uuid4

import pytest

from letsconnect.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListFeedRequest,
    ListFeedUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    PostFeed,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from letsconnect.domain.error import InvalidInputError, NotFoundError
from letsconnect.domain.repository import PostRepository, UserRepository
from letsconnect.domain.value import MediaType, PostCategory
from tests.conftest import make_post, make_principal, make_upload, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestPostLifecycle:
    """Create, read, update, list and delete through use cases."""

    @pytest.mark.asyncio
    async def test_full_lifecycle(self, unit_env):
        # Arrange
        author = make_principal()
        create = await unit_env.get(CreatePostUseCase)
        get = await unit_env.get(GetPostUseCase)
        update = await unit_env.get(UpdatePostUseCase)
        list_posts = await unit_env.get(ListPostsUseCase)
        delete = await unit_env.get(DeletePostUseCase)

        # Act
        created = await create.execute(
            CreatePostRequest(
                principal=author,
                media_type=MediaType.IMAGE,
                content="sunset",
                upload=make_upload(),
            )
        )
        updated = await update.execute(
            UpdatePostRequest(post_id=created.id, principal=author, content="sunrise")
        )
        fetched = await get.execute(GetPostRequest(post_id=created.id))
        mine = await list_posts.execute(ListPostsRequest(owner_id=str(author.user_id)))
        deleted = await delete.execute(
            DeletePostRequest(post_id=created.id, principal=author)
        )

        # Assert
        assert created.message == "Post Created Successfully"
        assert updated.message == "Post Updated Successfully"
        assert fetched.post.content == "sunrise"
        assert fetched.post.media is not None
        assert mine.total == 1
        assert mine.data[0].id == fetched.post.id
        assert deleted.message == "Post Deleted Successfully"
        with pytest.raises(NotFoundError):
            await get.execute(GetPostRequest(post_id=created.id))

    @pytest.mark.asyncio
    async def test_list_by_category(self, unit_env):
        create = await unit_env.get(CreatePostUseCase)
        list_posts = await unit_env.get(ListPostsUseCase)
        for _ in range(3):
            await create.execute(
                CreatePostRequest(
                    principal=make_principal(), media_type=MediaType.TEXT, content="hi"
                )
            )

        response = await list_posts.execute(
            ListPostsRequest(category=PostCategory.USERS_POST, page_size=2)
        )

        assert response.total == 3
        assert response.total_pages == 2
        assert len(response.data) == 2

    @pytest.mark.asyncio
    async def test_get_with_malformed_id(self, unit_env):
        get = await unit_env.get(GetPostUseCase)

        with pytest.raises(InvalidInputError):
            await get.execute(GetPostRequest(post_id="123"))

    @pytest.mark.asyncio
    async def test_get_missing_post(self, unit_env):
        get = await unit_env.get(GetPostUseCase)

        with pytest.raises(NotFoundError):
            await get.execute(GetPostRequest(post_id=str(uuid4())))


class TestListFeedUseCase:
    @pytest.mark.asyncio
    async def test_popular_feed_pages(self, unit_env):
        post_repo = await unit_env.get(PostRepository)
        for shares in (3, 9, 1):
            await post_repo.save(make_post(content=f"s{shares}", shares=shares))
        use_case = await unit_env.get(ListFeedUseCase)

        response = await use_case.execute(
            ListFeedRequest(
                feed=PostFeed.POPULAR, principal=make_principal(), page_size=2
            )
        )

        assert [p.content for p in response.data] == ["s9", "s3"]
        assert response.total == 3
        assert response.total_pages == 2

    @pytest.mark.asyncio
    async def test_following_feed_of_new_user_is_empty(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        reader = await user_repo.save(make_user())
        await post_repo.save(make_post())
        use_case = await unit_env.get(ListFeedUseCase)

        response = await use_case.execute(
            ListFeedRequest(
                feed=PostFeed.FOLLOWING, principal=make_principal(user_id=reader.id)
            )
        )

        assert response.data == []
        assert response.total_pages == 0
