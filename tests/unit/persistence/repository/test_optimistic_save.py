"""Version checks of the in-memory repositories.

The in-memory repositories mirror the PostgreSQL compare-and-set save so
services behave the same under test.
"""

import pytest

from letsconnect.domain.error import ConcurrentModificationError, NotFoundError
from letsconnect.persistence.repository.inmemory import (
    InMemoryDocumentStore,
    InMemoryEventRepository,
    InMemoryPostRepository,
)
from tests.conftest import make_event, make_post, make_principal


class TestSaveVersioning:
    @pytest.mark.asyncio
    async def test_insert_and_update_bump_version(self):
        repo = InMemoryPostRepository()

        inserted = await repo.save(make_post())
        updated = await repo.save(inserted.model_copy(update={"content": "edited"}))

        assert inserted.version == 1
        assert updated.version == 2

    @pytest.mark.asyncio
    async def test_stale_save_is_rejected(self):
        """Two writers loading the same version: the second one loses."""
        # Arrange
        repo = InMemoryPostRepository()
        post = await repo.save(make_post())
        first, _ = post.toggle_like(make_principal().user_id)
        second, _ = post.toggle_like(make_principal().user_id)

        # Act
        await repo.save(first)

        # Assert
        with pytest.raises(ConcurrentModificationError):
            await repo.save(second)
        stored = await repo.find_by_id(post.id)
        assert stored.likes_count == 1

    @pytest.mark.asyncio
    async def test_duplicate_insert_is_rejected(self):
        repo = InMemoryPostRepository()
        post = make_post()
        await repo.save(post)

        with pytest.raises(ConcurrentModificationError):
            await repo.save(post)

    @pytest.mark.asyncio
    async def test_update_of_missing_entity(self):
        repo = InMemoryPostRepository()
        post = make_post(version=3)

        with pytest.raises(NotFoundError):
            await repo.save(post)


class TestAtomicOperations:
    @pytest.mark.asyncio
    async def test_increment_shares_skips_version_check(self):
        repo = InMemoryPostRepository()
        post = await repo.save(make_post())

        await repo.increment_shares(post.id)
        updated = await repo.increment_shares(post.id)

        assert updated.shares == 2
        assert updated.version == 3

    @pytest.mark.asyncio
    async def test_increment_shares_requires_sharing_on(self):
        repo = InMemoryPostRepository()
        post = await repo.save(make_post(allow_shares=False))

        result = await repo.increment_shares(post.id)

        stored = await repo.find_by_id(post.id)
        assert result is None
        assert stored.shares == 0
        assert stored.version == post.version

    @pytest.mark.asyncio
    async def test_push_reply_recounts(self):
        # Arrange
        repo = InMemoryEventRepository()
        event = make_event()
        event, comment = event.add_comment(make_principal().user_id, "question")
        event = await repo.save(event)
        _, reply = event.add_reply(comment.id, make_principal().user_id, "answer")

        # Act
        updated = await repo.push_reply(event.id, comment.id, reply)

        # Assert
        assert updated.comments_count == 2
        assert updated.comments[0].replies == [reply]

    @pytest.mark.asyncio
    async def test_repositories_share_one_store(self):
        store = InMemoryDocumentStore()
        post = await InMemoryPostRepository(store).save(make_post())

        assert await InMemoryPostRepository(store).find_by_id(post.id) is not None
        assert await InMemoryEventRepository(store).find_by_id(post.id) is None
