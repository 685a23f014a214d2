"""Unit tests for GalleryService."""

from datetime import datetime

import pytest

from letsconnect.adapter.backblaze import MockBlobStore
from letsconnect.domain.error import (
    ConcurrentModificationError,
    InvalidInputError,
    NotAuthorizedError,
)
from letsconnect.domain.repository import GalleryRepository
from letsconnect.domain.service import AuthorizationPolicy, GalleryService, MediaService
from letsconnect.domain.value import GalleryCategory, NewsType, Role
from letsconnect.persistence.repository.inmemory import (
    InMemoryDocumentStore,
    InMemoryGalleryRepository,
)
from tests.conftest import make_gallery_post, make_principal, make_upload
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class RacedGalleryRepository(InMemoryGalleryRepository):
    """Another writer bumps the stored version just before every update."""

    async def save(self, entity):
        if entity.version > 0:
            stored = self._items[entity.id]
            self._items[entity.id] = stored.model_copy(
                update={"version": stored.version + 1}
            )
        return await super().save(entity)
class TestCreateGalleryPost:
    """Tests for GalleryService.create_gallery_post."""

    @pytest.mark.asyncio
    async def test_image_post_with_file(self, unit_env):
        service = await unit_env.get(GalleryService)

        gallery_post = await service.create_gallery_post(
            make_principal(Role.POST_HANDLER),
            "  Flood Relief  ",
            GalleryCategory.IMAGE,
            NewsType.PAKISTANI,
            youtube_url="https://youtu.be/ignored",
            upload=make_upload(),
        )

        assert gallery_post.title == "flood relief"
        assert gallery_post.media is not None
        assert gallery_post.youtube_url is None

    @pytest.mark.asyncio
    async def test_video_post_needs_youtube_url(self, unit_env):
        service = await unit_env.get(GalleryService)

        with pytest.raises(InvalidInputError, match="YouTube"):
            await service.create_gallery_post(
                make_principal(Role.ADMIN),
                "talk",
                GalleryCategory.VIDEO,
                NewsType.INTERNATIONAL,
            )

    @pytest.mark.asyncio
    async def test_reel_needs_file(self, unit_env):
        service = await unit_env.get(GalleryService)

        with pytest.raises(InvalidInputError, match="Without File"):
            await service.create_gallery_post(
                make_principal(Role.ADMIN),
                "reel",
                GalleryCategory.REEL,
                NewsType.PAKISTANI,
            )

    @pytest.mark.asyncio
    async def test_users_cannot_publish(self, unit_env):
        service = await unit_env.get(GalleryService)

        with pytest.raises(NotAuthorizedError):
            await service.create_gallery_post(
                make_principal(),
                "mine",
                GalleryCategory.VIDEO,
                NewsType.PAKISTANI,
                youtube_url="https://youtu.be/x",
            )


class TestManageGalleryPost:
    """Update, delete and listing."""

    @pytest.mark.asyncio
    async def test_update_title(self, unit_env):
        service = await unit_env.get(GalleryService)
        repo = await unit_env.get(GalleryRepository)
        staff = make_principal(Role.POST_HANDLER)
        gallery_post = await repo.save(make_gallery_post())

        updated = await service.update_gallery_post(
            gallery_post.id, staff, title="New Title"
        )

        assert updated.title == "new title"

    @pytest.mark.asyncio
    async def test_delete_discards_media(self, unit_env):
        service = await unit_env.get(GalleryService)
        repo = await unit_env.get(GalleryRepository)
        blob_store = await unit_env.get(MockBlobStore)
        gallery_post = await repo.save(make_gallery_post())

        await service.delete_gallery_post(gallery_post.id, make_principal(Role.ADMIN))

        assert await repo.find_by_id(gallery_post.id) is None
        assert blob_store.deleted == ["file-1"]

    @pytest.mark.asyncio
    async def test_list_filters(self, unit_env):
        # Arrange
        service = await unit_env.get(GalleryService)
        repo = await unit_env.get(GalleryRepository)
        await repo.save(make_gallery_post())
        await repo.save(make_gallery_post(news_type=NewsType.INTERNATIONAL))
        await repo.save(
            make_gallery_post(
                category=GalleryCategory.VIDEO,
                media=None,
                youtube_url="https://youtu.be/x",
            )
        )

        # Act
        images, image_total = await service.list_gallery_posts(
            1, 20, category=GalleryCategory.IMAGE
        )
        local, local_total = await service.list_gallery_posts(
            1, 20, category=GalleryCategory.IMAGE, news_type=NewsType.PAKISTANI
        )

        # Assert
        assert image_total == 2
        assert len(images) == 2
        assert local_total == 1
        assert local[0].news_type == NewsType.PAKISTANI

    @pytest.mark.asyncio
    async def test_update_rejects_blank_title(self, unit_env):
        service = await unit_env.get(GalleryService)
        repo = await unit_env.get(GalleryRepository)
        gallery_post = await repo.save(make_gallery_post())

        with pytest.raises(InvalidInputError):
            await service.update_gallery_post(
                gallery_post.id, make_principal(Role.ADMIN), title="   "
            )

        stored = await repo.find_by_id(gallery_post.id)
        assert stored.title == "flood relief"

    @pytest.mark.asyncio
    async def test_update_rejects_long_title(self, unit_env):
        service = await unit_env.get(GalleryService)
        repo = await unit_env.get(GalleryRepository)
        gallery_post = await repo.save(make_gallery_post())

        with pytest.raises(InvalidInputError, match="at most 255"):
            await service.update_gallery_post(
                gallery_post.id, make_principal(Role.ADMIN), title="x" * 400
            )

    @pytest.mark.asyncio
    async def test_update_touches_updated_at(self, unit_env):
        service = await unit_env.get(GalleryService)
        repo = await unit_env.get(GalleryRepository)
        gallery_post = await repo.save(
            make_gallery_post(updated_at=datetime(2024, 1, 1))
        )

        updated = await service.update_gallery_post(
            gallery_post.id, make_principal(Role.ADMIN), news_type=NewsType.INTERNATIONAL
        )

        assert updated.updated_at > datetime(2024, 1, 1)

    @pytest.mark.asyncio
    async def test_rejected_save_keeps_old_file(self):
        # Arrange
        store = InMemoryDocumentStore()
        blob_store = MockBlobStore()
        service = GalleryService(
            gallery_repository=RacedGalleryRepository(store),
            media_service=MediaService(blob_store),
            authorization_policy=AuthorizationPolicy(),
        )
        staff = make_principal(Role.POST_HANDLER)
        gallery_post = await service.create_gallery_post(
            staff,
            "flood relief",
            GalleryCategory.IMAGE,
            NewsType.PAKISTANI,
            upload=make_upload("old.png"),
        )

        # Act
        with pytest.raises(ConcurrentModificationError):
            await service.update_gallery_post(
                gallery_post.id, staff, upload=make_upload("new.png")
            )

        # Assert
        stored = await InMemoryGalleryRepository(store).find_by_id(gallery_post.id)
        assert stored.media == gallery_post.media
        assert list(blob_store.files) == [gallery_post.media.file_id]
