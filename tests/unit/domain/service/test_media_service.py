"""Unit tests for MediaService."""

import pytest

from letsconnect.adapter.backblaze import MockBlobStore
from letsconnect.domain.error import InternalError, InvalidInputError
from letsconnect.domain.service import BlobStoreError, MediaService
from letsconnect.domain.value import MediaFile
from tests.conftest import make_upload


class FailingBlobStore(MockBlobStore):
    async def upload(self, data, original_name, content_type):
        raise BlobStoreError("bucket unavailable")


class TestUpload:
    @pytest.mark.asyncio
    async def test_upload_stores_bytes(self):
        blob_store = MockBlobStore()
        service = MediaService(blob_store)

        media = await service.upload(make_upload("doc.pdf", b"%PDF"))

        assert blob_store.files[media.file_id][1] == b"%PDF"
        assert media.url.endswith(media.file_name)

    @pytest.mark.asyncio
    async def test_empty_upload_is_rejected(self):
        service = MediaService(MockBlobStore())

        with pytest.raises(InvalidInputError):
            await service.upload(make_upload(data=b""))

    @pytest.mark.asyncio
    async def test_store_failure_becomes_internal_error(self):
        service = MediaService(FailingBlobStore())

        with pytest.raises(InternalError):
            await service.upload(make_upload())


class TestDiscard:
    @pytest.mark.asyncio
    async def test_default_file_is_never_deleted(self):
        blob_store = MockBlobStore()
        service = MediaService(blob_store)

        assert await service.discard(MediaFile()) is True
        assert await service.discard(None) is True
        assert blob_store.deleted == []

    @pytest.mark.asyncio
    async def test_delete_failure_is_swallowed(self):
        blob_store = MockBlobStore()
        blob_store.fail_deletes = True
        service = MediaService(blob_store)

        result = await service.discard(MediaFile(file_id="f1", file_name="a.png"))

        assert result is False


class TestReplacing:
    """The old file goes only after the write inside the block succeeds."""

    @pytest.mark.asyncio
    async def test_success_discards_old_file(self):
        blob_store = MockBlobStore()
        service = MediaService(blob_store)
        old = await service.upload(make_upload("old.png"))

        async with service.replacing(old, make_upload("new.png")) as new:
            assert new.file_id in blob_store.files

        assert blob_store.deleted == [old.file_id]
        assert list(blob_store.files) == [new.file_id]

    @pytest.mark.asyncio
    async def test_failure_discards_new_file(self):
        # Arrange
        blob_store = MockBlobStore()
        service = MediaService(blob_store)
        old = await service.upload(make_upload("old.png"))

        # Act
        with pytest.raises(RuntimeError):
            async with service.replacing(old, make_upload("new.png")):
                raise RuntimeError("save failed")

        # Assert
        assert list(blob_store.files) == [old.file_id]
        assert old.file_id not in blob_store.deleted

    @pytest.mark.asyncio
    async def test_nothing_uploaded(self):
        blob_store = MockBlobStore()
        service = MediaService(blob_store)

        async with service.replacing(MediaFile(file_id="f1", file_name="a.png"), None) as new:
            assert new is None

        assert blob_store.deleted == []
