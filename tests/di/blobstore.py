"""Mock blob store providers for testing."""

from dishka import Scope, provide

from letsconnect.adapter.backblaze import MockBlobStore
from letsconnect.domain.service import BlobStore
from letsconnect.util.di.infrastructure.blobstore import BlobStoreProvider


class MockBlobStoreProvider(BlobStoreProvider):
    """Mock blob store provider keeping files in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mock_blob_store(self) -> MockBlobStore:
        """Provide the mock store itself so tests can inspect it."""
        return MockBlobStore()

    @provide(scope=Scope.APP)
    def get_blob_store(self, mock_blob_store: MockBlobStore) -> BlobStore:
        """Provide the mock store behind the BlobStore port."""
        return mock_blob_store
