"""Blob store infrastructure providers."""

from dishka import Scope, provide

from letsconnect.adapter.backblaze import RealBackblazeBlobStore
from letsconnect.config import Settings
from letsconnect.domain.service import BlobStore
from letsconnect.util.di.base import ProviderBase
from letsconnect.util.error import ConfigurationError

_PLACEHOLDER = "CHANGE_ME_IN_PRODUCTION"


class BlobStoreProvider(ProviderBase):
    """Blob store component base."""

    __mock_component__ = "blobstore"


class ProdBlobStoreProvider(BlobStoreProvider):
    """Production blob store provider backed by Backblaze B2."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_blob_store(self, settings: Settings) -> BlobStore:
        """Provide Backblaze blob store.

        Raises:
            ConfigurationError: If B2 credentials are not configured
        """
        blob_store = settings.blob_store
        if blob_store.application_key_id == _PLACEHOLDER:
            raise ConfigurationError("Backblaze application key ID must be configured")
        if blob_store.application_key == _PLACEHOLDER:
            raise ConfigurationError("Backblaze application key must be configured")
        if blob_store.bucket_id == _PLACEHOLDER:
            raise ConfigurationError("Backblaze bucket ID must be configured")

        return RealBackblazeBlobStore(
            application_key_id=blob_store.application_key_id,
            application_key=blob_store.application_key,
            bucket_id=blob_store.bucket_id,
            bucket_name=blob_store.bucket_name,
            api_url=blob_store.api_url,
            timeout=blob_store.timeout_seconds,
        )
