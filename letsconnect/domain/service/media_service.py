"""Media domain service and the blob store port it drives."""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

import logfire

from letsconnect.domain.error import InternalError, InvalidInputError
from letsconnect.domain.value import MediaFile
from letsconnect.domain.value.common import ValueObject

from .base import Service


class UploadedFile(ValueObject):
    """File received from a client, held in memory until stored."""

    data: bytes
    filename: str
    content_type: str = "application/octet-stream"


class BlobStoreError(Exception):
    """Raised by blob store adapters when a remote call fails."""

    pass


class BlobStore(ABC):
    """Object storage for media files."""

    @abstractmethod
    async def upload(
        self, data: bytes, original_name: str, content_type: str
    ) -> MediaFile:
        """Store a file and return its reference.

        Raises:
            BlobStoreError: If the store rejects the upload
        """
        pass

    @abstractmethod
    async def delete(self, file_id: str, file_name: str) -> bool:
        """Delete a stored file. The default file id is never sent.

        Returns:
            True if the file is gone
        """
        pass


class MediaService(Service):
    """Uploads new media and removes media that is no longer referenced."""

    def __init__(self, blob_store: BlobStore) -> None:
        """Initialize media service.

        Args:
            blob_store: Object storage adapter
        """
        self.blob_store = blob_store

    async def upload(self, upload: UploadedFile) -> MediaFile:
        """Store an uploaded file.

        Raises:
            InvalidInputError: If the file is empty
            InternalError: If the blob store fails
        """
        with logfire.span(
            "media_service.upload", filename=upload.filename, size=len(upload.data)
        ):
            if not upload.data:
                raise InvalidInputError("Uploaded file is empty")
            try:
                media = await self.blob_store.upload(
                    upload.data, upload.filename, upload.content_type
                )
            except BlobStoreError as e:
                logfire.error("Media upload failed", filename=upload.filename, error=str(e))
                raise InternalError("Failed to upload media file") from e
            logfire.info("Media uploaded", file_id=media.file_id, file_name=media.file_name)
            return media

    async def discard(self, media: Optional[MediaFile]) -> bool:
        """Delete media best-effort. Failures are logged and ignored."""
        if media is None or media.is_default:
            return True
        with logfire.span("media_service.discard", file_id=media.file_id):
            try:
                return await self.blob_store.delete(media.file_id, media.file_name)
            except BlobStoreError as e:
                logfire.warn(
                    "Failed to delete old media file",
                    file_id=media.file_id,
                    file_name=media.file_name,
                    error=str(e),
                )
                return False

    @asynccontextmanager
    async def replacing(
        self, current: Optional[MediaFile], upload: Optional[UploadedFile]
    ) -> AsyncIterator[Optional[MediaFile]]:
        """Swap ``current`` for a new upload around the write in the block.

        Yields the new media, or None when nothing was uploaded. The old
        file is discarded only after the block completes; if the block
        raises, the new file is discarded and the old one stays referenced.
        """
        if upload is None:
            yield None
            return

        new_media = await self.upload(upload)
        try:
            yield new_media
        except Exception:
            await self.discard(new_media)
            raise
        await self.discard(current)
