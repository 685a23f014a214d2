"""Backblaze B2 blob store client.

Talks to the B2 native API: every operation authorizes the account first,
then uploads through a one-off upload URL or deletes a file version.
"""

import hashlib
import os
from urllib.parse import quote
from uuid import uuid4

import httpx
import logfire

from letsconnect.domain.service.media_service import BlobStore, BlobStoreError
from letsconnect.domain.value import DEFAULT_FILE_ID, MediaFile


class BackblazeError(BlobStoreError):
    """Backblaze B2 API error."""

    pass


class RealBackblazeBlobStore(BlobStore):
    """Blob store backed by a Backblaze B2 bucket."""

    def __init__(
        self,
        application_key_id: str,
        application_key: str,
        bucket_id: str,
        bucket_name: str,
        api_url: str = "https://api.backblazeb2.com",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Backblaze client.

        Args:
            application_key_id: B2 application key ID
            application_key: B2 application key
            bucket_id: Bucket receiving uploads
            bucket_name: Bucket name used in public download URLs
            api_url: B2 account authorization endpoint
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.application_key_id = application_key_id
        self.application_key = application_key
        self.bucket_id = bucket_id
        self.bucket_name = bucket_name
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    @staticmethod
    def build_file_name(original_name: str) -> str:
        """Unique object name keeping the original name and extension."""
        _, ext = os.path.splitext(original_name)
        return f"{original_name}-{uuid4()}{ext}"

    async def _authorize(self, client: httpx.AsyncClient) -> dict:
        """Authorize the account.

        Returns:
            Authorization payload with apiUrl, downloadUrl and authorizationToken
        """
        response = await client.get(
            f"{self.api_url}/b2api/v2/b2_authorize_account",
            auth=(self.application_key_id, self.application_key),
        )
        if response.status_code != 200:
            logfire.error(
                "Backblaze authorization failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise BackblazeError(f"Authorization failed: {response.status_code}")
        return response.json()

    async def upload(
        self, data: bytes, original_name: str, content_type: str
    ) -> MediaFile:
        """Upload a file and return its public reference.

        Raises:
            BackblazeError: If any B2 call fails
        """
        file_name = self.build_file_name(original_name)

        try:
            async with self._client() as client:
                auth = await self._authorize(client)

                response = await client.post(
                    f"{auth['apiUrl']}/b2api/v2/b2_get_upload_url",
                    json={"bucketId": self.bucket_id},
                    headers={"Authorization": auth["authorizationToken"]},
                )
                if response.status_code != 200:
                    logfire.error(
                        "Backblaze upload URL request failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise BackblazeError(
                        f"Upload URL request failed: {response.status_code}"
                    )
                target = response.json()

                response = await client.post(
                    target["uploadUrl"],
                    content=data,
                    headers={
                        "Authorization": target["authorizationToken"],
                        "X-Bz-File-Name": quote(file_name),
                        "Content-Type": content_type or "b2/x-auto",
                        "X-Bz-Content-Sha1": hashlib.sha1(data).hexdigest(),
                    },
                )
                if response.status_code != 200:
                    logfire.error(
                        "Backblaze upload failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise BackblazeError(f"Upload failed: {response.status_code}")
                result = response.json()

        except httpx.HTTPError as e:
            logfire.error("Backblaze upload HTTP error", error=str(e))
            raise BackblazeError(f"HTTP error during upload: {e}")

        stored_name = str(result["fileName"])
        url = f"{auth['downloadUrl']}/file/{self.bucket_name}/{stored_name}"
        logfire.info("Backblaze file uploaded", file_name=stored_name)
        return MediaFile(file_id=str(result["fileId"]), file_name=stored_name, url=url)

    async def delete(self, file_id: str, file_name: str) -> bool:
        """Delete a file version. The default placeholder is never sent.

        Raises:
            BackblazeError: If the B2 call fails
        """
        if file_id == DEFAULT_FILE_ID or file_name == DEFAULT_FILE_ID:
            return True

        try:
            async with self._client() as client:
                auth = await self._authorize(client)
                response = await client.post(
                    f"{auth['apiUrl']}/b2api/v2/b2_delete_file_version",
                    json={"fileId": file_id, "fileName": file_name},
                    headers={"Authorization": auth["authorizationToken"]},
                )
                if response.status_code != 200:
                    logfire.error(
                        "Backblaze delete failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise BackblazeError(f"Delete failed: {response.status_code}")

        except httpx.HTTPError as e:
            logfire.error("Backblaze delete HTTP error", error=str(e))
            raise BackblazeError(f"HTTP error during delete: {e}")

        logfire.info("Backblaze file deleted", file_id=file_id)
        return True


class MockBlobStore(BlobStore):
    """In-memory blob store for testing.

    Keeps uploaded bytes by file id and never touches the network.
    """

    def __init__(self, bucket_name: str = "letsconnect-test") -> None:
        self.bucket_name = bucket_name
        self.files: dict[str, tuple[str, bytes]] = {}
        self.deleted: list[str] = []
        self.fail_deletes = False

    async def upload(
        self, data: bytes, original_name: str, content_type: str
    ) -> MediaFile:
        file_id = f"mock-{uuid4()}"
        file_name = RealBackblazeBlobStore.build_file_name(original_name)
        self.files[file_id] = (file_name, data)
        return MediaFile(
            file_id=file_id,
            file_name=file_name,
            url=f"https://mock.blobstore/file/{self.bucket_name}/{file_name}",
        )

    async def delete(self, file_id: str, file_name: str) -> bool:
        if file_id == DEFAULT_FILE_ID or file_name == DEFAULT_FILE_ID:
            return True
        if self.fail_deletes:
            raise BackblazeError("Mock delete failure")
        self.files.pop(file_id, None)
        self.deleted.append(file_id)
        return True
