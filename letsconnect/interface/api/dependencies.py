"""Request helpers shared by the routes."""

from typing import Optional

from fastapi import Cookie, Header, UploadFile

from letsconnect.config import PaginationSettings
from letsconnect.domain.service import JWTService, UploadedFile
from letsconnect.domain.value import Principal
from letsconnect.interface.error import AuthenticationError


def read_token(
    access_token_header: str | None = Header(default=None, alias="access-token"),
    access_token: str | None = Cookie(default=None),
) -> str | None:
    """Token from the access-token header, falling back to the cookie."""
    return access_token_header or access_token


def authenticate(jwt_service: JWTService, token: str | None) -> Principal:
    """Resolve the caller or fail with 401.

    Raises:
        AuthenticationError: If the token is missing or invalid
    """
    if not token:
        raise AuthenticationError()
    principal = jwt_service.get_principal_from_token(token)
    if principal is None:
        raise AuthenticationError("Invalid authentication token")
    return principal


def resolve_page_size(
    page_size: Optional[int], pagination: PaginationSettings, comments: bool = False
) -> int:
    """Requested page size, defaulted and capped by settings."""
    if page_size is None:
        return pagination.comments_page_size if comments else pagination.page_size
    return min(page_size, pagination.max_page_size)


async def read_upload(file: Optional[UploadFile]) -> Optional[UploadedFile]:
    """Buffer a multipart file. Empty file fields count as absent."""
    if file is None or not file.filename:
        return None
    data = await file.read()
    return UploadedFile(
        data=data,
        filename=file.filename,
        content_type=file.content_type or "application/octet-stream",
    )
