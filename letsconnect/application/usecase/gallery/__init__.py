"""Gallery use cases."""

from .create_gallery_post import CreateGalleryPostRequest, CreateGalleryPostUseCase
from .delete_gallery_post import DeleteGalleryPostRequest, DeleteGalleryPostUseCase
from .get_gallery_post import (
    GetGalleryPostRequest,
    GetGalleryPostResponse,
    GetGalleryPostUseCase,
)
from .list_gallery_posts import (
    ListGalleryPostsRequest,
    ListGalleryPostsResponse,
    ListGalleryPostsUseCase,
)
from .update_gallery_post import UpdateGalleryPostRequest, UpdateGalleryPostUseCase

__all__ = [
    "CreateGalleryPostRequest",
    "CreateGalleryPostUseCase",
    "DeleteGalleryPostRequest",
    "DeleteGalleryPostUseCase",
    "GetGalleryPostRequest",
    "GetGalleryPostResponse",
    "GetGalleryPostUseCase",
    "ListGalleryPostsRequest",
    "ListGalleryPostsResponse",
    "ListGalleryPostsUseCase",
    "UpdateGalleryPostRequest",
    "UpdateGalleryPostUseCase",
]
