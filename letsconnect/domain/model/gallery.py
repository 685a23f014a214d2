"""Gallery post aggregate."""

from typing import ClassVar, Optional

from pydantic import Field

from letsconnect.domain.model.engagement import Engageable
from letsconnect.domain.value import (
    ContentKind,
    GalleryCategory,
    GalleryPostId,
    MediaFile,
    NewsType,
)

GALLERY_TITLE_MAX_LENGTH = 255


class GalleryPost(Engageable):
    """Image, video or reel published to the gallery by staff."""

    __kind__: ClassVar[ContentKind] = ContentKind.GALLERY

    id: GalleryPostId
    title: str = Field(min_length=1, max_length=GALLERY_TITLE_MAX_LENGTH)
    category: GalleryCategory
    news_type: Optional[NewsType] = None
    media: Optional[MediaFile] = None
    youtube_url: Optional[str] = None
