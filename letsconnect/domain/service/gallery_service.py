"""Gallery domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from letsconnect.domain.error import InvalidInputError, NotFoundError
from letsconnect.domain.model import GalleryPost
from letsconnect.domain.model.gallery import GALLERY_TITLE_MAX_LENGTH
from letsconnect.domain.repository import GalleryRepository
from letsconnect.domain.value import (
    ContentKind,
    GalleryCategory,
    GalleryPostId,
    NewsType,
    Principal,
)

from .authorization import AuthorizationPolicy
from .base import Service
from .media_service import MediaService, UploadedFile
from .pagination import page_offset

FILE_CATEGORIES = frozenset({GalleryCategory.IMAGE, GalleryCategory.REEL})


def _check_title(title: str) -> str:
    title = (title or "").strip().lower()
    if not title:
        raise InvalidInputError("Please Enter All Required Fields")
    if len(title) > GALLERY_TITLE_MAX_LENGTH:
        raise InvalidInputError(
            f"Title must be at most {GALLERY_TITLE_MAX_LENGTH} characters"
        )
    return title


class GalleryService(Service):
    """Domain service for the gallery post lifecycle."""

    def __init__(
        self,
        gallery_repository: GalleryRepository,
        media_service: MediaService,
        authorization_policy: AuthorizationPolicy,
    ) -> None:
        self.gallery_repository = gallery_repository
        self.media_service = media_service
        self.authorization_policy = authorization_policy

    async def create_gallery_post(
        self,
        principal: Principal,
        title: str,
        category: GalleryCategory,
        news_type: NewsType,
        youtube_url: Optional[str] = None,
        allow_comments: bool = True,
        allow_shares: bool = True,
        upload: Optional[UploadedFile] = None,
    ) -> GalleryPost:
        """Publish an image, reel or video to the gallery.

        Images and reels need an uploaded file; videos need a YouTube URL.

        Raises:
            InvalidInputError: If the required file or URL is missing
            NotAuthorizedError: If the principal is not staff
        """
        with logfire.span(
            "gallery_service.create_gallery_post",
            user_id=str(principal.user_id),
            category=category.value,
        ):
            self.authorization_policy.ensure_can_create(ContentKind.GALLERY, principal)

            title = _check_title(title)
            if category == GalleryCategory.VIDEO and not youtube_url:
                raise InvalidInputError(
                    "Please Enter YouTube Url If u Want to Upload a Video Post"
                )
            if category in FILE_CATEGORIES:
                if upload is None:
                    raise InvalidInputError("You Can't Add This Post Without File")
                youtube_url = None

            media = await self.media_service.upload(upload) if upload else None
            gallery_post = GalleryPost(
                id=GalleryPostId(uuid4()),
                owner_id=principal.user_id,
                title=title,
                category=category,
                news_type=news_type,
                media=media,
                youtube_url=youtube_url,
                allow_comments=allow_comments,
                allow_shares=allow_shares,
            )
            saved = await self.gallery_repository.save(gallery_post)
            logfire.info("Gallery post created", gallery_post_id=str(saved.id))
            return saved

    async def get_gallery_post(self, gallery_post_id: GalleryPostId) -> GalleryPost:
        gallery_post = await self.gallery_repository.find_by_id(gallery_post_id)
        if gallery_post is None:
            raise NotFoundError("Post", str(gallery_post_id))
        return gallery_post

    async def update_gallery_post(
        self,
        gallery_post_id: GalleryPostId,
        principal: Principal,
        title: Optional[str] = None,
        category: Optional[GalleryCategory] = None,
        news_type: Optional[NewsType] = None,
        youtube_url: Optional[str] = None,
        allow_comments: Optional[bool] = None,
        allow_shares: Optional[bool] = None,
        upload: Optional[UploadedFile] = None,
    ) -> GalleryPost:
        with logfire.span(
            "gallery_service.update_gallery_post",
            gallery_post_id=str(gallery_post_id),
            user_id=str(principal.user_id),
        ):
            gallery_post = await self.get_gallery_post(gallery_post_id)
            self.authorization_policy.ensure_can_manage(gallery_post, principal)

            changes: dict = {}
            if title is not None:
                changes["title"] = _check_title(title)
            if category is not None:
                changes["category"] = category
            if news_type is not None:
                changes["news_type"] = news_type
            if youtube_url:
                changes["youtube_url"] = youtube_url
            if allow_comments is not None:
                changes["allow_comments"] = allow_comments
            if allow_shares is not None:
                changes["allow_shares"] = allow_shares

            if not changes and upload is None:
                raise InvalidInputError("No data provided for update")
            changes["updated_at"] = datetime.now()

            async with self.media_service.replacing(gallery_post.media, upload) as media:
                if media is not None:
                    changes["media"] = media
                updated = GalleryPost.model_validate(
                    {**gallery_post.model_dump(), **changes}
                )
                saved = await self.gallery_repository.save(updated)
            logfire.info(
                "Gallery post updated",
                gallery_post_id=str(gallery_post_id),
                fields=sorted(changes),
            )
            return saved

    async def delete_gallery_post(
        self, gallery_post_id: GalleryPostId, principal: Principal
    ) -> None:
        with logfire.span(
            "gallery_service.delete_gallery_post",
            gallery_post_id=str(gallery_post_id),
            user_id=str(principal.user_id),
        ):
            gallery_post = await self.get_gallery_post(gallery_post_id)
            self.authorization_policy.ensure_can_manage(gallery_post, principal)
            await self.gallery_repository.delete(gallery_post_id)
            await self.media_service.discard(gallery_post.media)
            logfire.info("Gallery post deleted", gallery_post_id=str(gallery_post_id))

    async def list_gallery_posts(
        self,
        page: int,
        page_size: int,
        category: Optional[GalleryCategory] = None,
        news_type: Optional[NewsType] = None,
    ) -> tuple[list[GalleryPost], int]:
        offset = page_offset(page, page_size)
        gallery_posts = await self.gallery_repository.find_all(
            category=category, news_type=news_type, limit=page_size, offset=offset
        )
        total = await self.gallery_repository.count(
            category=category, news_type=news_type
        )
        return gallery_posts, total
