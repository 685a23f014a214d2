"""Post domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from letsconnect.domain.error import InvalidInputError, NotFoundError
from letsconnect.domain.model import DeletedPost, Post
from letsconnect.domain.model.post import POST_CONTENT_MAX_LENGTH
from letsconnect.domain.repository import DeletedPostRepository, PostRepository
from letsconnect.domain.value import (
    ContentKind,
    MediaType,
    PostCategory,
    PostId,
    Principal,
    UserId,
)

from .authorization import AuthorizationPolicy
from .base import Service
from .media_service import MediaService, UploadedFile
from .pagination import page_offset

# Media types that cannot exist without an uploaded file
FILE_MEDIA_TYPES = frozenset({MediaType.IMAGE, MediaType.VIDEO, MediaType.DOCS})


def _check_content_length(content: str) -> str:
    if len(content) > POST_CONTENT_MAX_LENGTH:
        raise InvalidInputError(
            f"Post content must be at most {POST_CONTENT_MAX_LENGTH} characters"
        )
    return content


class PostService(Service):
    """Domain service for the post lifecycle."""

    def __init__(
        self,
        post_repository: PostRepository,
        deleted_post_repository: DeletedPostRepository,
        media_service: MediaService,
        authorization_policy: AuthorizationPolicy,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            deleted_post_repository: Archive for deleted user posts
            media_service: Media upload and cleanup
            authorization_policy: Per-kind authorization rules
        """
        self.post_repository = post_repository
        self.deleted_post_repository = deleted_post_repository
        self.media_service = media_service
        self.authorization_policy = authorization_policy

    async def create_post(
        self,
        principal: Principal,
        media_type: MediaType,
        content: str = "",
        category: PostCategory = PostCategory.USERS_POST,
        allow_comments: bool = True,
        allow_shares: bool = True,
        upload: Optional[UploadedFile] = None,
    ) -> Post:
        """Create a new post.

        Users may only publish to the usersPost category; every other
        category is reserved for staff.

        Raises:
            InvalidInputError: If neither content nor a required file is given
            NotAuthorizedError: If a non-staff user targets an editorial category
        """
        with logfire.span(
            "post_service.create_post",
            user_id=str(principal.user_id),
            category=category.value,
            media_type=media_type.value,
        ):
            content = (content or "").strip()
            if not content and upload is None:
                raise InvalidInputError("Please Add Content or Media")
            _check_content_length(content)
            if media_type == MediaType.TEXT and not content:
                raise InvalidInputError("Invalid Data for new post")
            if media_type in FILE_MEDIA_TYPES and upload is None:
                raise InvalidInputError("Media File is Not Found")

            self.authorization_policy.ensure_can_create(
                ContentKind.POST, principal, category
            )

            media = await self.media_service.upload(upload) if upload else None
            post = Post(
                id=PostId(uuid4()),
                owner_id=principal.user_id,
                content=content,
                category=category,
                media_type=media_type,
                media=media,
                allow_comments=allow_comments,
                allow_shares=allow_shares,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), category=category.value)
            return saved

    async def get_post(self, post_id: PostId) -> Post:
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", str(post_id))
        return post

    async def update_post(
        self,
        post_id: PostId,
        principal: Principal,
        content: Optional[str] = None,
        category: Optional[PostCategory] = None,
        media_type: Optional[MediaType] = None,
        allow_comments: Optional[bool] = None,
        allow_shares: Optional[bool] = None,
        upload: Optional[UploadedFile] = None,
    ) -> Post:
        """Update the editable fields of a post.

        A new file replaces the old one. The old file is removed from the
        blob store best-effort once the post is saved.
        """
        with logfire.span(
            "post_service.update_post",
            post_id=str(post_id),
            user_id=str(principal.user_id),
        ):
            post = await self.get_post(post_id)
            self.authorization_policy.ensure_can_manage(post, principal)

            changes: dict = {}
            if content:
                changes["content"] = _check_content_length(content.strip())
            if category is not None:
                self.authorization_policy.ensure_can_create(
                    ContentKind.POST, principal, category
                )
                changes["category"] = category
            if media_type is not None:
                changes["media_type"] = media_type
            if allow_comments is not None:
                changes["allow_comments"] = allow_comments
            if allow_shares is not None:
                changes["allow_shares"] = allow_shares

            if not changes and upload is None:
                raise InvalidInputError("No data provided for update")
            changes["updated_at"] = datetime.now()

            async with self.media_service.replacing(post.media, upload) as media:
                if media is not None:
                    changes["media"] = media
                updated = Post.model_validate({**post.model_dump(), **changes})
                saved = await self.post_repository.save(updated)
            logfire.info("Post updated", post_id=str(post_id), fields=sorted(changes))
            return saved

    async def delete_post(self, post_id: PostId, principal: Principal) -> None:
        """Delete a post.

        User posts are archived first and keep their media so the archive
        stays complete; editorial posts take their media with them.
        """
        with logfire.span(
            "post_service.delete_post",
            post_id=str(post_id),
            user_id=str(principal.user_id),
        ):
            post = await self.get_post(post_id)
            self.authorization_policy.ensure_can_manage(post, principal)

            if post.is_users_post:
                archived = await self.deleted_post_repository.save(
                    DeletedPost.from_post(post)
                )
                logfire.info(
                    "User post archived",
                    post_id=str(post_id),
                    deleted_post_id=str(archived.id),
                )

            await self.post_repository.delete(post_id)

            if not post.is_users_post:
                await self.media_service.discard(post.media)
            logfire.info("Post deleted", post_id=str(post_id))

    async def list_posts(
        self,
        page: int,
        page_size: int,
        category: Optional[PostCategory] = None,
        owner_id: Optional[UserId] = None,
    ) -> tuple[list[Post], int]:
        """Return one page of posts, newest first, and the total count."""
        with logfire.span(
            "post_service.list_posts",
            category=category.value if category else None,
            owner_id=str(owner_id) if owner_id else None,
            page=page,
        ):
            offset = page_offset(page, page_size)
            posts = await self.post_repository.find_all(
                category=category, owner_id=owner_id, limit=page_size, offset=offset
            )
            total = await self.post_repository.count(category=category, owner_id=owner_id)
            return posts, total
