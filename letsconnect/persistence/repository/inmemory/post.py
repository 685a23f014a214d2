"""In-memory post repositories for testing."""

from datetime import datetime
from typing import Optional, Sequence

from letsconnect.domain.model import DeletedPost, Post
from letsconnect.domain.model.common import as_aware
from letsconnect.domain.repository import DeletedPostRepository, PostRepository
from letsconnect.domain.value import PostCategory, PostId, UserId

from .engageable import InMemoryEngageableRepository
from .store import InMemoryDocumentStore


class InMemoryPostRepository(InMemoryEngageableRepository[Post], PostRepository):
    """In-memory implementation of PostRepository for testing."""

    collection_name = "posts"
    resource = "Post"

    def _matching(
        self,
        category: Optional[PostCategory],
        owner_id: Optional[UserId],
        owner_ids: Optional[Sequence[UserId]] = None,
    ) -> list[Post]:
        posts = list(self._items.values())
        if category is not None:
            posts = [p for p in posts if p.category == category]
        if owner_id is not None:
            posts = [p for p in posts if p.owner_id == owner_id]
        if owner_ids is not None:
            posts = [p for p in posts if p.owner_id in owner_ids]
        return posts

    async def find_all(
        self,
        category: Optional[PostCategory] = None,
        owner_id: Optional[UserId] = None,
        owner_ids: Optional[Sequence[UserId]] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Post]:
        posts = self._matching(category, owner_id, owner_ids)
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts[offset : offset + limit]

    async def count(
        self,
        category: Optional[PostCategory] = None,
        owner_id: Optional[UserId] = None,
        owner_ids: Optional[Sequence[UserId]] = None,
    ) -> int:
        return len(self._matching(category, owner_id, owner_ids))

    async def find_popular(
        self, recent_since: datetime, limit: int = 20, offset: int = 0
    ) -> list[Post]:
        recent_since = as_aware(recent_since)
        posts = self._matching(PostCategory.USERS_POST, None)
        posts.sort(
            key=lambda p: (
                as_aware(p.created_at) >= recent_since,
                p.likes_count + p.comments_count + p.shares,
                as_aware(p.created_at),
            ),
            reverse=True,
        )
        return posts[offset : offset + limit]


class InMemoryDeletedPostRepository(DeletedPostRepository):
    """In-memory archive of deleted user posts."""

    def __init__(self, store: Optional[InMemoryDocumentStore] = None) -> None:
        self.store = store or InMemoryDocumentStore()

    async def save(self, deleted_post: DeletedPost) -> DeletedPost:
        self.store.collection("deleted_posts")[deleted_post.id] = deleted_post
        return deleted_post

    async def find_by_original_id(self, post_id: PostId) -> Optional[DeletedPost]:
        for deleted_post in self.store.collection("deleted_posts").values():
            if deleted_post.original_post_id == post_id:
                return deleted_post
        return None
