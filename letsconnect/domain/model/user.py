"""User aggregate root."""

from datetime import datetime
from typing import Self

from pydantic import Field

from letsconnect.domain.model.common import DomainModel
from letsconnect.domain.value import Role, UserFlag, UserId


class User(DomainModel):
    """Registered member of the network.

    Accounts are created by the identity service; this backend reads them,
    flips their display and moderation flags and keeps the follow graph.
    Each side of a follow is stored on both users so either list can be
    read without a join.
    """

    id: UserId
    name: str = Field(min_length=1, max_length=100)
    username: str = Field(min_length=1, max_length=50)
    role: Role = Role.USER
    is_banned: bool = False
    show_points: bool = True
    show_badges: bool = True
    followers: list[UserId] = Field(default_factory=list)
    followers_count: int = 0
    following: list[UserId] = Field(default_factory=list)
    following_count: int = 0
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def toggle(self, flag: UserFlag) -> tuple[Self, bool]:
        state = not getattr(self, flag.value)
        updated = self.model_copy(
            update={flag.value: state, "updated_at": datetime.now()}
        )
        return updated, state

    def is_followed_by(self, user_id: UserId) -> bool:
        return user_id in self.followers

    def _with_graph(
        self, followers: list[UserId], following: list[UserId]
    ) -> Self:
        return self.model_copy(
            update={
                "followers": followers,
                "followers_count": len(followers),
                "following": following,
                "following_count": len(following),
                "updated_at": datetime.now(),
            }
        )

    def toggle_follow(self, target: "User") -> tuple[Self, "User", bool]:
        """Follow ``target``, or unfollow when already following.

        Returns:
            Updated follower, updated target and whether self now follows
        """
        if target.is_followed_by(self.id):
            follower = self._with_graph(
                self.followers, [u for u in self.following if u != target.id]
            )
            followed = target._with_graph(
                [u for u in target.followers if u != self.id], target.following
            )
            return follower, followed, False

        following = [u for u in self.following if u != target.id] + [target.id]
        follower = self._with_graph(self.followers, following)
        followed = target._with_graph(target.followers + [self.id], target.following)
        return follower, followed, True
