"""User domain service."""

import logfire

from letsconnect.domain.error import InvalidInputError, NotAuthorizedError, NotFoundError
from letsconnect.domain.model import User
from letsconnect.domain.repository import UserRepository
from letsconnect.domain.value import FollowDirection, Principal, Role, UserFlag, UserId

from .base import Service
from .pagination import slice_page
from .toggle import ToggleOutcome, follow_outcome, user_flag_outcome


class UserService(Service):
    """Domain service for user profiles, moderation flags and the follow graph."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_user(self, user_id: UserId) -> User:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", str(user_id))
        return user

    async def toggle_flag(
        self, user_id: UserId, principal: Principal, flag: UserFlag
    ) -> ToggleOutcome:
        """Flip a user flag.

        Display flags belong to the user themself; the ban flag is for
        admins only and cannot be applied to oneself.
        """
        with logfire.span(
            "user_service.toggle_flag",
            user_id=str(user_id),
            principal_id=str(principal.user_id),
            flag=flag.value,
        ):
            if flag == UserFlag.IS_BANNED:
                allowed = principal.role == Role.ADMIN and principal.user_id != user_id
            else:
                allowed = principal.user_id == user_id
            if not allowed:
                raise NotAuthorizedError("User", str(user_id), str(principal.user_id))

            user = await self.get_user(user_id)
            updated, state = user.toggle(flag)
            await self.user_repository.save(updated)
            logfire.info("User flag toggled", user_id=str(user_id), flag=flag.value, state=state)
            return user_flag_outcome(flag, state)

    async def toggle_follow(
        self, target_id: UserId, principal: Principal
    ) -> ToggleOutcome:
        """Follow the target user, or unfollow when already following.

        Both users are updated together: the target's followers and the
        caller's following list always agree.

        Raises:
            InvalidInputError: If the caller targets themself
            NotFoundError: If either user does not exist
        """
        with logfire.span(
            "user_service.toggle_follow",
            target_id=str(target_id),
            user_id=str(principal.user_id),
        ):
            if target_id == principal.user_id:
                raise InvalidInputError("You Can Not Follow Yourself")

            users = await self.user_repository.find_for_update(
                [principal.user_id, target_id]
            )
            for user_id in (target_id, principal.user_id):
                if user_id not in users:
                    raise NotFoundError("User", str(user_id))

            follower, followed, following = users[principal.user_id].toggle_follow(
                users[target_id]
            )
            await self.user_repository.save(follower)
            await self.user_repository.save(followed)
            logfire.info(
                "Follow toggled",
                user_id=str(principal.user_id),
                target_id=str(target_id),
                following=following,
            )
            return follow_outcome(following)

    async def list_follows(
        self,
        user_id: UserId,
        direction: FollowDirection,
        page: int,
        page_size: int,
    ) -> tuple[list[User], int]:
        """One page of a user's followers or followed users, oldest follow first."""
        user = await self.get_user(user_id)
        ids = user.followers if direction == FollowDirection.FOLLOWERS else user.following
        page_ids, total = slice_page(ids, page, page_size)
        return await self.user_repository.find_by_ids(page_ids), total
