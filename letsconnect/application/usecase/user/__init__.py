"""User use cases."""

from .get_user import GetUserRequest, GetUserResponse, GetUserUseCase
from .list_follows import (
    FollowEntry,
    ListFollowsRequest,
    ListFollowsResponse,
    ListFollowsUseCase,
)
from .toggle_follow import ToggleFollowRequest, ToggleFollowUseCase
from .toggle_user_flag import ToggleUserFlagRequest, ToggleUserFlagUseCase

__all__ = [
    "FollowEntry",
    "GetUserRequest",
    "GetUserResponse",
    "GetUserUseCase",
    "ListFollowsRequest",
    "ListFollowsResponse",
    "ListFollowsUseCase",
    "ToggleFollowRequest",
    "ToggleFollowUseCase",
    "ToggleUserFlagRequest",
    "ToggleUserFlagUseCase",
]
