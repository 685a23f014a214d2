"""User routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query

from letsconnect.application.usecase.base import ToggleResponse
from letsconnect.application.usecase.user import (
    GetUserRequest,
    GetUserResponse,
    GetUserUseCase,
    ListFollowsRequest,
    ListFollowsResponse,
    ListFollowsUseCase,
    ToggleFollowRequest,
    ToggleFollowUseCase,
    ToggleUserFlagRequest,
    ToggleUserFlagUseCase,
)
from letsconnect.config import PaginationSettings
from letsconnect.domain.service import JWTService
from letsconnect.domain.value import FollowDirection, UserFlag
from letsconnect.interface.api.dependencies import (
    authenticate,
    read_token,
    resolve_page_size,
)

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/me", response_model=GetUserResponse)
async def get_me(
    get_user_use_case: FromDishka[GetUserUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(read_token),
) -> GetUserResponse:
    """Profile of the authenticated caller."""
    principal = authenticate(jwt_service, token)
    return await get_user_use_case.execute(
        GetUserRequest(user_id=str(principal.user_id))
    )


@router.get("/{user_id}", response_model=GetUserResponse)
async def get_user(
    user_id: str,
    get_user_use_case: FromDishka[GetUserUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(read_token),
) -> GetUserResponse:
    authenticate(jwt_service, token)
    return await get_user_use_case.execute(GetUserRequest(user_id=user_id))


@router.post("/{user_id}/toggle/{flag}", response_model=ToggleResponse)
async def toggle_user_flag(
    user_id: str,
    flag: UserFlag,
    toggle_user_flag_use_case: FromDishka[ToggleUserFlagUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(read_token),
) -> ToggleResponse:
    """Flip a user flag.

    ``show_points`` and ``show_badges`` are toggled by the user themself;
    ``is_banned`` is toggled by an admin on another user.
    """
    principal = authenticate(jwt_service, token)
    return await toggle_user_flag_use_case.execute(
        ToggleUserFlagRequest(user_id=user_id, principal=principal, flag=flag)
    )


@router.post("/{user_id}/follow", response_model=ToggleResponse)
async def toggle_follow(
    user_id: str,
    toggle_follow_use_case: FromDishka[ToggleFollowUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(read_token),
) -> ToggleResponse:
    """Follow the user, or unfollow if already following."""
    principal = authenticate(jwt_service, token)
    return await toggle_follow_use_case.execute(
        ToggleFollowRequest(user_id=user_id, principal=principal)
    )


@router.get("/{user_id}/{direction}", response_model=ListFollowsResponse)
async def list_follows(
    user_id: str,
    direction: FollowDirection,
    list_follows_use_case: FromDishka[ListFollowsUseCase],
    jwt_service: FromDishka[JWTService],
    pagination: FromDishka[PaginationSettings],
    page: int = Query(default=1, ge=1),
    page_size: Optional[int] = Query(default=None, ge=1),
    token: str | None = Depends(read_token),
) -> ListFollowsResponse:
    """A user's followers or the users they follow."""
    authenticate(jwt_service, token)
    return await list_follows_use_case.execute(
        ListFollowsRequest(
            user_id=user_id,
            direction=direction,
            page=page,
            page_size=resolve_page_size(page_size, pagination),
        )
    )
