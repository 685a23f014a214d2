"""List followers and followed users use case."""

from pydantic import BaseModel, Field

from letsconnect.application.usecase.base import BaseUseCase, parse_id
from letsconnect.domain.service import UserService, total_pages
from letsconnect.domain.value import FollowDirection, UserId


class ListFollowsRequest(BaseModel):
    """List follows request."""

    user_id: str
    direction: FollowDirection
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=20, ge=1)


class FollowEntry(BaseModel):
    """Public card of a user in a follow list."""

    id: str
    name: str
    username: str


class ListFollowsResponse(BaseModel):
    """One page of a follow list."""

    success: bool = True
    data: list[FollowEntry]
    total: int
    total_pages: int
    page: int


class ListFollowsUseCase(BaseUseCase):
    """Use case for listing who a user follows or who follows them."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ListFollowsRequest) -> ListFollowsResponse:
        users, total = await self.user_service.list_follows(
            UserId(parse_id(request.user_id, "User")),
            request.direction,
            request.page,
            request.page_size,
        )
        return ListFollowsResponse(
            data=[
                FollowEntry(id=str(user.id), name=user.name, username=user.username)
                for user in users
            ],
            total=total,
            total_pages=total_pages(total, request.page_size),
            page=request.page,
        )
