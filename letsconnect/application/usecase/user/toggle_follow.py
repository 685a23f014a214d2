"""Toggle follow use case."""

from pydantic import BaseModel

from letsconnect.application.usecase.base import BaseUseCase, ToggleResponse, parse_id
from letsconnect.domain.service import UserService
from letsconnect.domain.value import Principal, UserId


class ToggleFollowRequest(BaseModel):
    """Toggle follow request."""

    user_id: str
    principal: Principal


class ToggleFollowUseCase(BaseUseCase):
    """Use case for following and unfollowing another user."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ToggleFollowRequest) -> ToggleResponse:
        """Execute toggle follow flow.

        Raises:
            InvalidInputError: If the user ID is invalid or is the caller's own
            NotFoundError: If the user does not exist
        """
        outcome = await self.user_service.toggle_follow(
            UserId(parse_id(request.user_id, "User")), request.principal
        )
        return ToggleResponse(message=outcome.message, state=outcome.state)
