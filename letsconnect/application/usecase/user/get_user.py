"""Get user use case."""

from pydantic import BaseModel

from letsconnect.application.usecase.base import BaseUseCase, parse_id
from letsconnect.domain.model import User
from letsconnect.domain.service import UserService
from letsconnect.domain.value import UserId


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: str


class GetUserResponse(BaseModel):
    """Get user response."""

    success: bool = True
    user: User


class GetUserUseCase(BaseUseCase):
    """Use case for reading a user profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> GetUserResponse:
        user = await self.user_service.get_user(UserId(parse_id(request.user_id, "User")))
        return GetUserResponse(user=user)
