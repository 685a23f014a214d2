"""Toggle user flag use case."""

from pydantic import BaseModel

from letsconnect.application.usecase.base import BaseUseCase, ToggleResponse, parse_id
from letsconnect.domain.service import UserService
from letsconnect.domain.value import Principal, UserFlag, UserId


class ToggleUserFlagRequest(BaseModel):
    """Toggle user flag request."""

    user_id: str
    principal: Principal
    flag: UserFlag


class ToggleUserFlagUseCase(BaseUseCase):
    """Use case for banning users and switching profile visibility flags."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ToggleUserFlagRequest) -> ToggleResponse:
        outcome = await self.user_service.toggle_flag(
            UserId(parse_id(request.user_id, "User")),
            request.principal,
            request.flag,
        )
        return ToggleResponse(message=outcome.message, state=outcome.state)
