"""Base use case and shared request/response pieces."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from letsconnect.domain.error import InvalidInputError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class MessageResponse(BaseModel):
    """Response of every mutation: the outcome, never the mutated data."""

    success: bool = True
    message: str


def parse_id(value: str, resource: str) -> UUID:
    """Parse a client supplied identifier.

    Raises:
        InvalidInputError: If the value is not a valid UUID
    """
    try:
        return UUID(str(value))
    except ValueError:
        raise InvalidInputError(f"Invalid {resource} ID")


class ToggleResponse(MessageResponse):
    """Response of a flip: the message plus the state it landed on."""

    state: bool


class CreatedResponse(MessageResponse):
    """Response of a create: the message plus the new identifier."""

    id: str
