"""Base model for all domain entities."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


def as_aware(value: datetime) -> datetime:
    """Attach the local timezone to naive datetimes.

    Stored timestamps come back timezone-aware while clients may send
    naive ones; comparisons go through this first.
    """
    return value if value.tzinfo is not None else value.astimezone()
