"""Domain layer errors.

Every domain error carries the HTTP status code the interface layer answers
with, so handlers never need to know the concrete error type.
"""


class DomainError(Exception):
    """Base domain error."""

    status_code: int = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInputError(DomainError):
    """Raised when an identifier or a field value is malformed."""

    status_code = 400


class NotAuthorizedError(DomainError):
    """Raised when a principal may not perform an action on a resource."""

    status_code = 403

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class EngagementDisabledError(DomainError):
    """Raised when comments or shares are turned off on an entity."""

    status_code = 403


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a request conflicts with the current state of a resource."""

    status_code = 409


class ConcurrentModificationError(ConflictError):
    """Raised when a save carries a stale version."""

    def __init__(self, resource: str, identifier: str, expected_version: int):
        self.resource = resource
        self.identifier = identifier
        self.expected_version = expected_version
        super().__init__(
            f"{resource} {identifier} was modified concurrently, please retry"
        )


class InternalError(DomainError):
    """Raised when a storage or blob store collaborator fails."""

    status_code = 500
