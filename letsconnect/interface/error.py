"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class AuthenticationError(InterfaceError):
    """Missing or invalid credentials."""

    status_code = 401

    def __init__(self, message: str = "Please Login First") -> None:
        self.message = message
        super().__init__(message)
