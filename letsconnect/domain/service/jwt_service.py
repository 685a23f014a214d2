"""JWT token domain service."""

from typing import Optional
from uuid import UUID

import logfire

from letsconnect.config import AuthSettings
from letsconnect.domain.value import Principal, Role, UserId
from letsconnect.util.jwt import JWTError, verify_token

from .base import Service


class JWTService(Service):
    """Domain service turning bearer tokens into principals.

    Tokens are issued by the identity service; this backend only verifies
    them.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_principal(self, token: str) -> Principal:
        """Verify a token and build the principal it names.

        Raises:
            JWTError: If the token is invalid, expired or malformed
        """
        with logfire.span("jwt_service.verify_principal"):
            try:
                payload = verify_token(token, self.auth_settings)
                principal = Principal(
                    user_id=UserId(UUID(payload.user_id)), role=Role(payload.role)
                )
            except ValueError as e:
                logfire.error("JWT payload rejected", error=str(e))
                raise JWTError("Invalid token payload") from e
            except JWTError as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise
            logfire.info(
                "JWT token verified",
                user_id=payload.user_id,
                role=principal.role.value,
            )
            return principal

    def get_principal_from_token(self, token: str | None) -> Optional[Principal]:
        """Extract the principal without raising.

        Returns:
            Principal if the token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_principal(token)
        except JWTError as e:
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
