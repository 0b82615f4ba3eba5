"""JWT token domain service."""

import logfire

from tajmaat.config import AuthSettings
from tajmaat.util.jwt import TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a session token and extract its payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=str(payload.user_id))
                return payload
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
