"""Get current user use case."""

from pydantic import BaseModel

from tajmaat.application.usecase.base import BaseUseCase
from tajmaat.domain.service import JWTService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token from the session cookie


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    email: str | None


class GetCurrentUserUseCase(BaseUseCase):
    """Use case resolving the acting member from a session token.

    Sign-in happens in the frontend's session provider, so the token is the
    only proof of identity this service sees.
    """

    def __init__(self, jwt_service: JWTService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
        """
        self.jwt_service = jwt_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Verify the token and return the member it was issued to.

        Raises:
            JWTError: If token is invalid or expired
        """
        payload = self.jwt_service.verify_token(request.token)
        return GetCurrentUserResponse(
            user_id=str(payload.user_id), email=payload.email
        )
