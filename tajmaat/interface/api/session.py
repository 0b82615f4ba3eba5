"""Session resolution for routes that act on behalf of a member."""

from typing import Any, Mapping

from fastapi import Request

from tajmaat.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from tajmaat.interface.error import auth_required, invalid_body, invalid_json
from tajmaat.util.jwt import JWTError


async def require_actor(
    auth_token: str | None, get_current_user_use_case: GetCurrentUserUseCase
) -> str:
    """Return the acting member's ID from the session cookie.

    Raises:
        ApiError: AUTH_REQUIRED if the cookie is missing or invalid
    """
    if not auth_token:
        raise auth_required()

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
    except JWTError as e:
        raise auth_required(str(e))
    return user.user_id


async def read_json(request: Request) -> Any:
    """Parse the request body as JSON.

    Raises:
        ApiError: INVALID_JSON if the body is not valid JSON
    """
    try:
        return await request.json()
    except ValueError:
        raise invalid_json()


async def read_json_object(request: Request) -> Mapping[str, Any]:
    """Parse the request body as a JSON object.

    Raises:
        ApiError: INVALID_JSON if the body is not valid JSON or not an object
    """
    body = await read_json(request)
    if not isinstance(body, dict):
        raise invalid_body()
    return body
