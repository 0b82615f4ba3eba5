"""Content upload route: the single entry point for creating content."""

from datetime import datetime, timezone

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Request, status
from fastapi.responses import JSONResponse

from tajmaat.application.usecase.auth import GetCurrentUserUseCase
from tajmaat.application.usecase.content import (
    CreateContentRequest,
    CreateContentUseCase,
    IngestionFailed,
    IngestionRejected,
)
from tajmaat.interface.api.envelope import error_response, success_response
from tajmaat.interface.api.payload import content_payload
from tajmaat.interface.api.session import read_json_object, require_actor
from tajmaat.interface.error import ApiError, internal_error

router = APIRouter(prefix="/main", tags=["content"], route_class=DishkaRoute)


@router.post("/upload", status_code=status.HTTP_201_CREATED)
async def upload_content(
    request: Request,
    create_content_use_case: FromDishka[CreateContentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> JSONResponse:
    """Create a content record of any type.

    Body: `{"type": "<content type>", "data": {...}}`. Requires authentication.

    Returns:
        201 with the created record, or a failure envelope
    """
    actor_id = await require_actor(auth_token, get_current_user_use_case)
    body = await read_json_object(request)

    try:
        result = await create_content_use_case.execute(
            CreateContentRequest(
                type=body.get("type"), data=body.get("data"), actor_id=actor_id
            )
        )
    except ApiError:
        raise
    except Exception as e:
        logfire.error(
            "Unexpected error uploading content",
            error=str(e),
            error_type=type(e).__name__,
        )
        raise internal_error()

    if isinstance(result, IngestionRejected):
        if result.code == "INVALID_CONTENT_TYPE":
            return error_response(
                400, result.message, result.code, received=result.received
            )
        return error_response(400, result.message, result.code, details=result.errors)

    if isinstance(result, IngestionFailed):
        return error_response(result.http_status, result.message, "DATABASE_ERROR")

    record = result.record
    return success_response(
        status.HTTP_201_CREATED,
        message=f"{record.content_type.label} created successfully",
        data=content_payload(record, result.details),
        metadata={
            "contentType": record.content_type.value,
            "contentId": str(record.id),
            "authorId": str(record.author_id),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )
