"""Per-record content routes: read, edit, delete and pronunciations."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Request, status
from fastapi.responses import JSONResponse

from tajmaat.application.usecase.auth import GetCurrentUserUseCase
from tajmaat.application.usecase.content import (
    AddPronunciationRequest,
    AddPronunciationUseCase,
    DeleteContentRequest,
    DeleteContentUseCase,
    DeletePronunciationRequest,
    DeletePronunciationUseCase,
    GetContentRequest,
    GetContentUseCase,
    GetPronunciationRequest,
    GetPronunciationUseCase,
    UpdateContentRequest,
    UpdateContentUseCase,
    UpdatePronunciationRequest,
    UpdatePronunciationUseCase,
)
from tajmaat.domain.error import DomainError
from tajmaat.interface.api.envelope import success_response
from tajmaat.interface.api.payload import content_payload, pronunciation_payload
from tajmaat.interface.api.session import read_json, read_json_object, require_actor
from tajmaat.interface.error import ApiError, internal_error

router = APIRouter(prefix="/main", tags=["content"], route_class=DishkaRoute)


def _unexpected(action: str, error: Exception) -> ApiError:
    logfire.error(
        f"Unexpected error during {action}",
        error=str(error),
        error_type=type(error).__name__,
    )
    return internal_error()


@router.get("/{content_type}/{content_id}")
async def get_content(
    content_type: str,
    content_id: str,
    get_content_use_case: FromDishka[GetContentUseCase],
) -> JSONResponse:
    """Get a record with its author and engagement."""
    try:
        details = await get_content_use_case.execute(
            GetContentRequest(type=content_type, content_id=content_id)
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected("content read", e)

    return success_response(data=content_payload(details.content, details))


@router.patch("/{content_type}/{content_id}")
async def update_content(
    content_type: str,
    content_id: str,
    request: Request,
    update_content_use_case: FromDishka[UpdateContentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> JSONResponse:
    """Edit the updatable fields of a record.

    Body: a partial payload using the same keys as upload data. Only the
    author may edit.
    """
    user_id = await require_actor(auth_token, get_current_user_use_case)
    body = await read_json(request)

    try:
        updated = await update_content_use_case.execute(
            UpdateContentRequest(
                type=content_type, content_id=content_id, user_id=user_id, data=body
            )
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected("content update", e)

    return success_response(
        message=f"{updated.content_type.label} updated successfully",
        data=content_payload(updated),
    )


@router.delete("/{content_type}/{content_id}")
async def delete_content(
    content_type: str,
    content_id: str,
    delete_content_use_case: FromDishka[DeleteContentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> JSONResponse:
    """Delete a record. Only the author may delete."""
    user_id = await require_actor(auth_token, get_current_user_use_case)

    try:
        await delete_content_use_case.execute(
            DeleteContentRequest(
                type=content_type, content_id=content_id, user_id=user_id
            )
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected("content delete", e)

    return success_response(message="Content deleted successfully")


@router.post(
    "/{content_type}/{content_id}/pronunciations",
    status_code=status.HTTP_201_CREATED,
)
async def add_pronunciation(
    content_type: str,
    content_id: str,
    request: Request,
    add_pronunciation_use_case: FromDishka[AddPronunciationUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> JSONResponse:
    """Record a pronunciation of a sentence or word.

    Body: `{"accent": "...", "pronunciation": "..."}`.
    """
    user_id = await require_actor(auth_token, get_current_user_use_case)
    body = await read_json_object(request)

    try:
        pronunciation = await add_pronunciation_use_case.execute(
            AddPronunciationRequest(
                type=content_type,
                content_id=content_id,
                user_id=user_id,
                accent=body.get("accent"),
                pronunciation=body.get("pronunciation"),
            )
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected("pronunciation upload", e)

    return success_response(
        status.HTTP_201_CREATED,
        data=pronunciation.model_dump(mode="json", by_alias=True),
    )


@router.get("/{content_type}/{content_id}/pronunciations/{pronunciation_id}")
async def get_pronunciation(
    content_type: str,
    content_id: str,
    pronunciation_id: str,
    get_pronunciation_use_case: FromDishka[GetPronunciationUseCase],
) -> JSONResponse:
    """Get one pronunciation with its contributor."""
    try:
        entry = await get_pronunciation_use_case.execute(
            GetPronunciationRequest(
                type=content_type,
                content_id=content_id,
                pronunciation_id=pronunciation_id,
            )
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected("pronunciation read", e)

    return success_response(data=pronunciation_payload(entry))


@router.put("/{content_type}/{content_id}/pronunciations/{pronunciation_id}")
async def update_pronunciation(
    content_type: str,
    content_id: str,
    pronunciation_id: str,
    request: Request,
    update_pronunciation_use_case: FromDishka[UpdatePronunciationUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> JSONResponse:
    """Edit a pronunciation. Only its contributor may edit.

    Body: `{"accent": "...", "pronunciation": "..."}`.
    """
    user_id = await require_actor(auth_token, get_current_user_use_case)
    body = await read_json_object(request)

    try:
        pronunciation = await update_pronunciation_use_case.execute(
            UpdatePronunciationRequest(
                type=content_type,
                content_id=content_id,
                pronunciation_id=pronunciation_id,
                user_id=user_id,
                accent=body.get("accent"),
                pronunciation=body.get("pronunciation"),
            )
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected("pronunciation update", e)

    return success_response(data=pronunciation.model_dump(mode="json", by_alias=True))


@router.delete("/{content_type}/{content_id}/pronunciations/{pronunciation_id}")
async def delete_pronunciation(
    content_type: str,
    content_id: str,
    pronunciation_id: str,
    delete_pronunciation_use_case: FromDishka[DeletePronunciationUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> JSONResponse:
    """Delete a pronunciation. Only its contributor may delete."""
    user_id = await require_actor(auth_token, get_current_user_use_case)

    try:
        await delete_pronunciation_use_case.execute(
            DeletePronunciationRequest(
                type=content_type,
                content_id=content_id,
                pronunciation_id=pronunciation_id,
                user_id=user_id,
            )
        )
    except DomainError:
        raise
    except Exception as e:
        raise _unexpected("pronunciation delete", e)

    return success_response(message="Pronunciation deleted successfully")
