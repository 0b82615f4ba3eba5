"""Response envelopes shared by every content route.

Success: `{success: true, ...}`. Failure: `{success: false, error, code, ...}`.
"""

from typing import Any

from fastapi.responses import JSONResponse


def success_response(status_code: int = 200, **body: Any) -> JSONResponse:
    """Build a success envelope."""
    return JSONResponse(status_code=status_code, content={"success": True, **body})


def error_response(
    status_code: int, error: str, code: str, **extra: Any
) -> JSONResponse:
    """Build a failure envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, "code": code, **extra},
    )
