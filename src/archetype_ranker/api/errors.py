"""
Unified error handling for consistent API error responses.

All API errors use this format:
{
    "error": {
        "code": "ERROR_CODE",
        "message": "Human-readable message",
        "detail": "Optional additional context"
    }
}
"""

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

from ..core.errors import ArchetypeError


class APIError(HTTPException):
    """Base API error class for consistent error responses."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        detail: str | None = None,
        headers: dict[str, str] | None = None,
    ):
        self.code = code
        self.message = message
        self.error_detail = detail
        super().__init__(
            status_code=status_code,
            detail={"code": code, "message": message, "detail": detail},
            headers=headers,
        )


class DataError(APIError):
    """Profile data the engine rejected (400)."""

    def __init__(self, exc: ArchetypeError):
        super().__init__(
            status_code=400,
            code=exc.code,
            message=exc.message,
            detail=type(exc).__name__,
        )


class ServiceUnavailableError(APIError):
    """Archetype model not loaded (503)."""

    def __init__(self, message: str | None = None):
        super().__init__(
            status_code=503,
            code="SERVICE_UNAVAILABLE",
            message=message or "Archetype model is not loaded",
            detail="Check the configured archetypes_path and the startup logs",
        )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """
    FastAPI exception handler for APIError.

    Converts APIError exceptions to consistent JSON responses.
    """
    content = {
        "error": {
            "code": exc.code,
            "message": exc.message,
        }
    }
    if exc.error_detail:
        content["error"]["detail"] = exc.error_detail

    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=exc.headers,
    )


async def archetype_error_handler(request: Request, exc: ArchetypeError) -> JSONResponse:
    """Render engine errors that escaped a route as 400 responses."""
    return await api_error_handler(request, DataError(exc))
