"""Error payloads shared by all API routes."""

from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: bool = True
    code: str
    message: str
    details: dict[str, Any] | None = None


def error_response(status_code: int, code: str, message: str, details: dict[str, Any] | None = None) -> JSONResponse:
    """Render an ErrorResponse with the given HTTP status."""
    payload = ErrorResponse(code=code, message=message, details=details)
    return JSONResponse(status_code=status_code, content=payload.model_dump())
