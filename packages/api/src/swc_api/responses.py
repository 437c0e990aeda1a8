"""
Response envelopes for the SWC API.

Successful bodies are {"data": ..., "meta": {...}, "links": {...}}; error
bodies are {"error": {"code", "message", "details"}}. The pydantic models
only document these shapes in the OpenAPI schema; handlers build plain dicts.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

MISSING_REFERENCE = "MISSING_REFERENCE"
INTEGRITY_ERROR = "INTEGRITY_ERROR"


class ErrorDetail(BaseModel):
    code: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class ApiError(BaseModel):
    error: ErrorDetail


# Extra OpenAPI responses shared by every write endpoint
WRITE_ERRORS: dict[int | str, dict[str, Any]] = {
    409: {"model": ApiError, "description": "Unique or restricted-delete violation"},
    422: {"model": ApiError, "description": "Missing parent row or invalid body"},
}


def wrap_response(
    data: Any,
    *,
    total_count: int | None = None,
    page_size: int | None = None,
    cursor: str | None = None,
    links: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Wrap one row, a list of rows or a summary in the data envelope."""
    meta = {"total_count": total_count, "page_size": page_size, "cursor": cursor}
    return {
        "data": data,
        "meta": {k: v for k, v in meta.items() if v is not None},
        "links": links or {},
    }


def error_response(
    code: str,
    message: str,
    *,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    err: dict[str, Any] = {"code": code, "message": message}
    if details:
        err["details"] = details
    return {"error": err}
