"""Shared FastAPI dependencies."""

from __future__ import annotations

from swc_shared.db import get_session

from swc_api.utils.pagination import PaginationParams

__all__ = [
    "PaginationParams",
    "get_session",
]
