"""
Keyset pagination over the string primary key.

A cursor is the urlsafe-base64 JSON {"last_id": ...} of the final row on a
full page; the next page is every row with a greater id. A short page has
no cursor and no "next" link.
"""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any
from urllib.parse import urlencode

from fastapi import Query

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 500


def encode_cursor(last_id: str) -> str:
    return base64.urlsafe_b64encode(json.dumps({"last_id": last_id}).encode()).decode()


def decode_cursor(cursor: str) -> dict[str, str]:
    """Decode a cursor; anything malformed decodes to an empty dict."""
    try:
        payload = json.loads(base64.urlsafe_b64decode(cursor.encode()))
    except (binascii.Error, ValueError):
        return {}
    if not isinstance(payload, dict) or not isinstance(payload.get("last_id"), str):
        return {}
    return payload


def next_cursor(items: list[dict[str, Any]], page_size: int, id_field: str = "id") -> str | None:
    if not items or len(items) < page_size:
        return None
    return encode_cursor(str(items[-1][id_field]))


class PaginationParams:
    """`cursor` and `page_size` query parameters for list endpoints."""

    def __init__(
        self,
        cursor: str | None = Query(None, description="Cursor from the previous page's meta"),
        page_size: int = Query(
            DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Rows per page",
        ),
    ) -> None:
        self.cursor = cursor
        self.page_size = page_size

    @property
    def last_id(self) -> str | None:
        if not self.cursor:
            return None
        return decode_cursor(self.cursor).get("last_id")


def build_links(
    path: str,
    params: dict[str, Any],
    items: list[dict[str, Any]],
    page_size: int,
) -> dict[str, str]:
    """Return the "self" link and, after a full page, a "next" link."""
    present = {k: v for k, v in params.items() if v is not None}
    links = {"self": f"{path}?{urlencode(present)}" if present else path}

    cursor = next_cursor(items, page_size)
    if cursor:
        links["next"] = f"{path}?{urlencode({**present, 'cursor': cursor})}"
    return links
