"""SQLAlchemy filter builders for the list endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any

from sqlalchemy import Select
from sqlalchemy.orm import InstrumentedAttribute


def apply_date_filters(
    stmt: Select,
    column: InstrumentedAttribute,
    start_date: date | None,
    end_date: date | None,
) -> Select:
    """Apply an inclusive date range to a select statement."""
    if start_date is not None:
        stmt = stmt.where(column >= start_date)
    if end_date is not None:
        stmt = stmt.where(column <= end_date)
    return stmt


def apply_cursor_filter(
    stmt: Select,
    column: InstrumentedAttribute,
    last_id: str | None,
) -> Select:
    """Apply cursor-based pagination filter."""
    if last_id is not None:
        stmt = stmt.where(column > last_id)
    return stmt


def apply_text_search(
    stmt: Select,
    column: InstrumentedAttribute | None,
    search_term: str | None,
) -> Select:
    """Case-insensitive substring match; `%` and `_` in the term match literally."""
    if search_term and column is not None:
        escaped = (
            search_term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        )
        stmt = stmt.where(column.ilike(f"%{escaped}%", escape="\\"))
    return stmt


def apply_equality_filters(
    stmt: Select,
    table: type,
    filters: Mapping[str, Any],
) -> Select:
    """Apply column == value for every non-empty filter."""
    for name, value in filters.items():
        if value is None or value == "":
            continue
        stmt = stmt.where(getattr(table, name) == value)
    return stmt
