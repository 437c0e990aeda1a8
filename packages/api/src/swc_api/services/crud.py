"""Generic create / read / update / delete over a registered Resource."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any

import structlog
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from swc_shared.models.base import InsertModel, UpdateModel

from swc_api.services.resources import Resource
from swc_api.utils.filtering import (
    apply_cursor_filter,
    apply_date_filters,
    apply_equality_filters,
    apply_text_search,
)

log = structlog.get_logger(__name__)


class MissingReferenceError(LookupError):
    """A foreign-key field names a parent row that does not exist."""

    def __init__(self, field: str, table: str, ref_id: str) -> None:
        self.field = field
        self.table = table
        self.ref_id = ref_id
        super().__init__(f"{field} '{ref_id}' does not exist in {table}")


async def _check_references(
    session: AsyncSession,
    resource: Resource,
    values: Mapping[str, Any],
) -> None:
    for field, parent in resource.references.items():
        ref_id = values.get(field)
        if ref_id is None:
            continue
        if await session.get(parent, ref_id) is None:
            raise MissingReferenceError(field, parent.__tablename__, ref_id)


def _serialize(resource: Resource, row: Any) -> dict[str, Any]:
    return resource.read_model.from_db_row(row).to_json_dict()


async def _commit(
    session: AsyncSession, resource: Resource, action: str, stmt: Any = None,
) -> Any:
    try:
        result = await session.execute(stmt) if stmt is not None else None
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        log.warning(
            "integrity_error", resource=resource.name, action=action, error=str(exc.orig),
        )
        raise
    return result


async def list_rows(
    session: AsyncSession,
    resource: Resource,
    *,
    filters: Mapping[str, Any] | None = None,
    q: str | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
    page_size: int = 50,
    last_id: str | None = None,
) -> tuple[list[dict[str, Any]], int]:
    """Return one page of rows ordered by id, plus the total matching count."""
    table = resource.table
    search_column = getattr(table, resource.search_column) if resource.search_column else None

    stmt = select(table)
    stmt = apply_equality_filters(stmt, table, filters or {})
    stmt = apply_text_search(stmt, search_column, q)
    if resource.date_column:
        stmt = apply_date_filters(stmt, getattr(table, resource.date_column), start_date, end_date)

    total = (
        await session.execute(select(func.count()).select_from(stmt.subquery()))
    ).scalar_one()

    stmt = apply_cursor_filter(stmt, table.id, last_id)
    stmt = stmt.order_by(table.id).limit(page_size)
    rows = (await session.execute(stmt)).scalars().all()
    return [_serialize(resource, row) for row in rows], total


async def get_row(
    session: AsyncSession,
    resource: Resource,
    row_id: str,
) -> dict[str, Any] | None:
    row = await session.get(resource.table, row_id)
    return _serialize(resource, row) if row is not None else None


async def exists(session: AsyncSession, resource: Resource, row_id: str) -> bool:
    return await session.get(resource.table, row_id) is not None


async def create_row(
    session: AsyncSession,
    resource: Resource,
    payload: InsertModel,
) -> dict[str, Any]:
    values = payload.to_insert_dict()
    await _check_references(session, resource, values)

    row = resource.table(**values)
    session.add(row)
    await _commit(session, resource, "create")
    await session.refresh(row)
    log.info("row_created", resource=resource.name, id=row.id)
    return _serialize(resource, row)


async def update_row(
    session: AsyncSession,
    resource: Resource,
    row_id: str,
    payload: UpdateModel,
) -> dict[str, Any] | None:
    row = await session.get(resource.table, row_id)
    if row is None:
        return None

    values = payload.to_update_dict()
    await _check_references(session, resource, values)
    for name, value in values.items():
        setattr(row, name, value)

    await _commit(session, resource, "update")
    await session.refresh(row)
    log.info("row_updated", resource=resource.name, id=row_id, fields=sorted(values))
    return _serialize(resource, row)


async def delete_row(
    session: AsyncSession,
    resource: Resource,
    row_id: str,
) -> bool:
    """Delete one row; a parent that still has children raises IntegrityError."""
    table = resource.table
    result = await _commit(
        session, resource, "delete", delete(table).where(table.id == row_id),
    )
    deleted = result.rowcount > 0
    if deleted:
        log.info("row_deleted", resource=resource.name, id=row_id)
    return deleted
